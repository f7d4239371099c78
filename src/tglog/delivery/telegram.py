"""Delivery – Telegram Bot API transport over httpx."""
from __future__ import annotations

import asyncio
import threading
from typing import Any

import httpx

from tglog.delivery.transport import ChatId, SendResult
from tglog.kernel.errors import DeliveryError
from tglog.observability.logging.diagnostics import get_logger

TELEGRAM_API_URL = "https://api.telegram.org"

log = get_logger(__name__)


class TelegramBotTransport:
    """Thin async client for ``sendMessage`` with structured error mapping.

    Authentication is the bot token embedded in the URL; rate limiting is
    left to Telegram (a 429 is just another failed send).

    One transport may serve relays running on different event loops: an
    ``httpx.AsyncClient`` is created lazily per running loop, because a
    client's connection pool is bound to the loop that first used it.
    :meth:`aclose` closes the client of the calling loop.  A *client* passed
    in is used as-is on every loop.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = TELEGRAM_API_URL,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self._endpoint = f"{base_url.rstrip('/')}/bot{token}/"
        self._timeout = timeout
        self._client_kwargs = kwargs
        self._shared_client = client
        self._clients: dict[asyncio.AbstractEventLoop, httpx.AsyncClient] = {}
        self._lock = threading.Lock()

    async def __aenter__(self) -> "TelegramBotTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._shared_client is not None:
            await self._shared_client.aclose()
            return
        with self._lock:
            client = self._clients.pop(asyncio.get_running_loop(), None)
        if client is not None:
            await client.aclose()

    def _client(self) -> httpx.AsyncClient:
        if self._shared_client is not None:
            return self._shared_client
        loop = asyncio.get_running_loop()
        with self._lock:
            client = self._clients.get(loop)
            if client is None:
                # forget clients of loops that have gone away
                for stale in [lp for lp in self._clients if lp.is_closed()]:
                    del self._clients[stale]
                client = httpx.AsyncClient(base_url=self._endpoint, timeout=self._timeout, **self._client_kwargs)
                self._clients[loop] = client
        return client

    async def send(
        self,
        chat_id: ChatId,
        text: str,
        parse_mode: str | None = None,
    ) -> SendResult:
        try:
            await self._send_message(chat_id, text, parse_mode)
        except DeliveryError as exc:
            log.debug("tglog.transport.send_failed", **exc.to_dict())
            return SendResult(chat_id=chat_id, success=False, error=exc.message)
        return SendResult(chat_id=chat_id, success=True)

    async def _send_message(self, chat_id: ChatId, text: str, parse_mode: str | None) -> dict[str, Any]:
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if parse_mode is not None:
            payload["parse_mode"] = parse_mode
        try:
            response = await self._client().post("sendMessage", json=payload)
        except httpx.TimeoutException as exc:
            raise DeliveryError(chat_id, "Telegram request timed out", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise DeliveryError(chat_id, str(exc) or type(exc).__name__, cause=exc) from exc

        body = _json_body(response)
        if response.is_error or not body.get("ok", False):
            description = body.get("description") or f"HTTP {response.status_code}"
            raise DeliveryError(chat_id, description, status_code=response.status_code)
        return body


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


__all__ = ["TELEGRAM_API_URL", "TelegramBotTransport"]
