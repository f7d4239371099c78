"""Unit tests – TelegramBotTransport against a mocked Bot API."""
from __future__ import annotations

import asyncio
import json

import httpx
import respx

from tglog.delivery import BotTransport, SendResult, TelegramBotTransport

SEND_URL = "https://api.telegram.org/bot123:ABC/sendMessage"


class TestTelegramBotTransport:
    def test_is_protocol_compatible(self) -> None:
        assert isinstance(TelegramBotTransport("123:ABC"), BotTransport)

    @respx.mock
    def test_successful_send(self) -> None:
        route = respx.post(SEND_URL).mock(
            return_value=httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})
        )

        async def run() -> SendResult:
            async with TelegramBotTransport("123:ABC") as transport:
                return await transport.send(-100123, "hello", "MarkdownV2")

        result = asyncio.run(run())
        assert result == SendResult(chat_id=-100123, success=True)
        sent = json.loads(route.calls.last.request.content)
        assert sent == {"chat_id": -100123, "text": "hello", "parse_mode": "MarkdownV2"}

    @respx.mock
    def test_plain_send_omits_parse_mode(self) -> None:
        route = respx.post(SEND_URL).mock(return_value=httpx.Response(200, json={"ok": True}))

        async def run() -> None:
            async with TelegramBotTransport("123:ABC") as transport:
                await transport.send("@ops", "plain")

        asyncio.run(run())
        assert "parse_mode" not in json.loads(route.calls.last.request.content)

    @respx.mock
    def test_api_error_is_failed_result(self) -> None:
        respx.post(SEND_URL).mock(
            return_value=httpx.Response(
                400, json={"ok": False, "error_code": 400, "description": "Bad Request: chat not found"}
            )
        )

        async def run() -> SendResult:
            async with TelegramBotTransport("123:ABC") as transport:
                return await transport.send(1, "x")

        result = asyncio.run(run())
        assert result.success is False
        assert result.error == "Bad Request: chat not found"

    @respx.mock
    def test_ok_false_with_200_is_failure(self) -> None:
        respx.post(SEND_URL).mock(return_value=httpx.Response(200, json={"ok": False}))

        async def run() -> SendResult:
            async with TelegramBotTransport("123:ABC") as transport:
                return await transport.send(1, "x")

        result = asyncio.run(run())
        assert result.success is False
        assert result.error == "HTTP 200"

    @respx.mock
    def test_non_json_error_body(self) -> None:
        respx.post(SEND_URL).mock(return_value=httpx.Response(502, text="Bad Gateway"))

        async def run() -> SendResult:
            async with TelegramBotTransport("123:ABC") as transport:
                return await transport.send(1, "x")

        result = asyncio.run(run())
        assert result == SendResult(chat_id=1, success=False, error="HTTP 502")

    @respx.mock
    def test_timeout_is_failed_result(self) -> None:
        respx.post(SEND_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        async def run() -> SendResult:
            async with TelegramBotTransport("123:ABC") as transport:
                return await transport.send(1, "x")

        result = asyncio.run(run())
        assert result.success is False
        assert result.error == "Telegram request timed out"

    @respx.mock
    def test_connection_error_is_failed_result(self) -> None:
        respx.post(SEND_URL).mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> SendResult:
            async with TelegramBotTransport("123:ABC") as transport:
                return await transport.send(1, "x")

        result = asyncio.run(run())
        assert result.success is False
        assert result.error == "refused"

    @respx.mock
    def test_custom_base_url(self) -> None:
        route = respx.post("http://localhost:8081/bot9:Z/sendMessage").mock(
            return_value=httpx.Response(200, json={"ok": True})
        )

        async def run() -> None:
            transport = TelegramBotTransport("9:Z", base_url="http://localhost:8081/")
            try:
                await transport.send(1, "x")
            finally:
                await transport.aclose()

        asyncio.run(run())
        assert route.called
