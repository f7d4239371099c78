"""Delivery – bot transport port."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = ["BotTransport", "ChatId", "SendResult"]

type ChatId = int | str


@dataclass(frozen=True)
class SendResult:
    """The delivery result for a single chat."""

    chat_id: ChatId
    success: bool
    error: str | None = None


@runtime_checkable
class BotTransport(Protocol):
    """Port: deliver one message to one chat.

    Implementations report failure through :class:`SendResult`; an exception
    escaping ``send`` is treated the same way by the delivery worker.
    """

    async def send(
        self,
        chat_id: ChatId,
        text: str,
        parse_mode: str | None = None,
    ) -> SendResult: ...
