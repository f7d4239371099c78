"""EventSink – the per-event entry point shared by every logging adapter."""
from __future__ import annotations

import logging

from tglog.delivery.queue import DeliveryQueue
from tglog.formatting import (
    DEFAULT_PLACEHOLDER,
    FormatMode,
    LogEvent,
    MessageFormatter,
    MetadataSnapshot,
    PlainText,
    TagFilter,
)
from tglog.observability.logging import TelegramLogHandler, TelegramProcessor


class EventSink:
    """Filter, snapshot, render and hand one event to the delivery queue.

    :meth:`capture` never raises and never waits on delivery; the caller
    learns nothing about whether the message reached Telegram.
    """

    def __init__(
        self,
        queue: DeliveryQueue,
        formatter: MessageFormatter | None = None,
        mode: FormatMode = PlainText(),
        tag_filter: TagFilter | None = None,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        self._queue = queue
        self._formatter = formatter or MessageFormatter(placeholder=placeholder)
        self._mode = mode
        self._filter = tag_filter or TagFilter()
        self._placeholder = placeholder

    @property
    def queue(self) -> DeliveryQueue:
        return self._queue

    @property
    def mode(self) -> FormatMode:
        return self._mode

    @property
    def tag_filter(self) -> TagFilter:
        return self._filter

    @property
    def placeholder(self) -> str:
        return self._placeholder

    def capture(self, event: LogEvent) -> bool:
        """Relay *event*; returns whether a request was submitted."""
        if not event.message or not self._filter.admits(event.message):
            return False
        snapshot = MetadataSnapshot.capture(event, self._placeholder)
        request = self._formatter.render(self._mode, snapshot)
        return self._queue.submit(request)

    def handler(self, level: int = logging.NOTSET) -> TelegramLogHandler:
        """Return a :class:`logging.Handler` feeding this sink."""
        return TelegramLogHandler(self, level=level)

    def processor(self) -> TelegramProcessor:
        """Return a structlog processor feeding this sink."""
        return TelegramProcessor(self)

    def close(self) -> None:
        self._queue.close()


__all__ = ["EventSink"]
