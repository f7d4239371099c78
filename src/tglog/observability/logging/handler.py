"""Observability – TelegramLogHandler, the stdlib ``logging`` adapter."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tglog.formatting.snapshot import LogEvent
from tglog.observability.logging.diagnostics import is_internal

if TYPE_CHECKING:
    from tglog.sink import EventSink


class TelegramLogHandler(logging.Handler):
    """Forward log records to Telegram through an :class:`EventSink`.

    ``emit`` formats inline and schedules delivery; it never waits on the
    network.  Records from the relay's own ``tglog.*`` loggers are ignored.

    Typical usage::

        sink = TelegramRelayBuilder().bot_token(token).chat_id(chat).markdown().build()
        logging.getLogger().addHandler(TelegramLogHandler(sink, level=logging.WARNING))
    """

    def __init__(self, sink: "EventSink", level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._sink = sink

    @property
    def sink(self) -> "EventSink":
        return self._sink

    def emit(self, record: logging.LogRecord) -> None:
        if is_internal(record.name):
            return
        try:
            self._sink.capture(LogEvent.from_record(record))
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def close(self) -> None:
        try:
            self._sink.close()
        finally:
            super().close()


__all__ = ["TelegramLogHandler"]
