"""Unit tests – TelegramLogHandler (stdlib logging adapter)."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from tglog import TelegramRelayBuilder
from tglog.observability.logging import TelegramLogHandler
from tglog.kernel.time import FrozenClock
from tglog.testing import InMemoryBotTransport


@pytest.fixture
def app_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("tests.relay.app")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    logger.handlers.clear()


class TestTelegramLogHandler:
    def test_relays_records(self, app_logger: logging.Logger, frozen_clock: FrozenClock) -> None:
        async def run() -> InMemoryBotTransport:
            transport = InMemoryBotTransport()
            sink = TelegramRelayBuilder().transport(transport).chat_id(7).clock(frozen_clock).build()
            app_logger.addHandler(sink.handler(logging.WARNING))
            app_logger.info("ignored by level")
            app_logger.warning("disk %s", "low")
            await sink.queue.stop(timeout=2.0)
            return transport

        transport = asyncio.run(run())
        assert [m.text for m in transport.sent] == ["⚠️ [2026-01-01 12:00:00] disk low"]

    def test_markdown_carries_location(self, app_logger: logging.Logger) -> None:
        async def run() -> InMemoryBotTransport:
            transport = InMemoryBotTransport()
            sink = TelegramRelayBuilder().transport(transport).chat_id(7).markdown().build()
            app_logger.addHandler(TelegramLogHandler(sink))
            app_logger.error("db down")
            await sink.queue.stop(timeout=2.0)
            return transport

        sent = asyncio.run(run()).sent[0]
        assert sent.parse_mode == "MarkdownV2"
        assert "tests.relay.app:" in sent.text
        assert "test_relay_handler.py" in sent.text
        assert "[ERROR]" in sent.text

    def test_empty_message_not_relayed(self, app_logger: logging.Logger) -> None:
        async def run() -> InMemoryBotTransport:
            transport = InMemoryBotTransport()
            sink = TelegramRelayBuilder().transport(transport).chat_id(7).build()
            app_logger.addHandler(sink.handler())
            app_logger.error("")
            await sink.queue.stop(timeout=1.0)
            return transport

        assert asyncio.run(run()).count == 0

    def test_internal_loggers_are_skipped(self) -> None:
        sink = MagicMock()
        handler = TelegramLogHandler(sink)
        record = logging.LogRecord(
            name="tglog.delivery.queue", level=logging.WARNING, pathname="", lineno=0,
            msg="tglog.delivery.failed", args=(), exc_info=None,
        )
        handler.emit(record)
        sink.capture.assert_not_called()

    def test_similarly_named_logger_is_not_internal(self) -> None:
        sink = MagicMock()
        handler = TelegramLogHandler(sink)
        record = logging.LogRecord(
            name="tglogger", level=logging.WARNING, pathname="", lineno=0,
            msg="hello", args=(), exc_info=None,
        )
        handler.emit(record)
        sink.capture.assert_called_once()

    def test_capture_failure_goes_to_handle_error(self) -> None:
        sink = MagicMock()
        sink.capture.side_effect = RuntimeError("boom")
        handler = TelegramLogHandler(sink)
        handler.handleError = MagicMock()  # type: ignore[method-assign]
        record = logging.LogRecord(
            name="app", level=logging.ERROR, pathname="", lineno=0,
            msg="x", args=(), exc_info=None,
        )
        handler.emit(record)  # must not raise
        handler.handleError.assert_called_once_with(record)

    def test_close_closes_sink(self) -> None:
        sink = MagicMock()
        TelegramLogHandler(sink).close()
        sink.close.assert_called_once()
