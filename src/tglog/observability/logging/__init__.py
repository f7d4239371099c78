"""Observability – logging adapters feeding the relay, plus its diagnostics logger."""
from tglog.observability.logging.diagnostics import (
    INTERNAL_LOGGER_PREFIX,
    LOGGER_NAME_KEY,
    get_logger,
    is_internal,
    is_internal_event,
)
from tglog.observability.logging.handler import TelegramLogHandler
from tglog.observability.logging.processors import TelegramProcessor

__all__ = [
    "INTERNAL_LOGGER_PREFIX",
    "LOGGER_NAME_KEY",
    "TelegramLogHandler",
    "TelegramProcessor",
    "get_logger",
    "is_internal",
    "is_internal_event",
]
