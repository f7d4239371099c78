"""Observability – TelegramProcessor, the structlog adapter."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tglog.formatting.snapshot import LogEvent
from tglog.observability.logging.diagnostics import get_logger, is_internal_event

if TYPE_CHECKING:
    from tglog.sink import EventSink

log = get_logger(__name__)


class TelegramProcessor:
    """structlog processor that relays each event and passes it on unchanged.

    Place it after ``add_log_level`` (and ``CallsiteParameterAdder`` for
    module/file/line) and before the renderer::

        structlog.configure(processors=[
            structlog.processors.add_log_level,
            structlog.processors.CallsiteParameterAdder(),
            sink.processor(),
            structlog.processors.JSONRenderer(),
        ])
    """

    def __init__(self, sink: "EventSink") -> None:
        self._sink = sink

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        if is_internal_event(event_dict):
            return event_dict
        try:
            self._sink.capture(LogEvent.from_event_dict(method_name, event_dict))
        except Exception as exc:  # noqa: BLE001
            log.error("tglog.processor.capture_failed", error=repr(exc))
        return event_dict


__all__ = ["TelegramProcessor"]
