"""Observability – the relay's own diagnostic logger.

Diagnostics are emitted under the ``tglog`` logger namespace; both relay
sinks skip that namespace so a delivery failure never loops back into the
delivery queue.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

INTERNAL_LOGGER_PREFIX = "tglog"
LOGGER_NAME_KEY = "logger_name"


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger with *initial_values* bound.

    The logger name is also bound as ``logger_name`` so structlog pipelines
    that do not run ``add_logger_name`` can still recognise relay
    diagnostics.  (``logger`` itself is a parameter of
    :func:`structlog.wrap_logger` and cannot be passed as a value.)  The
    returned proxy resolves the structlog configuration on every call.
    """
    if name:
        initial_values.setdefault(LOGGER_NAME_KEY, name)
    return structlog.get_logger(name, **initial_values)


def is_internal(logger_name: str | None) -> bool:
    """True for loggers inside the relay's own namespace."""
    if not logger_name:
        return False
    return logger_name == INTERNAL_LOGGER_PREFIX or logger_name.startswith(INTERNAL_LOGGER_PREFIX + ".")


def is_internal_event(event_dict: Mapping[str, Any]) -> bool:
    """True for structlog events emitted by relay diagnostics."""
    return is_internal(event_dict.get("logger")) or is_internal(event_dict.get(LOGGER_NAME_KEY))


__all__ = ["INTERNAL_LOGGER_PREFIX", "LOGGER_NAME_KEY", "get_logger", "is_internal", "is_internal_event"]
