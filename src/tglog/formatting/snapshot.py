"""LogEvent and MetadataSnapshot – what the relay knows about one log call."""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from tglog.formatting.levels import Level

DEFAULT_PLACEHOLDER = "Unknown"


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One log record as seen by the relay, independent of the logging library.

    ``level`` is a :class:`Level`, or the raw level number when it has no
    counterpart (e.g. a custom stdlib level).
    """

    level: Level | int
    message: str
    module: str | None = None
    file: str | None = None
    line: int | None = None

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEvent":
        level = Level.from_levelno(record.levelno)
        return cls(
            level=level if level is not None else record.levelno,
            message=record.getMessage(),
            module=record.name or None,
            file=record.pathname or None,
            line=record.lineno or None,
        )

    @classmethod
    def from_event_dict(cls, method_name: str, event_dict: Mapping[str, Any]) -> "LogEvent":
        """Build from a structlog event dict.

        Source location is only available when ``CallsiteParameterAdder``
        runs before the relay processor.
        """
        level_name = event_dict.get("level", method_name)
        level = Level.from_name(str(level_name))
        if level is None:
            level = logging.getLevelNamesMapping().get(str(level_name).upper(), logging.NOTSET)
        event = event_dict.get("event")
        module = event_dict.get("module") or event_dict.get("logger")
        return cls(
            level=level,
            message="" if event is None else str(event),
            module=str(module) if module else None,
            file=event_dict.get("pathname") or None,
            line=event_dict.get("lineno") or None,
        )


@dataclasses.dataclass(frozen=True)
class MetadataSnapshot:
    """Render-ready metadata with every missing field already defaulted."""

    level: Level | int
    message: str
    module: str
    file: str
    line: int

    @classmethod
    def capture(cls, event: LogEvent, placeholder: str = DEFAULT_PLACEHOLDER) -> "MetadataSnapshot":
        return cls(
            level=event.level,
            message=event.message,
            module=event.module if event.module is not None else placeholder,
            file=event.file if event.file is not None else placeholder,
            line=event.line if event.line is not None else 0,
        )

    @property
    def level_name(self) -> str:
        if isinstance(self.level, Level):
            return str(self.level)
        return logging.getLevelName(self.level)

    @property
    def normalized_file(self) -> str:
        """File path with Windows separators turned into ``/``."""
        return self.file.replace("\\", "/")


__all__ = ["DEFAULT_PLACEHOLDER", "LogEvent", "MetadataSnapshot"]
