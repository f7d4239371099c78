"""Severity levels and the level → emoji table."""
from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from types import MappingProxyType

TRACE = 5


class Level(enum.IntEnum):
    """Ordered event severity: ``ERROR > WARN > INFO > DEBUG > TRACE``."""

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level | None":
        """Map a stdlib level number; ``None`` when there is no exact match."""
        if levelno == logging.CRITICAL:
            return cls.ERROR
        try:
            return cls(levelno)
        except ValueError:
            return None

    @classmethod
    def from_name(cls, name: str) -> "Level | None":
        """Map a structlog method / stdlib level name (case-insensitive)."""
        return _NAMES.get(name.lower())


_NAMES: Mapping[str, Level] = MappingProxyType({
    "trace": Level.TRACE,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "msg": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "critical": Level.ERROR,
    "fatal": Level.ERROR,
})


class LevelEmojis:
    """Immutable Level → glyph table.

    Built explicitly and handed to the formatter; nothing looks it up
    through module state.
    """

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[Level, str]) -> None:
        self._table: Mapping[Level, str] = MappingProxyType(dict(table))

    def lookup(self, level: Level | int, default: str) -> str:
        """Return the glyph for *level*, or *default* for an unmapped level."""
        if not isinstance(level, Level):
            return default
        return self._table.get(level, default)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"LevelEmojis({dict(self._table)!r})"


DEFAULT_LEVEL_EMOJIS = LevelEmojis({
    Level.ERROR: "❌",
    Level.WARN: "⚠️",
    Level.INFO: "ℹ️",
    Level.DEBUG: "🔍",
    Level.TRACE: "📝",
})

__all__ = ["DEFAULT_LEVEL_EMOJIS", "TRACE", "Level", "LevelEmojis"]
