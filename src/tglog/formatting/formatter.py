"""Format modes and the MessageFormatter.

Rendering is pure apart from reading the clock: every branch has a default
for missing metadata, so it cannot fail.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tglog.delivery.request import DeliveryRequest, ParseMode
from tglog.formatting.escape import escape_markdown_v2
from tglog.formatting.levels import DEFAULT_LEVEL_EMOJIS, LevelEmojis
from tglog.formatting.snapshot import DEFAULT_PLACEHOLDER, MetadataSnapshot
from tglog.kernel.time import Clock, SystemClock

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclasses.dataclass(frozen=True)
class PlainText:
    name: ClassVar[str] = "text"


@dataclasses.dataclass(frozen=True)
class Markdown:
    name: ClassVar[str] = "markdown"


@dataclasses.dataclass(frozen=True)
class JsonEnvelope:
    """Code-fenced object-shaped line.

    The message is interpolated as-is, without JSON escaping, so a message
    containing quotes or backslashes yields text that is not valid JSON.
    Consumers rely on this exact shape.
    """

    name: ClassVar[str] = "json"


@dataclasses.dataclass(frozen=True)
class Template:
    """User format string with ``{emoji} {time} {msg} {level} {module} {file} {line}``."""

    fmt: str
    name: ClassVar[str] = "template"


type FormatMode = PlainText | Markdown | JsonEnvelope | Template

_NAMED_MODES: dict[str, FormatMode] = {
    "text": PlainText(),
    "markdown": Markdown(),
    "json": JsonEnvelope(),
}


def parse_format_mode(name: str) -> FormatMode:
    """Return the mode for ``"text"``, ``"markdown"`` or ``"json"``."""
    try:
        return _NAMED_MODES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown format mode {name!r}") from None


class MessageFormatter:
    """Turn a :class:`MetadataSnapshot` into a :class:`DeliveryRequest`."""

    def __init__(
        self,
        emojis: LevelEmojis = DEFAULT_LEVEL_EMOJIS,
        clock: Clock | None = None,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        self._emojis = emojis
        self._clock = clock or SystemClock()
        self._placeholder = placeholder

    def emoji(self, snapshot: MetadataSnapshot) -> str:
        return self._emojis.lookup(snapshot.level, self._placeholder)

    def timestamp(self) -> str:
        return self._clock.now().strftime(TIME_FORMAT)

    def render(self, mode: FormatMode, snapshot: MetadataSnapshot) -> DeliveryRequest:
        emoji = self.emoji(snapshot)
        now = self.timestamp()

        match mode:
            case Markdown():
                text = (
                    f"```\n{emoji} [{now}] {snapshot.module}:{snapshot.line} "
                    f"{snapshot.normalized_file} {escape_markdown_v2(snapshot.message)} "
                    f"[{snapshot.level_name}]\n```"
                )
                return DeliveryRequest(text, ParseMode.MARKDOWN_V2)
            case JsonEnvelope():
                text = (
                    f'``` {{"time": "{now}", "emoji": "{emoji}", "msg": "{snapshot.message}", '
                    f'"level": "{snapshot.level_name}", "module": "{snapshot.module}", '
                    f'"file": "{snapshot.normalized_file}", "line": {snapshot.line} }} ```'
                )
                return DeliveryRequest(text, ParseMode.MARKDOWN_V2)
            case Template(fmt=fmt):
                return DeliveryRequest(self._substitute(fmt, snapshot, emoji, now))
            case _:
                return DeliveryRequest(f"{emoji} [{now}] {snapshot.message}")

    @staticmethod
    def _substitute(fmt: str, snapshot: MetadataSnapshot, emoji: str, now: str) -> str:
        # Plain sequential str.replace: values are not escaped, and a value that
        # contains a later placeholder token gets substituted by that later step.
        return (
            fmt.replace("{emoji}", emoji)
            .replace("{time}", now)
            .replace("{msg}", snapshot.message)
            .replace("{level}", snapshot.level_name)
            .replace("{module}", snapshot.module)
            .replace("{file}", snapshot.normalized_file)
            .replace("{line}", str(snapshot.line))
        )


__all__ = [
    "FormatMode",
    "JsonEnvelope",
    "Markdown",
    "MessageFormatter",
    "PlainText",
    "TIME_FORMAT",
    "Template",
    "parse_format_mode",
]
