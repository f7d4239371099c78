"""Formatting – escaping, levels, metadata snapshots, tag filter and renderer."""
from tglog.formatting.escape import MARKDOWN_V2_RESERVED, escape_markdown_v2
from tglog.formatting.filters import TagFilter
from tglog.formatting.formatter import (
    FormatMode,
    JsonEnvelope,
    Markdown,
    MessageFormatter,
    PlainText,
    Template,
    parse_format_mode,
)
from tglog.formatting.levels import DEFAULT_LEVEL_EMOJIS, Level, LevelEmojis
from tglog.formatting.snapshot import DEFAULT_PLACEHOLDER, LogEvent, MetadataSnapshot

__all__ = [
    "DEFAULT_LEVEL_EMOJIS",
    "DEFAULT_PLACEHOLDER",
    "FormatMode",
    "JsonEnvelope",
    "Level",
    "LevelEmojis",
    "LogEvent",
    "MARKDOWN_V2_RESERVED",
    "Markdown",
    "MessageFormatter",
    "MetadataSnapshot",
    "PlainText",
    "TagFilter",
    "Template",
    "escape_markdown_v2",
    "parse_format_mode",
]
