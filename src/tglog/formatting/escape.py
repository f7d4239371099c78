"""Telegram MarkdownV2 escaping."""
from __future__ import annotations

import re

MARKDOWN_V2_RESERVED = "_*[]()~`>#+-=|{}.!"

_RESERVED_RE = re.compile("([" + re.escape(MARKDOWN_V2_RESERVED) + "])")


def escape_markdown_v2(text: str) -> str:
    """Backslash-prefix every MarkdownV2 reserved character in *text*.

    Not idempotent: escaping already-escaped text escapes it again, so
    callers escape exactly once per rendered message.
    """
    return _RESERVED_RE.sub(r"\\\1", text)


__all__ = ["MARKDOWN_V2_RESERVED", "escape_markdown_v2"]
