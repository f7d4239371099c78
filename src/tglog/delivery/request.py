"""DeliveryRequest – one rendered message waiting in the delivery queue."""
from __future__ import annotations

import dataclasses


class ParseMode:
    """Telegram ``parse_mode`` values."""

    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


@dataclasses.dataclass(frozen=True)
class DeliveryRequest:
    """Rendered text plus the parse mode the transport should apply (``None`` = plain)."""

    text: str
    parse_mode: str | None = None


__all__ = ["DeliveryRequest", "ParseMode"]
