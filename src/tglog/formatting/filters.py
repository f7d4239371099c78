"""TagFilter – substring admission rule applied before formatting."""
from __future__ import annotations

from collections.abc import Iterable


class TagFilter:
    """Admit a message when it contains any configured tag.

    Matching is case-sensitive substring search.  With no tags configured
    every message is admitted, including the empty string.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[str] = ()) -> None:
        self._tags: tuple[str, ...] = tuple(tags)

    @property
    def tags(self) -> tuple[str, ...]:
        return self._tags

    def admits(self, message: str) -> bool:
        if not self._tags:
            return True
        return any(tag in message for tag in self._tags)

    def __repr__(self) -> str:
        return f"TagFilter({list(self._tags)!r})"


__all__ = ["TagFilter"]
