"""Unit tests for TagFilter."""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tglog.formatting import TagFilter


class TestTagFilter:
    def test_empty_filter_admits_empty_string(self) -> None:
        assert TagFilter().admits("") is True

    def test_matches_any_tag(self) -> None:
        f = TagFilter(["#alert", "#db"])
        assert f.admits("conn lost #db")
        assert f.admits("#alert: cpu")
        assert not f.admits("all good")

    def test_case_sensitive(self) -> None:
        assert not TagFilter(["#DB"]).admits("conn lost #db")

    def test_tags_preserve_order(self) -> None:
        assert TagFilter(["b", "a"]).tags == ("b", "a")

    @given(st.text())
    def test_empty_filter_admits_everything(self, message: str) -> None:
        assert TagFilter().admits(message)

    @given(st.lists(st.text(min_size=1), min_size=1, max_size=5), st.text())
    def test_admits_iff_some_tag_is_substring(self, tags: list[str], message: str) -> None:
        assert TagFilter(tags).admits(message) == any(t in message for t in tags)
