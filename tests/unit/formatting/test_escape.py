"""Unit tests for MarkdownV2 escaping."""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tglog.formatting import MARKDOWN_V2_RESERVED, escape_markdown_v2


class TestEscapeMarkdownV2:
    def test_plain_text_unchanged(self) -> None:
        assert escape_markdown_v2("hello world") == "hello world"

    def test_empty_string(self) -> None:
        assert escape_markdown_v2("") == ""

    def test_every_reserved_character_escaped(self) -> None:
        for ch in MARKDOWN_V2_RESERVED:
            assert escape_markdown_v2(ch) == "\\" + ch

    def test_mixed_message(self) -> None:
        assert escape_markdown_v2("a.b*c") == "a\\.b\\*c"
        assert escape_markdown_v2("x (y) [z]!") == "x \\(y\\) \\[z\\]\\!"

    def test_backslash_is_not_reserved(self) -> None:
        assert escape_markdown_v2("C:\\temp") == "C:\\temp"

    def test_unicode_passes_through(self) -> None:
        assert escape_markdown_v2("数据库 ❌") == "数据库 ❌"

    def test_not_idempotent(self) -> None:
        once = escape_markdown_v2("v1.2")
        assert once == "v1\\.2"
        assert escape_markdown_v2(once) == "v1\\\\.2"
        assert escape_markdown_v2(once) != once


class TestEscapeProperties:
    @given(st.text())
    def test_one_backslash_per_reserved_character(self, text: str) -> None:
        escaped = escape_markdown_v2(text)
        reserved = sum(1 for ch in text if ch in MARKDOWN_V2_RESERVED)
        assert len(escaped) == len(text) + reserved

    @given(st.text())
    def test_removing_inserted_backslashes_restores_input(self, text: str) -> None:
        escaped = escape_markdown_v2(text)
        out: list[str] = []
        i = 0
        while i < len(escaped):
            if escaped[i] == "\\" and i + 1 < len(escaped) and escaped[i + 1] in MARKDOWN_V2_RESERVED:
                out.append(escaped[i + 1])
                i += 2
            else:
                out.append(escaped[i])
                i += 1
        assert "".join(out) == text

    @given(st.text(alphabet=st.sampled_from(MARKDOWN_V2_RESERVED), min_size=1))
    def test_reescaping_changes_output(self, text: str) -> None:
        once = escape_markdown_v2(text)
        assert escape_markdown_v2(once) != once
