"""Tests for pi.table.utils -- cell text measurement and truncation."""

from __future__ import annotations

from pi.table.utils import (
    expand_tabs,
    overlay_text,
    strip_ansi,
    text_dimension,
    truncate_to_width,
    visible_width,
)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    """Measure the visible terminal width of cell text."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[1m\x1b[31mabc\x1b[0m") == 3

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("A世B") == 4

    def test_combining_mark_has_no_width(self) -> None:
        assert visible_width("e\u0301") == 1

    def test_osc8_hyperlink_does_not_count(self) -> None:
        text = "\x1b]8;;https://example.com\x07link\x1b]8;;\x07"
        assert visible_width(text) == 4

    def test_strip_ansi(self) -> None:
        assert strip_ansi("\x1b[32mok\x1b[0m") == "ok"


# ---------------------------------------------------------------------------
# Multi-line text
# ---------------------------------------------------------------------------


class TestTextDimension:
    def test_single_line(self) -> None:
        assert text_dimension("abc") == (3, 1)

    def test_widest_line_wins(self) -> None:
        assert text_dimension("a\nabcd\nab") == (4, 3)

    def test_empty_text_is_one_empty_line(self) -> None:
        assert text_dimension("") == (0, 1)

    def test_trailing_newline_adds_a_line(self) -> None:
        assert text_dimension("a\n") == (1, 2)

    def test_expand_tabs(self) -> None:
        assert expand_tabs("\tx", 3) == "   x"
        assert expand_tabs("a\tb", 0) == "ab"


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------


class TestTruncateToWidth:
    """Cut text to a visible width at grapheme boundaries."""

    def test_short_text_unchanged(self) -> None:
        assert truncate_to_width("abc", 5) == "abc"

    def test_cut_without_suffix(self) -> None:
        assert truncate_to_width("hello world", 5) == "hello"

    def test_suffix_counts_towards_width(self) -> None:
        result = truncate_to_width("hello world", 8, "...")
        assert result == "hello..."
        assert visible_width(result) == 8

    def test_zero_width(self) -> None:
        assert truncate_to_width("abc", 0) == ""

    def test_suffix_wider_than_width(self) -> None:
        assert truncate_to_width("abcdef", 2, "...") == ".."

    def test_wide_char_is_not_split(self) -> None:
        # Two wide characters need 4 columns; only one fits in 3.
        assert truncate_to_width("世世", 3) == "世"

    def test_ansi_codes_are_kept(self) -> None:
        result = truncate_to_width("\x1b[31mhello\x1b[0m", 3)
        assert strip_ansi(result) == "hel"
        assert result.startswith("\x1b[31m")


# ---------------------------------------------------------------------------
# overlay_text
# ---------------------------------------------------------------------------


class TestOverlayText:
    def test_writes_at_offset(self) -> None:
        assert overlay_text("┌───┬───┐", "Nums", 1) == "┌Nums───┐"

    def test_clipped_at_line_end(self) -> None:
        assert overlay_text("+-----+", "abcdef", 4) == "+---abc"

    def test_offset_past_end_is_ignored(self) -> None:
        assert overlay_text("+---+", "x", 9) == "+---+"
