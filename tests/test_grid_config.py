"""Tests for pi.table.grid.config -- overrides, spans and border resolution."""

from __future__ import annotations

from pi.table.grid.config import Borders, GridConfig, HorizontalLine, VerticalLine
from pi.table.grid.types import (
    GLOBAL,
    AlignmentHorizontal,
    Border,
    Entity,
    Padding,
)


def _ascii_config() -> GridConfig:
    config = GridConfig()
    config.set_borders(
        Borders(
            top="-",
            bottom="-",
            left="|",
            right="|",
            horizontal="-",
            vertical="|",
            top_left="+",
            top_right="+",
            bottom_left="+",
            bottom_right="+",
            top_intersection="+",
            bottom_intersection="+",
            left_intersection="+",
            right_intersection="+",
            intersection="+",
        )
    )
    return config


# ---------------------------------------------------------------------------
# Spans
# ---------------------------------------------------------------------------


class TestSpans:
    def test_set_and_get(self) -> None:
        config = GridConfig()
        config.set_span((1, 0), 3)
        assert config.get_span((1, 0)) == 3
        assert config.get_span((1, 1)) == 1

    def test_size_one_removes(self) -> None:
        config = GridConfig()
        config.set_span((0, 0), 2)
        config.set_span((0, 0), 1)
        assert list(config.iter_spans()) == []

    def test_clamped_to_column_count(self) -> None:
        config = GridConfig()
        config.set_span((0, 1), 5, count_cols=3)
        assert config.get_span((0, 1)) == 2

    def test_overlapping_span_is_replaced(self) -> None:
        config = GridConfig()
        config.set_span((0, 0), 3)
        config.set_span((0, 2), 2)
        assert list(config.iter_spans()) == [((0, 2), 2)]

    def test_origin_and_absorbed(self) -> None:
        config = GridConfig()
        config.set_span((0, 1), 2)
        assert config.span_origin((0, 2)) == (0, 1)
        assert config.span_origin((0, 1)) == (0, 1)
        assert config.is_absorbed((0, 2))
        assert not config.is_absorbed((1, 2))


# ---------------------------------------------------------------------------
# Layered settings
# ---------------------------------------------------------------------------


class TestLayeredSettings:
    """The most recently applied setting covering a cell wins."""

    def test_default_padding(self) -> None:
        assert GridConfig().get_padding((0, 0)) == Padding()

    def test_cell_after_global(self) -> None:
        config = GridConfig()
        config.set_padding(GLOBAL, Padding.zero())
        config.set_padding(Entity.cell(0, 0), Padding(left=3))
        assert config.get_padding((0, 0)).left == 3
        assert config.get_padding((0, 1)).left == 0

    def test_global_after_cell_overrides_it(self) -> None:
        config = GridConfig()
        config.set_alignment_horizontal(Entity.cell(0, 0), AlignmentHorizontal.RIGHT)
        config.set_alignment_horizontal(GLOBAL, AlignmentHorizontal.CENTER)
        assert config.get_alignment_horizontal((0, 0)) is AlignmentHorizontal.CENTER

    def test_row_and_column(self) -> None:
        config = GridConfig()
        config.set_alignment_horizontal(Entity.for_row(1), AlignmentHorizontal.RIGHT)
        config.set_alignment_horizontal(Entity.for_column(0), AlignmentHorizontal.CENTER)
        assert config.get_alignment_horizontal((1, 0)) is AlignmentHorizontal.CENTER
        assert config.get_alignment_horizontal((1, 1)) is AlignmentHorizontal.RIGHT
        assert config.get_alignment_horizontal((0, 1)) is AlignmentHorizontal.LEFT


# ---------------------------------------------------------------------------
# Border resolution
# ---------------------------------------------------------------------------


class TestBorderGrid:
    def test_style_characters(self) -> None:
        borders = _ascii_config().resolve_borders((2, 2))
        assert borders.intersection_char(0, 0) == "+"
        assert borders.horizontal_char(1, 1) == "-"
        assert borders.vertical_char(0, 2) == "|"

    def test_line_exists_only_when_something_draws_it(self) -> None:
        config = GridConfig()
        config.set_borders(Borders(vertical="|"))
        config.set_horizontal_line(1, HorizontalLine("-", "+"))
        shape = (3, 2)
        assert not config.has_horizontal(0, shape)
        assert config.has_horizontal(1, shape)
        assert not config.has_horizontal(2, shape)
        assert not config.has_vertical(0, shape)
        assert config.has_vertical(1, shape)

    def test_empty_line_override_hides_style_line(self) -> None:
        config = _ascii_config()
        config.set_horizontal_line(1, HorizontalLine())
        assert not config.has_horizontal(1, (2, 1))

    def test_segment_override_creates_line(self) -> None:
        config = GridConfig()
        config.set_horizontal_char(0, 1, "=")
        borders = config.resolve_borders((1, 2))
        assert borders.has_horizontal(0)
        assert borders.horizontal_char(0, 1) == "="
        assert borders.horizontal_char(0, 0) is None

    def test_cell_border_beats_style(self) -> None:
        config = _ascii_config()
        config.set_border((0, 0), Border(top="=", top_left="#"))
        borders = config.resolve_borders((1, 1))
        assert borders.horizontal_char(0, 0) == "="
        assert borders.intersection_char(0, 0) == "#"
        assert borders.horizontal_char(1, 0) == "-"

    def test_neighbouring_cell_borders_last_write_wins(self) -> None:
        config = _ascii_config()
        config.set_border((0, 0), Border(right="#"))
        config.set_border((0, 1), Border(left="@"))
        assert config.resolve_borders((1, 2)).vertical_char(0, 1) == "@"

        config.set_border((0, 0), Border(right="#"))
        assert config.resolve_borders((1, 2)).vertical_char(0, 1) == "#"

    def test_border_on_absorbed_cell_moves_to_origin(self) -> None:
        config = GridConfig()
        config.set_span((0, 0), 2)
        config.set_border((0, 1), Border(bottom="="))
        assert config.get_border((0, 0)) == Border(bottom="=")
        borders = config.resolve_borders((1, 2))
        assert borders.horizontal_char(1, 0) == "="
        assert borders.horizontal_char(1, 1) == "="
        assert borders.intersection_char(1, 1) == "="

    def test_remove_border_clears_perimeter(self) -> None:
        config = _ascii_config()
        config.set_border((0, 0), Border.filled("#"))
        config.set_vertical_char(0, 1, "*")
        config.remove_border((0, 0))
        borders = config.resolve_borders((1, 2))
        assert config.get_border((0, 0)) is None
        assert borders.vertical_char(0, 1) == "|"
        assert borders.intersection_char(0, 0) == "+"

    def test_vertical_line_override(self) -> None:
        config = _ascii_config()
        config.set_vertical_line(1, VerticalLine("!", "*", "v", "^"))
        borders = config.resolve_borders((2, 2))
        assert borders.vertical_char(0, 1) == "!"
        assert borders.intersection_char(0, 1) == "v"
        assert borders.intersection_char(1, 1) == "*"
        assert borders.intersection_char(2, 1) == "^"

    def test_horizontal_line_override_takes_intersections(self) -> None:
        config = _ascii_config()
        config.set_horizontal_line(1, HorizontalLine("=", "#", "<", ">"))
        borders = config.resolve_borders((2, 2))
        assert borders.horizontal_char(1, 0) == "="
        assert borders.intersection_char(1, 0) == "<"
        assert borders.intersection_char(1, 1) == "#"
        assert borders.intersection_char(1, 2) == ">"


class TestCorrectSpans:
    """Intersections follow the vertical lines that actually meet them."""

    def _config(self) -> GridConfig:
        config = GridConfig()
        config.set_borders(
            Borders(
                top="─",
                bottom="─",
                horizontal="─",
                vertical="│",
                top_intersection="┬",
                bottom_intersection="┴",
                intersection="┼",
            )
        )
        config.correct_spans = True
        config.set_span((1, 0), 2)
        return config

    def test_no_arm_below(self) -> None:
        borders = self._config().resolve_borders((3, 2))
        assert borders.intersection_char(1, 1) == "┴"

    def test_no_arm_above(self) -> None:
        borders = self._config().resolve_borders((3, 2))
        assert borders.intersection_char(2, 1) == "┬"

    def test_full_cross_untouched(self) -> None:
        config = self._config()
        config.set_span((1, 0), 1)
        assert config.resolve_borders((3, 2)).intersection_char(1, 1) == "┼"

    def test_edge_line_without_arm_becomes_horizontal(self) -> None:
        config = self._config()
        config.set_span((0, 0), 2)
        assert config.resolve_borders((3, 2)).intersection_char(0, 1) == "─"


# ---------------------------------------------------------------------------
# Structural changes
# ---------------------------------------------------------------------------


class TestInsertRow:
    def test_row_keyed_overrides_shift(self) -> None:
        config = GridConfig()
        config.set_span((1, 0), 2)
        config.set_border((2, 1), Border(top="="))
        config.set_padding(Entity.for_row(1), Padding(left=4))
        config.set_row_height(0, 3)
        config.insert_row(1)

        assert config.get_span((2, 0)) == 2
        assert config.get_span((1, 0)) == 1
        assert config.get_border((3, 1)) == Border(top="=")
        assert config.get_padding((2, 0)).left == 4
        assert config.get_padding((1, 0)).left == 1
        assert config.get_row_height(0) == 3

    def test_style_lines_do_not_shift(self) -> None:
        config = GridConfig()
        config.set_horizontal_line(1, HorizontalLine("-"))
        config.insert_row(0)
        assert config.get_horizontal_line(1) == HorizontalLine("-")
        assert config.get_horizontal_line(2) is None


class TestCopy:
    def test_copy_is_independent(self) -> None:
        config = GridConfig()
        config.set_span((0, 0), 2)
        clone = config.copy()
        clone.set_span((0, 0), 1)
        assert config.get_span((0, 0)) == 2
        assert clone.get_span((0, 0)) == 1
