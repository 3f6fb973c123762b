"""Tests for pi.table.settings.line_text -- text on border lines."""

from __future__ import annotations

from pi.table import BorderText, HorizontalLine, LineText, Rows, Style, Table


def _lines(*lines: str) -> str:
    return "\n".join(lines)


def _table() -> Table:
    return Table([[5, 6]]).apply(Style.modern())


class TestLineText:
    def test_top_line(self) -> None:
        table = _table().apply(LineText("Nums", Rows.first(), 1))
        assert str(table) == _lines(
            "┌Nums───┐",
            "│ 5 │ 6 │",
            "└───┴───┘",
        )

    def test_bottom_line(self) -> None:
        table = _table().apply(LineText("end.").horizontal(Rows.last()).with_offset(1))
        assert str(table).splitlines()[-1] == "└end.───┘"

    def test_negative_index_counts_from_bottom(self) -> None:
        assert str(_table().apply(LineText("end.", -1, 1))) == str(
            _table().apply(LineText("end.", Rows.last(), 1))
        )

    def test_clipped_at_line_end(self) -> None:
        table = _table().apply(LineText("abcdefghijkl", 0))
        assert str(table).splitlines()[0] == "abcdefghi"

    def test_line_not_drawn_drops_text(self) -> None:
        table = Table([[5, 6], [7, 8]]).apply(Style.psql(), LineText("x", 0))
        assert str(table) == _lines(
            " 5 | 6 ",
            "---+---",
            " 7 | 8 ",
        )

    def test_out_of_range_line_is_ignored(self) -> None:
        table = _table().apply(LineText("x", 7))
        assert str(table) == str(_table())

    def test_labels_on_every_line(self) -> None:
        style = Style.modern().remove_horizontal().horizontals({1: HorizontalLine("─", "┼", "├", "┤")})
        table = Table([[5, 6], [10, 11]]).apply(
            style,
            BorderText("Numbers", Rows.first(), 1),
            BorderText("More", 1, 1),
            BorderText("end.", Rows.last(), 1),
        )
        assert str(table) == _lines(
            "┌Numbers──┐",
            "│ 5  │ 6  │",
            "├More┼────┤",
            "│ 10 │ 11 │",
            "└end.┴────┘",
        )
