"""Tests for pi.table.settings.measurement -- fixed widths and heights."""

from __future__ import annotations

from pi.table import Columns, Height, Rows, Table, Width


def _lines(*lines: str) -> str:
    return "\n".join(lines)


class TestWidth:
    def test_column_width_with_suffix(self) -> None:
        table = Table([["hello world"]]).modify(Columns.first(), Width.column(7, "~"))
        assert str(table) == _lines(
            "+-------+",
            "| hell~ |",
            "+-------+",
        )

    def test_column_narrower_than_padding(self) -> None:
        table = Table([["abc"]]).modify(Columns.first(), Width.column(1))
        assert str(table) == _lines("+-+", "| |", "+-+")

    def test_width_list(self) -> None:
        table = Table([["abc", "def"]]).apply(Width.list([5, 3]))
        assert str(table).splitlines()[1] == "| abc | d |"

    def test_truncate_total(self) -> None:
        table = Table([["hello world"]]).apply(Width.truncate(10))
        assert str(table) == _lines(
            "+--------+",
            "| hello  |",
            "+--------+",
        )
        assert table.total_width() == 10

    def test_truncate_with_suffix(self) -> None:
        table = Table([["hello world"]]).apply(Width.truncate(10, "..."))
        assert str(table).splitlines()[1] == "| hel... |"

    def test_truncate_leaves_narrow_table_alone(self) -> None:
        table = Table([["abc"]])
        assert str(table.copy().apply(Width.truncate(50))) == str(table)

    def test_truncate_takes_from_widest_column(self) -> None:
        table = Table([["abcdef", "ab"]]).apply(Width.truncate(13))
        assert str(table).splitlines()[1] == "| abcd | ab |"

    def test_increase_total(self) -> None:
        table = Table([["hello world"]]).apply(Width.increase(20))
        assert str(table).splitlines()[1] == "| hello world      |"
        assert table.total_width() == 20

    def test_increase_never_shrinks(self) -> None:
        table = Table([["hello world"]]).apply(Width.increase(5))
        assert table.total_width() == 15


class TestHeight:
    def test_row_height(self) -> None:
        table = Table([["a"]]).modify(Rows.first(), Height.row(3))
        assert str(table) == _lines(
            "+---+",
            "| a |",
            "|   |",
            "|   |",
            "+---+",
        )

    def test_height_cuts_lines(self) -> None:
        table = Table([["a\nb\nc"]]).modify(Rows.first(), Height.row(2))
        assert str(table).splitlines()[1:3] == ["| a |", "| b |"]

    def test_height_list(self) -> None:
        table = Table([["a"], ["b"]]).apply(Height.list([2, 0]))
        assert str(table) == _lines(
            "+---+",
            "| a |",
            "|   |",
            "+---+",
            "+---+",
        )


class TestTargetModes:
    def test_constructors_set_mode(self) -> None:
        assert Width.truncate(10).target.mode == "truncate"
        assert Width.increase(10).target.mode == "increase"
