"""Concatenation of two tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pi.table.grid.config import GridConfig
from pi.table.records import VecRecords

if TYPE_CHECKING:
    from pi.table.table import Table

Axis = Literal["horizontal", "vertical"]


class Concat:
    """Append another table below (``vertical``) or to the right (``horizontal``).

    The other table's records are copied and its cell-level settings are
    deep-copied at the new offset; its style is dropped in favour of this
    table's.  The shorter side is filled with empty cells.
    """

    def __init__(self, table: Table, axis: Axis) -> None:
        self.table = table
        self.axis = axis

    @classmethod
    def horizontal(cls, table: Table) -> Concat:
        return cls(table, "horizontal")

    @classmethod
    def vertical(cls, table: Table) -> Concat:
        return cls(table, "vertical")

    def change(self, records: VecRecords, config: GridConfig) -> None:
        # A table may be concatenated with itself.
        source = self.table.copy()
        other = source.records
        other_rows, other_cols = other.count_rows(), other.count_columns()
        count_rows, count_cols = records.count_rows(), records.count_columns()

        if self.axis == "vertical":
            for _ in range(other_cols - count_cols):
                records.push_column([])
            for row in other:
                records.push_row(row)
            offset = (count_rows, 0)
        else:
            for _ in range(other_rows - count_rows):
                records.push_row([])
            for col in range(other_cols):
                records.push_column([other.get_text((row, col)) for row in range(other_rows)])
            offset = (0, count_cols)

        config.merge(source.config, (other_rows, other_cols), offset)
