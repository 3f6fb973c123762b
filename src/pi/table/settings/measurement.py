"""Fixed widths and heights.

Widths here are column widths as the grid lays them out: cell padding
included, border lines excluded.  Content wider than its column is cut at a
grapheme boundary and ends with the truncation suffix.
"""

from __future__ import annotations

from typing import Sequence

from pi.table.grid.config import GridConfig, WidthTarget
from pi.table.grid.entity import Selector
from pi.table.records import VecRecords


class Width:
    """Constructors for width settings."""

    @staticmethod
    def column(width: int, suffix: str | None = None) -> ColumnWidth:
        """Fix the width of every column the selection touches."""
        return ColumnWidth(width, suffix)

    @staticmethod
    def list(widths: Sequence[int], suffix: str | None = None) -> ColumnWidths:
        """Fix the widths of the first ``len(widths)`` columns."""
        return ColumnWidths(widths, suffix)

    @staticmethod
    def truncate(total: int, suffix: str | None = None) -> TotalWidth:
        """Shrink the widest columns until the table is at most *total* wide."""
        return TotalWidth(WidthTarget(total, "truncate", suffix))

    @staticmethod
    def increase(total: int) -> TotalWidth:
        """Grow columns, left to right, until the table is *total* wide."""
        return TotalWidth(WidthTarget(total, "increase"))


class ColumnWidth:
    def __init__(self, width: int, suffix: str | None = None) -> None:
        self.width = width
        self.suffix = suffix

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        columns = {col for _, col in selector.cells(records.count_rows(), records.count_columns())}
        for col in sorted(columns):
            config.set_column_width(col, self.width, self.suffix)


class ColumnWidths:
    def __init__(self, widths: Sequence[int], suffix: str | None = None) -> None:
        self.widths = list(widths)
        self.suffix = suffix

    def change(self, records: VecRecords, config: GridConfig) -> None:
        for col, width in enumerate(self.widths[: records.count_columns()]):
            config.set_column_width(col, width, self.suffix)


class TotalWidth:
    def __init__(self, target: WidthTarget) -> None:
        self.target = target

    def change(self, records: VecRecords, config: GridConfig) -> None:
        config.set_target_width(self.target)


class Height:
    """Constructors for height settings."""

    @staticmethod
    def row(height: int) -> RowHeight:
        """Fix the height of every row the selection touches."""
        return RowHeight(height)

    @staticmethod
    def list(heights: Sequence[int]) -> RowHeights:
        """Fix the heights of the first ``len(heights)`` rows."""
        return RowHeights(heights)


class RowHeight:
    def __init__(self, height: int) -> None:
        self.height = height

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        rows = {row for row, _ in selector.cells(records.count_rows(), records.count_columns())}
        for row in sorted(rows):
            config.set_row_height(row, self.height)


class RowHeights:
    def __init__(self, heights: Sequence[int]) -> None:
        self.heights = list(heights)

    def change(self, records: VecRecords, config: GridConfig) -> None:
        for row, height in enumerate(self.heights[: records.count_rows()]):
            config.set_row_height(row, height)
