"""Dimension estimation: column widths and row heights of a grid.

Widths include horizontal padding, heights include vertical padding.  The
plan is derived from the current records and configuration on every render
and never cached, since any option may invalidate it.
"""

from __future__ import annotations

from dataclasses import dataclass

from pi.table.grid.config import BorderGrid, GridConfig
from pi.table.grid.types import Position
from pi.table.records import Records
from pi.table.utils import expand_tabs, text_dimension


@dataclass
class DimensionPlan:
    widths: list[int]
    heights: list[int]
    suffixes: list[str]

    def total_width(self, borders: BorderGrid) -> int:
        verticals = sum(1 for j in range(len(self.widths) + 1) if borders.has_vertical(j))
        return sum(self.widths) + verticals

    def total_height(self, borders: BorderGrid) -> int:
        horizontals = sum(
            1 for i in range(len(self.heights) + 1) if borders.has_horizontal(i)
        )
        return sum(self.heights) + horizontals

    def span_width(self, borders: BorderGrid, col: int, span: int) -> int:
        """Width of *span* merged columns starting at *col*, inner lines included."""
        inner = sum(1 for j in range(col + 1, col + span) if borders.has_vertical(j))
        return sum(self.widths[col : col + span]) + inner


def cell_text(records: Records, config: GridConfig, pos: Position) -> str:
    """Text of a cell as rendered, with tabs expanded."""
    return expand_tabs(records.get_text(pos), config.tab_width)


def estimate(records: Records, config: GridConfig, borders: BorderGrid) -> DimensionPlan:
    count_rows = records.count_rows()
    count_cols = records.count_columns()

    widths = [0] * count_cols
    heights = [0] * count_rows
    spanned: list[tuple[int, Position, int]] = []

    for row in range(count_rows):
        for col in range(count_cols):
            pos = (row, col)
            if config.is_absorbed(pos):
                continue

            padding = config.get_padding(pos)
            text_width, text_height = text_dimension(cell_text(records, config, pos))
            width = text_width + padding.left + padding.right
            height = text_height + padding.top + padding.bottom
            heights[row] = max(heights[row], height)

            span = borders.span_width(pos)
            if span > 1:
                spanned.append((span, pos, width))
            else:
                widths[col] = max(widths[col], width)

    plan = DimensionPlan(widths, heights, [config.truncation_suffix] * count_cols)

    # Narrow spans first so wider ones see the columns they contain settled.
    for span, (_, col), needed in sorted(spanned):
        current = plan.span_width(borders, col, span)
        if needed > current:
            widths[col + span - 1] += needed - current

    for col in range(count_cols):
        fixed = config.get_column_width(col)
        if fixed is not None:
            widths[col] = fixed[0]
            if fixed[1] is not None:
                plan.suffixes[col] = fixed[1]

    for row in range(count_rows):
        fixed_height = config.get_row_height(row)
        if fixed_height is not None:
            heights[row] = fixed_height

    if config.target_width is not None and count_cols:
        _fit_total_width(plan, config, borders)

    return plan


def _fit_total_width(plan: DimensionPlan, config: GridConfig, borders: BorderGrid) -> None:
    target = config.target_width
    widths = plan.widths
    total = plan.total_width(borders)

    if target.mode == "truncate":
        while total > target.total and any(widths):
            # Shrink the widest column, the rightmost one on ties.
            widest = max(range(len(widths)), key=lambda i: (widths[i], i))
            widths[widest] -= 1
            total -= 1
            if target.suffix is not None:
                plan.suffixes[widest] = target.suffix
    elif target.mode == "increase":
        col = 0
        while total < target.total:
            widths[col] += 1
            total += 1
            col = (col + 1) % len(widths)
