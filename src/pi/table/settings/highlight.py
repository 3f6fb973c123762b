"""Highlight: draw a border around a selection of cells.

The selection may be any shape, disjoint or not.  Only its outline is
drawn: edges shared by two selected cells stay untouched, so a block of
cells gets one box rather than a box per cell.
"""

from __future__ import annotations

from pi.table.grid.config import GridConfig
from pi.table.grid.entity import Selector, resolve
from pi.table.grid.types import Border, Position
from pi.table.records import VecRecords


class Highlight:
    def __init__(self, selector: Selector, border: Border) -> None:
        self.selector = selector
        self.border = border

    def change(self, records: VecRecords, config: GridConfig) -> None:
        count_rows, count_cols = records.count_rows(), records.count_columns()

        # Spanned cells count with every column they cover.
        region: set[Position] = set()
        for row, col in resolve(self.selector, count_rows, count_cols, config):
            span = max(1, min(config.get_span((row, col)), count_cols - col))
            region.update((row, col + k) for k in range(span))

        b = self.border
        for row, col in sorted(region):
            if b.top is not None and (row - 1, col) not in region:
                config.set_horizontal_char(row, col, b.top)
            if b.bottom is not None and (row + 1, col) not in region:
                config.set_horizontal_char(row + 1, col, b.bottom)
            if b.left is not None and (row, col - 1) not in region:
                config.set_vertical_char(row, col, b.left)
            if b.right is not None and (row, col + 1) not in region:
                config.set_vertical_char(row, col + 1, b.right)

        points = {(row + i, col + j) for row, col in region for i in (0, 1) for j in (0, 1)}
        for line, col_line in sorted(points):
            c = _outline_char(b, region, line, col_line)
            if c is not None:
                config.set_intersection_char(line, col_line, c)


def _outline_char(b: Border, region: set[Position], line: int, col_line: int) -> str | None:
    """Character of the outline at a grid point, from the 4 cells around it."""
    above_left = (line - 1, col_line - 1) in region
    above_right = (line - 1, col_line) in region
    below_left = (line, col_line - 1) in region
    below_right = (line, col_line) in region
    inside = (above_left, above_right, below_left, below_right)

    count = sum(inside)
    if count in (0, 4):
        return None

    if count == 1:
        if below_right:
            return b.top_left
        if below_left:
            return b.top_right
        if above_right:
            return b.bottom_left
        return b.bottom_right

    if count == 3:
        # Concave corner: named after the corner the missing cell points at.
        if not above_left:
            return b.bottom_right
        if not above_right:
            return b.bottom_left
        if not below_left:
            return b.top_right
        return b.top_left

    if above_left and above_right:
        return b.bottom
    if below_left and below_right:
        return b.top
    if above_left and below_left:
        return b.right
    if above_right and below_right:
        return b.left
    # Diagonal neighbours touching at a point.
    return b.top_left if below_right else b.top_right
