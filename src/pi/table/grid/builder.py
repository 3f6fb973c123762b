"""Grid builder: walks a configured grid and emits the bordered text.

Output is produced line by line: a border line above each row (when that
horizontal line exists), the row's content lines, and the bottom border.
A vertical line that exists anywhere in the grid occupies one column on
every line, so all lines share the same width; where a line exists but no
character applies to a spot, a space is emitted there.
"""

from __future__ import annotations

import logging

from pi.table.errors import InconsistentGeometryError
from pi.table.grid.config import BorderGrid, GridConfig
from pi.table.grid.dimension import DimensionPlan, cell_text, estimate
from pi.table.grid.types import AlignmentHorizontal, AlignmentVertical, Position
from pi.table.records import Records
from pi.table.utils import overlay_text, text_lines, truncate_to_width, visible_width

logger = logging.getLogger(__name__)


class GridBuilder:
    """Render *records* laid out by *config*. Never mutates either."""

    def __init__(self, records: Records, config: GridConfig) -> None:
        self.records = records
        self.config = config
        self.shape = (records.count_rows(), records.count_columns())

    def build(self) -> str:
        return "\n".join(self.build_lines())

    def build_lines(self) -> list[str]:
        count_rows, count_cols = self.shape
        self._check_geometry()
        if count_rows == 0 or count_cols == 0:
            return []

        logger.debug("Rendering %dx%d grid", count_rows, count_cols)
        borders = self.config.resolve_borders(self.shape)
        try:
            plan = estimate(self.records, self.config, borders)
            lines: list[str] = []
            for row in range(count_rows):
                if borders.has_horizontal(row):
                    lines.append(self._border_line(borders, plan, row))
                lines.extend(self._row_lines(borders, plan, row))
        except IndexError as e:
            raise InconsistentGeometryError(
                "records are shorter than they report", self.shape
            ) from e

        if borders.has_horizontal(count_rows):
            lines.append(self._border_line(borders, plan, count_rows))

        if self.config.shadow is not None:
            lines = self.config.shadow.apply(lines)
        return _apply_margin(lines, self.config)

    def _check_geometry(self) -> None:
        count_rows, count_cols = self.shape
        for (row, col), size in self.config.iter_spans():
            if row >= count_rows or col >= count_cols:
                raise InconsistentGeometryError(
                    f"span of {size} columns at ({row}, {col}) is outside the grid",
                    self.shape,
                )

    # -----------------------------------------------------------------------
    # Border lines
    # -----------------------------------------------------------------------

    def _border_line(self, borders: BorderGrid, plan: DimensionPlan, line: int) -> str:
        count_cols = self.shape[1]
        parts: list[str] = []
        for col in range(count_cols + 1):
            if borders.has_vertical(col):
                parts.append(borders.intersection_char(line, col) or " ")
            if col < count_cols:
                parts.append((borders.horizontal_char(line, col) or " ") * plan.widths[col])

        text = "".join(parts)
        for offset, label in self.config.get_border_texts(line):
            text = overlay_text(text, label, offset)
        return text

    # -----------------------------------------------------------------------
    # Content lines
    # -----------------------------------------------------------------------

    def _row_lines(self, borders: BorderGrid, plan: DimensionPlan, row: int) -> list[str]:
        count_cols = self.shape[1]
        height = plan.heights[row]

        # (vertical char or None, cell lines) for every visible cell of the row
        cells: list[tuple[str | None, list[str]]] = []
        col = 0
        while col < count_cols:
            span = borders.span_width((row, col))
            width = plan.span_width(borders, col, span)
            vertical = None
            if borders.has_vertical(col):
                vertical = borders.vertical_char(row, col) or " "
            lines = self._cell_lines((row, col), width, height, plan.suffixes[col + span - 1])
            cells.append((vertical, lines))
            col += span

        right = None
        if borders.has_vertical(count_cols):
            right = borders.vertical_char(row, count_cols) or " "

        result: list[str] = []
        for k in range(height):
            parts: list[str] = []
            for vertical, lines in cells:
                if vertical is not None:
                    parts.append(vertical)
                parts.append(lines[k])
            if right is not None:
                parts.append(right)
            result.append("".join(parts))
        return result

    def _cell_lines(self, pos: Position, width: int, height: int, suffix: str) -> list[str]:
        padding = self.config.get_padding(pos)
        pad_left = min(padding.left, width)
        pad_right = min(padding.right, width - pad_left)
        pad_top = min(padding.top, height)
        pad_bottom = min(padding.bottom, height - pad_top)
        inner_width = width - pad_left - pad_right
        inner_height = height - pad_top - pad_bottom

        lines = text_lines(cell_text(self.records, self.config, pos))[:inner_height]

        valign = self.config.get_alignment_vertical(pos)
        if valign is AlignmentVertical.BOTTOM:
            offset = inner_height - len(lines)
        elif valign is AlignmentVertical.CENTER:
            offset = (inner_height - len(lines)) // 2
        else:
            offset = 0

        halign = self.config.get_alignment_horizontal(pos)
        fill_line = padding.fill * width
        left = padding.fill * pad_left
        right = padding.fill * pad_right

        result: list[str] = []
        for k in range(height):
            if k < pad_top or k >= pad_top + inner_height:
                result.append(fill_line)
                continue
            index = k - pad_top - offset
            text = lines[index] if 0 <= index < len(lines) else ""
            result.append(left + _align(text, inner_width, halign, suffix) + right)
        return result


def _align(text: str, width: int, alignment: AlignmentHorizontal, suffix: str) -> str:
    if visible_width(text) > width:
        text = truncate_to_width(text, width, suffix)
    diff = width - visible_width(text)
    if alignment is AlignmentHorizontal.RIGHT:
        return " " * diff + text
    if alignment is AlignmentHorizontal.CENTER:
        left = diff // 2
        return " " * left + text + " " * (diff - left)
    return text + " " * diff


def _apply_margin(lines: list[str], config: GridConfig) -> list[str]:
    margin = config.margin
    if not (margin.top or margin.bottom or margin.left or margin.right) or not lines:
        return lines

    width = visible_width(lines[0])
    left = margin.fill * margin.left
    right = margin.fill * margin.right
    blank = margin.fill * (margin.left + width + margin.right)
    return (
        [blank] * margin.top
        + [left + line + right for line in lines]
        + [blank] * margin.bottom
    )
