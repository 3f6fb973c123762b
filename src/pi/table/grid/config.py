"""Grid configuration: the mutable state every option writes into.

Borders are resolved in two tiers.  The global style (:class:`Borders` plus
per-line :class:`HorizontalLine` / :class:`VerticalLine` overrides) supplies
defaults; explicit overrides (cell borders and raw segment characters) beat
the style.  Every override is stamped when applied and, among overrides
competing for the same character, the most recently applied one wins.

Grid lines are indexed the way they are drawn: horizontal line ``i`` runs
above row ``i`` (line ``count_rows`` is the bottom edge) and vertical line
``j`` runs left of column ``j`` (line ``count_cols`` is the right edge).
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Literal, TypeVar

from pi.table.grid.types import (
    AlignmentHorizontal,
    AlignmentVertical,
    Border,
    Entity,
    Margin,
    Padding,
    Position,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (line, column) / (row, line) / (line, line)
SegmentKey = tuple[int, int]

WidthMode = Literal["truncate", "increase"]


@dataclass
class Borders:
    """Global border characters of a table style."""

    top: str | None = None
    bottom: str | None = None
    left: str | None = None
    right: str | None = None
    horizontal: str | None = None
    vertical: str | None = None
    top_left: str | None = None
    top_right: str | None = None
    bottom_left: str | None = None
    bottom_right: str | None = None
    top_intersection: str | None = None
    bottom_intersection: str | None = None
    left_intersection: str | None = None
    right_intersection: str | None = None
    intersection: str | None = None


@dataclass(frozen=True)
class HorizontalLine:
    """Characters of one horizontal border line, replacing the style's."""

    main: str | None = None
    intersection: str | None = None
    left: str | None = None
    right: str | None = None

    def is_empty(self) -> bool:
        return all(c is None for c in (self.main, self.intersection, self.left, self.right))


@dataclass(frozen=True)
class VerticalLine:
    """Characters of one vertical border line, replacing the style's."""

    main: str | None = None
    intersection: str | None = None
    top: str | None = None
    bottom: str | None = None


@dataclass(frozen=True)
class WidthTarget:
    """A requested total table width.

    ``mode`` is ``"truncate"`` (shrink when wider) or ``"increase"`` (grow
    when narrower).
    """

    total: int
    mode: WidthMode
    suffix: str | None = None


class _EntityMap(Generic[T]):
    """Layered setting: global, per row, per column and per cell values.

    Lookup returns the most recently applied value among the entries that
    cover a cell.
    """

    def __init__(self, default: T) -> None:
        self._global: tuple[int, T] = (0, default)
        self._rows: dict[int, tuple[int, T]] = {}
        self._columns: dict[int, tuple[int, T]] = {}
        self._cells: dict[Position, tuple[int, T]] = {}

    def set(self, entity: Entity, value: T, stamp: int) -> None:
        if entity.is_global:
            self._global = (stamp, value)
        elif entity.col is None:
            self._rows[entity.row] = (stamp, value)
        elif entity.row is None:
            self._columns[entity.col] = (stamp, value)
        else:
            self._cells[(entity.row, entity.col)] = (stamp, value)

    def lookup(self, row: int, col: int) -> tuple[int, T]:
        best = self._global
        for candidate in (
            self._rows.get(row),
            self._columns.get(col),
            self._cells.get((row, col)),
        ):
            if candidate is not None and candidate[0] > best[0]:
                best = candidate
        return best

    def get(self, row: int, col: int) -> T:
        return self.lookup(row, col)[1]

    def insert_row(self, index: int) -> None:
        self._rows = {
            (r + 1 if r >= index else r): v for r, v in self._rows.items()
        }
        self._cells = {
            ((r + 1, c) if r >= index else (r, c)): v
            for (r, c), v in self._cells.items()
        }


def _shift_rows(mapping: dict[SegmentKey, Any], index: int) -> dict[SegmentKey, Any]:
    return {((a + 1, b) if a >= index else (a, b)): v for (a, b), v in mapping.items()}


class GridConfig:
    """Borders, spans, padding, alignment and sizing of a grid."""

    def __init__(self, tab_width: int = 3, truncation_suffix: str = "") -> None:
        self.borders = Borders()
        self.tab_width = tab_width
        self.truncation_suffix = truncation_suffix
        self.correct_spans = False
        self.margin = Margin()
        self.shadow: Any = None  # a post-render transform, see settings.shadow
        self.target_width: WidthTarget | None = None

        self._last_stamp = 0
        self._horizontal_lines: dict[int, HorizontalLine] = {}
        self._vertical_lines: dict[int, VerticalLine] = {}

        self._cell_borders: dict[Position, tuple[int, Border]] = {}
        self._horizontal_chars: dict[SegmentKey, tuple[int, str]] = {}
        self._vertical_chars: dict[SegmentKey, tuple[int, str]] = {}
        self._intersection_chars: dict[SegmentKey, tuple[int, str]] = {}

        self._spans: dict[Position, int] = {}
        self._padding: _EntityMap[Padding] = _EntityMap(Padding())
        self._alignment_horizontal: _EntityMap[AlignmentHorizontal] = _EntityMap(
            AlignmentHorizontal.LEFT
        )
        self._alignment_vertical: _EntityMap[AlignmentVertical] = _EntityMap(
            AlignmentVertical.TOP
        )

        self._column_widths: dict[int, tuple[int, str | None]] = {}
        self._row_heights: dict[int, int] = {}
        self._border_texts: dict[int, list[tuple[int, str]]] = {}

    def _stamp(self) -> int:
        self._last_stamp += 1
        return self._last_stamp

    def copy(self) -> GridConfig:
        return copy.deepcopy(self)

    # -----------------------------------------------------------------------
    # Global style
    # -----------------------------------------------------------------------

    def set_borders(self, borders: Borders) -> None:
        self.borders = copy.copy(borders)

    def set_horizontal_line(self, line: int, value: HorizontalLine | None) -> None:
        if value is None:
            self._horizontal_lines.pop(line, None)
        else:
            self._horizontal_lines[line] = value

    def set_vertical_line(self, line: int, value: VerticalLine | None) -> None:
        if value is None:
            self._vertical_lines.pop(line, None)
        else:
            self._vertical_lines[line] = value

    def clear_lines(self) -> None:
        self._horizontal_lines.clear()
        self._vertical_lines.clear()

    def get_horizontal_line(self, line: int) -> HorizontalLine | None:
        return self._horizontal_lines.get(line)

    def get_vertical_line(self, line: int) -> VerticalLine | None:
        return self._vertical_lines.get(line)

    # -----------------------------------------------------------------------
    # Cell borders
    # -----------------------------------------------------------------------

    def set_border(self, pos: Position, border: Border) -> None:
        """Replace the border override of a cell (absorbed cells redirect)."""
        self._cell_borders[self.span_origin(pos)] = (self._stamp(), border)

    def get_border(self, pos: Position) -> Border | None:
        entry = self._cell_borders.get(self.span_origin(pos))
        return entry[1] if entry else None

    def remove_border(self, pos: Position) -> None:
        """Drop every override on the perimeter of a cell."""
        row, col = self.span_origin(pos)
        self._cell_borders.pop((row, col), None)

        width = self.get_span((row, col))
        for line in (row, row + 1):
            for c in range(col, col + width):
                self._horizontal_chars.pop((line, c), None)
            for c in range(col, col + width + 1):
                self._intersection_chars.pop((line, c), None)
        self._vertical_chars.pop((row, col), None)
        self._vertical_chars.pop((row, col + width), None)

    def set_horizontal_char(self, line: int, col: int, c: str) -> None:
        self._horizontal_chars[(line, col)] = (self._stamp(), c)

    def set_vertical_char(self, row: int, line: int, c: str) -> None:
        self._vertical_chars[(row, line)] = (self._stamp(), c)

    def set_intersection_char(self, line: int, col_line: int, c: str) -> None:
        self._intersection_chars[(line, col_line)] = (self._stamp(), c)

    # -----------------------------------------------------------------------
    # Spans
    # -----------------------------------------------------------------------

    def set_span(self, pos: Position, size: int, count_cols: int | None = None) -> None:
        """Merge *size* columns starting at *pos*; ``size <= 1`` removes it.

        A span that would run past the last column is clamped.  Older spans
        overlapping the new one are dropped.
        """
        row, col = pos
        if count_cols is not None and size > count_cols - col:
            logger.debug("Clamping span at %s from %d to %d", pos, size, count_cols - col)
            size = count_cols - col

        self._spans.pop(pos, None)
        if size <= 1:
            return

        for (r, c), n in list(self._spans.items()):
            if r == row and c < col + size and col < c + n:
                logger.debug("Span at %s replaces overlapping span at %s", pos, (r, c))
                del self._spans[(r, c)]

        self._spans[pos] = size

    def get_span(self, pos: Position) -> int:
        return self._spans.get(pos, 1)

    def iter_spans(self) -> Iterator[tuple[Position, int]]:
        return iter(sorted(self._spans.items()))

    def span_origin(self, pos: Position) -> Position:
        """The origin of the span covering *pos*, or *pos* itself."""
        row, col = pos
        for (r, c), n in self._spans.items():
            if r == row and c < col < c + n:
                return (r, c)
        return pos

    def is_absorbed(self, pos: Position) -> bool:
        return self.span_origin(pos) != pos

    # -----------------------------------------------------------------------
    # Padding / alignment
    # -----------------------------------------------------------------------

    def set_padding(self, entity: Entity, padding: Padding) -> None:
        self._padding.set(entity, padding, self._stamp())

    def get_padding(self, pos: Position) -> Padding:
        return self._padding.get(*pos)

    def set_alignment_horizontal(self, entity: Entity, alignment: AlignmentHorizontal) -> None:
        self._alignment_horizontal.set(entity, alignment, self._stamp())

    def get_alignment_horizontal(self, pos: Position) -> AlignmentHorizontal:
        return self._alignment_horizontal.get(*pos)

    def set_alignment_vertical(self, entity: Entity, alignment: AlignmentVertical) -> None:
        self._alignment_vertical.set(entity, alignment, self._stamp())

    def get_alignment_vertical(self, pos: Position) -> AlignmentVertical:
        return self._alignment_vertical.get(*pos)

    # -----------------------------------------------------------------------
    # Sizing
    # -----------------------------------------------------------------------

    def set_column_width(self, col: int, width: int, suffix: str | None = None) -> None:
        self._column_widths[col] = (max(width, 0), suffix)

    def get_column_width(self, col: int) -> tuple[int, str | None] | None:
        return self._column_widths.get(col)

    def set_row_height(self, row: int, height: int) -> None:
        self._row_heights[row] = max(height, 0)

    def get_row_height(self, row: int) -> int | None:
        return self._row_heights.get(row)

    def set_target_width(self, target: WidthTarget | None) -> None:
        self.target_width = target

    # -----------------------------------------------------------------------
    # Decorations
    # -----------------------------------------------------------------------

    def set_border_text(self, line: int, offset: int, text: str) -> None:
        self._border_texts.setdefault(line, []).append((offset, text))

    def get_border_texts(self, line: int) -> list[tuple[int, str]]:
        return self._border_texts.get(line, [])

    def set_margin(self, margin: Margin) -> None:
        self.margin = margin

    def set_shadow(self, shadow: Any) -> None:
        self.shadow = shadow

    # -----------------------------------------------------------------------
    # Structural changes
    # -----------------------------------------------------------------------

    def insert_row(self, index: int) -> None:
        """Shift every row-keyed override at or below *index* down one row."""
        self._cell_borders = _shift_rows(self._cell_borders, index)
        self._horizontal_chars = _shift_rows(self._horizontal_chars, index)
        self._vertical_chars = _shift_rows(self._vertical_chars, index)
        self._intersection_chars = _shift_rows(self._intersection_chars, index)
        self._spans = _shift_rows(self._spans, index)
        self._row_heights = {
            (r + 1 if r >= index else r): h for r, h in self._row_heights.items()
        }
        for entity_map in (
            self._padding,
            self._alignment_horizontal,
            self._alignment_vertical,
        ):
            entity_map.insert_row(index)

    def merge(self, other: GridConfig, shape: tuple[int, int], offset: Position) -> None:
        """Copy the cell-level overrides of *other* shifted by *offset*.

        *shape* is the shape of the table *other* belongs to.  Layered
        settings are flattened to cells so they do not leak outside the
        merged block.  Copied overrides are stamped now, keeping their
        relative order.
        """
        dr, dc = offset
        count_rows, count_cols = shape

        def shifted(key: SegmentKey) -> SegmentKey:
            return (key[0] + dr, key[1] + dc)

        stamped: list[tuple[int, Callable[[int], None]]] = []

        def collect(source: dict, target: dict) -> None:
            for key, (stamp, value) in source.items():
                stamped.append(
                    (stamp, lambda s, k=shifted(key), v=value: target.__setitem__(k, (s, v)))
                )

        collect(other._cell_borders, self._cell_borders)
        collect(other._horizontal_chars, self._horizontal_chars)
        collect(other._vertical_chars, self._vertical_chars)
        collect(other._intersection_chars, self._intersection_chars)

        for mine, theirs in (
            (self._padding, other._padding),
            (self._alignment_horizontal, other._alignment_horizontal),
            (self._alignment_vertical, other._alignment_vertical),
        ):
            for row in range(count_rows):
                for col in range(count_cols):
                    stamp, value = theirs.lookup(row, col)
                    if stamp == 0:
                        continue
                    entity = Entity.cell(row + dr, col + dc)
                    stamped.append(
                        (stamp, lambda s, m=mine, e=entity, v=value: m.set(e, v, s))
                    )

        for _, apply in sorted(stamped, key=lambda item: item[0]):
            apply(self._stamp())

        for pos, size in list(other._spans.items()):
            self.set_span(shifted(pos), size)
        for row, height in other._row_heights.items():
            self._row_heights.setdefault(row + dr, height)
        for col, width in other._column_widths.items():
            self._column_widths.setdefault(col + dc, width)

    # -----------------------------------------------------------------------
    # Resolution
    # -----------------------------------------------------------------------

    def resolve_borders(self, shape: tuple[int, int]) -> BorderGrid:
        return BorderGrid(self, shape)

    def has_horizontal(self, line: int, shape: tuple[int, int]) -> bool:
        return self.resolve_borders(shape).has_horizontal(line)

    def has_vertical(self, line: int, shape: tuple[int, int]) -> bool:
        return self.resolve_borders(shape).has_vertical(line)


class BorderGrid:
    """Every border character of a grid of a given shape, resolved once.

    Built at render time: overrides are expanded against the spans current
    at that moment, so spans and borders may be applied in any order.
    """

    def __init__(self, config: GridConfig, shape: tuple[int, int]) -> None:
        self.config = config
        self.count_rows, self.count_cols = shape

        horizontal: dict[SegmentKey, tuple[int, str]] = dict(config._horizontal_chars)
        vertical: dict[SegmentKey, tuple[int, str]] = dict(config._vertical_chars)
        intersection: dict[SegmentKey, tuple[int, str]] = dict(config._intersection_chars)

        def put(target: dict, key: SegmentKey, stamp: int, c: str | None) -> None:
            if c is None:
                return
            current = target.get(key)
            if current is None or current[0] < stamp:
                target[key] = (stamp, c)

        for (row, col), (stamp, border) in config._cell_borders.items():
            if row >= self.count_rows or col >= self.count_cols:
                continue
            if config.is_absorbed((row, col)):
                continue
            width = self.span_width((row, col))
            for k in range(width):
                put(horizontal, (row, col + k), stamp, border.top)
                put(horizontal, (row + 1, col + k), stamp, border.bottom)
            for k in range(1, width):
                put(intersection, (row, col + k), stamp, border.top)
                put(intersection, (row + 1, col + k), stamp, border.bottom)
            put(vertical, (row, col), stamp, border.left)
            put(vertical, (row, col + width), stamp, border.right)
            put(intersection, (row, col), stamp, border.top_left)
            put(intersection, (row, col + width), stamp, border.top_right)
            put(intersection, (row + 1, col), stamp, border.bottom_left)
            put(intersection, (row + 1, col + width), stamp, border.bottom_right)

        self._horizontal = {k: c for k, (_, c) in horizontal.items()}
        self._vertical = {k: c for k, (_, c) in vertical.items()}
        self._intersection = {k: c for k, (_, c) in intersection.items()}

        self._horizontal_exists = [
            self._line_has_horizontal(i) for i in range(self.count_rows + 1)
        ]
        self._vertical_exists = [
            self._line_has_vertical(j) for j in range(self.count_cols + 1)
        ]

    def span_width(self, pos: Position) -> int:
        """Span of *pos* clamped to the grid."""
        return max(1, min(self.config.get_span(pos), self.count_cols - pos[1]))

    # -- line existence -----------------------------------------------------

    def _line_has_horizontal(self, line: int) -> bool:
        override = self.config.get_horizontal_line(line)
        if override is not None:
            if not override.is_empty():
                return True
        elif self._style_horizontal(line) is not None:
            return True
        return any(key[0] == line for key in self._horizontal)

    def _line_has_vertical(self, line: int) -> bool:
        if self._style_vertical(line) is not None:
            return True
        return any(key[1] == line for key in self._vertical)

    def has_horizontal(self, line: int) -> bool:
        return 0 <= line <= self.count_rows and self._horizontal_exists[line]

    def has_vertical(self, line: int) -> bool:
        return 0 <= line <= self.count_cols and self._vertical_exists[line]

    # -- style lookups ------------------------------------------------------

    def _style_horizontal(self, line: int) -> str | None:
        override = self.config.get_horizontal_line(line)
        if override is not None:
            return override.main
        borders = self.config.borders
        if line == 0:
            return borders.top
        if line == self.count_rows:
            return borders.bottom
        return borders.horizontal

    def _style_vertical(self, line: int) -> str | None:
        override = self.config.get_vertical_line(line)
        if override is not None and override.main is not None:
            return override.main
        borders = self.config.borders
        if line == 0:
            return borders.left
        if line == self.count_cols:
            return borders.right
        return borders.vertical

    def style_intersection(self, line: int, col_line: int) -> str | None:
        override = self.config.get_horizontal_line(line)
        if override is not None:
            if col_line == 0:
                return override.left
            if col_line == self.count_cols:
                return override.right
            return override.intersection

        vertical = self.config.get_vertical_line(col_line)
        if vertical is not None:
            if line == 0 and vertical.top is not None:
                return vertical.top
            if line == self.count_rows and vertical.bottom is not None:
                return vertical.bottom
            if 0 < line < self.count_rows and vertical.intersection is not None:
                return vertical.intersection

        b = self.config.borders
        if line == 0:
            corners = (b.top_left, b.top_intersection, b.top_right)
        elif line == self.count_rows:
            corners = (b.bottom_left, b.bottom_intersection, b.bottom_right)
        else:
            corners = (b.left_intersection, b.intersection, b.right_intersection)

        if col_line == 0:
            return corners[0]
        if col_line == self.count_cols:
            return corners[2]
        return corners[1]

    # -- resolved characters ------------------------------------------------

    def horizontal_char(self, line: int, col: int) -> str | None:
        c = self._horizontal.get((line, col))
        if c is not None:
            return c
        return self._style_horizontal(line)

    def vertical_char(self, row: int, line: int) -> str | None:
        c = self._vertical.get((row, line))
        if c is not None:
            return c
        return self._style_vertical(line)

    def intersection_char(self, line: int, col_line: int) -> str | None:
        c = self._intersection.get((line, col_line))
        if c is not None:
            return c

        c = self.style_intersection(line, col_line)
        if self.config.correct_spans and 0 < col_line < self.count_cols:
            return self._correct_intersection(line, col_line, c)
        return c

    def _correct_intersection(self, line: int, col_line: int, c: str | None) -> str | None:
        up = line > 0 and not self.config.is_absorbed((line - 1, col_line))
        down = line < self.count_rows and not self.config.is_absorbed((line, col_line))
        if up and down:
            return c
        borders = self.config.borders
        if down:
            return borders.top_intersection
        if up:
            return borders.bottom_intersection
        return self.horizontal_char(line, col_line - 1) or self.horizontal_char(line, col_line)
