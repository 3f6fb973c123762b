"""Selectors: logical references to cells, resolved against the table shape.

A selector never fails.  Coordinates outside ``[0, count_rows) x
[0, count_cols)`` are dropped, so options stay usable when the shape of a
table changes between the time they are built and the time they are
applied.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

from pi.table.grid.types import GLOBAL, Entity, Position

if TYPE_CHECKING:
    from pi.table.grid.config import GridConfig


class Selector(ABC):
    """Base class of every selector."""

    @abstractmethod
    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        """Positions of the selection, row-major, clipped to the shape."""

    def entities(self, count_rows: int, count_cols: int) -> Iterator[Entity]:
        """Layered entities the selection maps to (cells unless overridden)."""
        for row, col in self.cells(count_rows, count_cols):
            yield Entity.cell(row, col)

    def and_(self, other: Selector) -> Selector:
        """Union of two selections."""
        return _Union(self, other)

    def not_(self, other: Selector) -> Selector:
        """This selection without the cells of *other*."""
        return _Difference(self, other)


def _clip(start: int, stop: int | None, count: int) -> range:
    if stop is None or stop > count:
        stop = count
    return range(max(start, 0), max(stop, 0))


class Cell(Selector):
    """A single cell."""

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        if 0 <= self.row < count_rows and 0 <= self.col < count_cols:
            yield (self.row, self.col)

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


class Segment(Selector):
    """A rectangular block of cells; ``stop`` bounds are exclusive."""

    def __init__(
        self,
        rows: tuple[int, int | None] = (0, None),
        cols: tuple[int, int | None] = (0, None),
    ) -> None:
        self.rows = rows
        self.cols = cols

    @staticmethod
    def all() -> Selector:
        return _AllCells()

    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        for row in _clip(self.rows[0], self.rows[1], count_rows):
            for col in _clip(self.cols[0], self.cols[1], count_cols):
                yield (row, col)


class _AllCells(Segment):
    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        for row in range(count_rows):
            for col in range(count_cols):
                yield (row, col)

    def entities(self, count_rows: int, count_cols: int) -> Iterator[Entity]:
        yield GLOBAL


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


class RowRange(Selector):
    """Whole rows ``start..stop`` (``stop=None`` means up to the last row)."""

    def __init__(self, start: int, stop: int | None = None) -> None:
        self.start = start
        self.stop = stop

    def _rows(self, count_rows: int) -> range:
        return _clip(self.start, self.stop, count_rows)

    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        for row in self._rows(count_rows):
            for col in range(count_cols):
                yield (row, col)

    def entities(self, count_rows: int, count_cols: int) -> Iterator[Entity]:
        for row in self._rows(count_rows):
            yield Entity.for_row(row)

    def line_index(self, count_rows: int) -> int:
        """Horizontal border line above the first selected row."""
        return self.start


class LastRow(RowRange):
    def __init__(self) -> None:
        super().__init__(0)

    def _rows(self, count_rows: int) -> range:
        return range(count_rows - 1, count_rows) if count_rows else range(0)

    def line_index(self, count_rows: int) -> int:
        """The bottom border line."""
        return count_rows


class Rows:
    """Constructors for row selectors."""

    @staticmethod
    def single(index: int) -> RowRange:
        return RowRange(index, index + 1)

    @staticmethod
    def new(start: int, stop: int | None = None) -> RowRange:
        return RowRange(start, stop)

    @staticmethod
    def first() -> RowRange:
        return RowRange(0, 1)

    @staticmethod
    def last() -> RowRange:
        return LastRow()


# ---------------------------------------------------------------------------
# Columns
# ---------------------------------------------------------------------------


class ColumnRange(Selector):
    """Whole columns ``start..stop`` (``stop=None`` means up to the last one)."""

    def __init__(self, start: int, stop: int | None = None) -> None:
        self.start = start
        self.stop = stop

    def _columns(self, count_cols: int) -> range:
        return _clip(self.start, self.stop, count_cols)

    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        columns = self._columns(count_cols)
        for row in range(count_rows):
            for col in columns:
                yield (row, col)

    def entities(self, count_rows: int, count_cols: int) -> Iterator[Entity]:
        for col in self._columns(count_cols):
            yield Entity.for_column(col)


class LastColumn(ColumnRange):
    def __init__(self) -> None:
        super().__init__(0)

    def _columns(self, count_cols: int) -> range:
        return range(count_cols - 1, count_cols) if count_cols else range(0)


class Columns:
    """Constructors for column selectors."""

    @staticmethod
    def single(index: int) -> ColumnRange:
        return ColumnRange(index, index + 1)

    @staticmethod
    def new(start: int, stop: int | None = None) -> ColumnRange:
        return ColumnRange(start, stop)

    @staticmethod
    def first() -> ColumnRange:
        return ColumnRange(0, 1)

    @staticmethod
    def last() -> ColumnRange:
        return LastColumn()


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class _Union(Selector):
    def __init__(self, left: Selector, right: Selector) -> None:
        self.left = left
        self.right = right

    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        seen: set[Position] = set()
        for selector in (self.left, self.right):
            for pos in selector.cells(count_rows, count_cols):
                if pos not in seen:
                    seen.add(pos)
                    yield pos

    def entities(self, count_rows: int, count_cols: int) -> Iterator[Entity]:
        seen: set[Entity] = set()
        for selector in (self.left, self.right):
            for entity in selector.entities(count_rows, count_cols):
                if entity not in seen:
                    seen.add(entity)
                    yield entity


class _Difference(Selector):
    def __init__(self, left: Selector, right: Selector) -> None:
        self.left = left
        self.right = right

    def cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        excluded = set(self.right.cells(count_rows, count_cols))
        for pos in self.left.cells(count_rows, count_cols):
            if pos not in excluded:
                yield pos


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve(
    selector: Selector,
    count_rows: int,
    count_cols: int,
    config: GridConfig | None = None,
) -> Iterator[Position]:
    """Resolve *selector* to concrete positions.

    When *config* is given, positions absorbed by a span are redirected to
    the span's origin so a merged cell is only ever addressed once.
    """
    if config is None:
        yield from selector.cells(count_rows, count_cols)
        return

    seen: set[Position] = set()
    for pos in selector.cells(count_rows, count_cols):
        origin = config.span_origin(pos)
        if origin not in seen:
            seen.add(origin)
            yield origin
