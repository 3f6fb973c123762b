"""Padding, alignment, content formatting and margin settings."""

from __future__ import annotations

from typing import Callable

from pi.table.grid.config import GridConfig
from pi.table.grid.entity import Selector
from pi.table.grid.types import AlignmentHorizontal, AlignmentVertical
from pi.table.grid.types import Margin as GridMargin
from pi.table.grid.types import Padding as GridPadding
from pi.table.records import VecRecords


class Padding(GridPadding):
    """Inner spacing of the selected cells.

    Positional order is ``top, bottom, left, right``; ``fill`` is the
    character the padding is drawn with.
    """

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        shape = (records.count_rows(), records.count_columns())
        for entity in selector.entities(*shape):
            config.set_padding(entity, self)


class Alignment:
    """Horizontal or vertical placement of cell text."""

    def __init__(self, value: AlignmentHorizontal | AlignmentVertical) -> None:
        self.value = value

    @classmethod
    def left(cls) -> Alignment:
        return cls(AlignmentHorizontal.LEFT)

    @classmethod
    def right(cls) -> Alignment:
        return cls(AlignmentHorizontal.RIGHT)

    @classmethod
    def center(cls) -> Alignment:
        return cls(AlignmentHorizontal.CENTER)

    @classmethod
    def top(cls) -> Alignment:
        return cls(AlignmentVertical.TOP)

    @classmethod
    def bottom(cls) -> Alignment:
        return cls(AlignmentVertical.BOTTOM)

    @classmethod
    def center_vertical(cls) -> Alignment:
        return cls(AlignmentVertical.CENTER)

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        shape = (records.count_rows(), records.count_columns())
        for entity in selector.entities(*shape):
            if isinstance(self.value, AlignmentHorizontal):
                config.set_alignment_horizontal(entity, self.value)
            else:
                config.set_alignment_vertical(entity, self.value)

    def __repr__(self) -> str:
        return f"Alignment({self.value.name})"


class Format:
    """Rewrite the text of the selected cells with a function."""

    def __init__(self, fn: Callable[[str], str]) -> None:
        self.fn = fn

    @classmethod
    def content(cls, fn: Callable[[str], str]) -> Format:
        return cls(fn)

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        for pos in selector.cells(records.count_rows(), records.count_columns()):
            records.set_text(pos, self.fn(records.get_text(pos)))


class Margin(GridMargin):
    """Space around the whole table, outside of any border or shadow."""

    def change(self, records: VecRecords, config: GridConfig) -> None:
        config.set_margin(self)
