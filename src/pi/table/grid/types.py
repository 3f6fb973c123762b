"""Core value types of the grid: positions, borders, padding, alignment."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

Position = tuple[int, int]


@dataclass(frozen=True)
class Border:
    """Border characters of a single cell.

    ```
                            top
                             |
                             V
    top_left ------------> +___+ <----- top_right
                           |   |
    left ----------------> |   | <----- right
                           +___+
    bottom_left ---------> ^   ^ <----- bottom_right
                           bottom
    ```

    Every side is optional.  An unset side renders as absent unless the
    table style supplies a default for it.
    """

    top: str | None = None
    bottom: str | None = None
    left: str | None = None
    right: str | None = None
    top_left: str | None = None
    top_right: str | None = None
    bottom_left: str | None = None
    bottom_right: str | None = None

    @classmethod
    def full(
        cls,
        top: str,
        bottom: str,
        left: str,
        right: str,
        top_left: str,
        top_right: str,
        bottom_left: str,
        bottom_right: str,
    ) -> Border:
        return cls(top, bottom, left, right, top_left, top_right, bottom_left, bottom_right)

    @classmethod
    def filled(cls, c: str) -> Border:
        """A border with every side and corner set to *c*."""
        return cls.full(c, c, c, c, c, c, c, c)

    def set_top(self, c: str) -> Border:
        return replace(self, top=c)

    def set_bottom(self, c: str) -> Border:
        return replace(self, bottom=c)

    def set_left(self, c: str) -> Border:
        return replace(self, left=c)

    def set_right(self, c: str) -> Border:
        return replace(self, right=c)

    def set_corner_top_left(self, c: str) -> Border:
        return replace(self, top_left=c)

    def set_corner_top_right(self, c: str) -> Border:
        return replace(self, top_right=c)

    def set_corner_bottom_left(self, c: str) -> Border:
        return replace(self, bottom_left=c)

    def set_corner_bottom_right(self, c: str) -> Border:
        return replace(self, bottom_right=c)

    def get_top(self) -> str:
        return _get_side(self.top, "top")

    def get_bottom(self) -> str:
        return _get_side(self.bottom, "bottom")

    def get_left(self) -> str:
        return _get_side(self.left, "left")

    def get_right(self) -> str:
        return _get_side(self.right, "right")

    def get_corner_top_left(self) -> str:
        return _get_side(self.top_left, "top_left")

    def get_corner_top_right(self) -> str:
        return _get_side(self.top_right, "top_right")

    def get_corner_bottom_left(self) -> str:
        return _get_side(self.bottom_left, "bottom_left")

    def get_corner_bottom_right(self) -> str:
        return _get_side(self.bottom_right, "bottom_right")

    def is_empty(self) -> bool:
        return all(
            c is None
            for c in (
                self.top,
                self.bottom,
                self.left,
                self.right,
                self.top_left,
                self.top_right,
                self.bottom_left,
                self.bottom_right,
            )
        )


def _get_side(value: str | None, name: str) -> str:
    if value is None:
        raise ValueError(f"border side {name!r} is not set")
    return value


@dataclass(frozen=True)
class Padding:
    """Inner spacing of a cell, in characters."""

    top: int = 0
    bottom: int = 0
    left: int = 1
    right: int = 1
    fill: str = " "

    @classmethod
    def zero(cls) -> Padding:
        return cls(0, 0, 0, 0)


@dataclass(frozen=True)
class Margin:
    """Outer spacing around the whole rendered table."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0
    fill: str = " "


class AlignmentHorizontal(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class AlignmentVertical(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"


@dataclass(frozen=True)
class Entity:
    """A layered settings target: the whole table, a row, a column or a cell.

    ``row`` and ``col`` are ``None`` where the entity does not constrain that
    axis, so ``Entity()`` is the global entity.
    """

    row: int | None = None
    col: int | None = None

    @classmethod
    def cell(cls, row: int, col: int) -> Entity:
        return cls(row, col)

    @classmethod
    def for_row(cls, row: int) -> Entity:
        return cls(row=row)

    @classmethod
    def for_column(cls, col: int) -> Entity:
        return cls(col=col)

    @property
    def is_global(self) -> bool:
        return self.row is None and self.col is None


GLOBAL = Entity()
