"""Exceptions raised by pi-table."""

from __future__ import annotations


class TableError(Exception):
    """Base class for pi-table errors."""


class InconsistentGeometryError(TableError):
    """The grid configuration references cells the records do not have.

    Raised at render time, e.g. when a span origin lies outside the
    records' shape.  Rendering is all-or-nothing: no partial output is
    produced.
    """

    def __init__(self, message: str, shape: tuple[int, int]) -> None:
        super().__init__(f"{message} (records shape {shape[0]}x{shape[1]})")
        self.shape = shape
