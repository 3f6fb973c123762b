"""Records: the 2-D text source a table renders."""

from __future__ import annotations

from typing import Any, Iterable, Protocol

from pi.table.grid.types import Position


class Records(Protocol):
    """Read-only indexed access to cell text."""

    def count_rows(self) -> int: ...

    def count_columns(self) -> int: ...

    def get_text(self, pos: Position) -> str: ...


class VecRecords:
    """Records backed by a list of rows of strings.

    Ragged input is padded with empty cells to the widest row.
    """

    def __init__(self, rows: Iterable[Iterable[Any]] = ()) -> None:
        self._rows: list[list[str]] = [[_to_text(v) for v in row] for row in rows]
        self._count_cols = max((len(row) for row in self._rows), default=0)
        for row in self._rows:
            row.extend([""] * (self._count_cols - len(row)))

    def count_rows(self) -> int:
        return len(self._rows)

    def count_columns(self) -> int:
        return self._count_cols

    def get_text(self, pos: Position) -> str:
        row, col = pos
        return self._rows[row][col]

    def set_text(self, pos: Position, text: str) -> None:
        row, col = pos
        self._rows[row][col] = text

    def insert_row(self, index: int, row: Iterable[Any]) -> None:
        """Insert a row before *index*, fitted to the current column count."""
        cells = [_to_text(v) for v in row][: self._count_cols]
        cells.extend([""] * (self._count_cols - len(cells)))
        index = min(max(index, 0), len(self._rows))
        self._rows.insert(index, cells)

    def push_row(self, row: Iterable[Any]) -> None:
        self.insert_row(len(self._rows), row)

    def push_column(self, column: Iterable[Any]) -> None:
        """Append a column; missing cells are empty, extra ones are dropped."""
        values = [_to_text(v) for v in column]
        for i, row in enumerate(self._rows):
            row.append(values[i] if i < len(values) else "")
        self._count_cols += 1

    def copy(self) -> VecRecords:
        records = VecRecords(self._rows)
        records._count_cols = self._count_cols
        return records

    def __iter__(self):
        return (list(row) for row in self._rows)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
