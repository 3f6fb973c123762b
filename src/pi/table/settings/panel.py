"""Panels: full-width rows inserted into the table.

A panel is a regular row whose first cell spans every column.  Overrides
set on rows at or below the insertion point move down with their rows.
"""

from __future__ import annotations

import logging

from pi.table.grid.config import GridConfig
from pi.table.records import VecRecords

logger = logging.getLogger(__name__)


class Panel:
    """Insert *text* as a spanned row before row *row* (clamped to the table)."""

    def __init__(self, text: str, row: int) -> None:
        self.text = text
        self.row = row

    def _index(self, records: VecRecords) -> int:
        return min(max(self.row, 0), records.count_rows())

    def change(self, records: VecRecords, config: GridConfig) -> None:
        if records.count_columns() == 0:
            records.push_column([])

        index = self._index(records)
        count_cols = records.count_columns()
        logger.debug("Inserting panel at row %d across %d columns", index, count_cols)

        records.insert_row(index, [self.text])
        config.insert_row(index)
        config.set_span((index, 0), count_cols, count_cols)


class Header(Panel):
    """A panel above the first row."""

    def __init__(self, text: str) -> None:
        super().__init__(text, 0)


class Footer(Panel):
    """A panel below the last row."""

    def __init__(self, text: str) -> None:
        super().__init__(text, 0)

    def _index(self, records: VecRecords) -> int:
        return records.count_rows()
