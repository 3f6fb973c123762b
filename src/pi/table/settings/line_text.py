"""Text written over a horizontal border line.

```text
┌Nums───┐
│ 5 │ 6 │
└───┴───┘
```
"""

from __future__ import annotations

from pi.table.grid.config import GridConfig
from pi.table.grid.entity import RowRange
from pi.table.records import VecRecords


class LineText:
    """Write *text* on a horizontal border line, starting *offset* columns in.

    *line* is a line index (``0`` is the top edge, negative indexes count
    from the bottom edge) or a row selector: ``Rows.first()`` targets the
    top edge and ``Rows.last()`` the bottom one.  The text is clipped at the
    end of the line and is dropped when the line is not drawn.
    """

    def __init__(self, text: str, line: int | RowRange = 0, offset: int = 0) -> None:
        self.text = text
        self.line = line
        self.offset = offset

    def horizontal(self, line: int | RowRange) -> LineText:
        return LineText(self.text, line, self.offset)

    def with_offset(self, offset: int) -> LineText:
        return LineText(self.text, self.line, offset)

    def change(self, records: VecRecords, config: GridConfig) -> None:
        count_rows = records.count_rows()
        if isinstance(self.line, int):
            index = self.line if self.line >= 0 else count_rows + 1 + self.line
        else:
            index = self.line.line_index(count_rows)
        if 0 <= index <= count_rows:
            config.set_border_text(index, self.offset, self.text)


BorderText = LineText
