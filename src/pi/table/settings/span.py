"""Column spans: make a cell take the room of several columns.

```python
table = Table([[1, 2, 3], [4, 5, 6]], header=[0, 1, 2])
table.modify(Cell(2, 0), Span.column(2)).modify(Cell(0, 1), Span.column(2))
print(table)
# +---+---+---+
# | 0 | 1     |
# +---+---+---+
# | 1 | 2 | 3 |
# +---+---+---+
# | 4     | 6 |
# +---+---+---+
```
"""

from __future__ import annotations

from pi.table.grid.config import GridConfig
from pi.table.grid.entity import Selector
from pi.table.records import VecRecords


class Span:
    """Horizontal span setting.

    Spans are set on the selected positions as they are, without
    redirecting covered cells: a new span replaces any older span it
    overlaps.  A size of 1 or less removes the span at that position.
    """

    def __init__(self, size: int) -> None:
        self.size = size

    @classmethod
    def column(cls, size: int) -> Span:
        return cls(size)

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        count_rows, count_cols = records.count_rows(), records.count_columns()
        for pos in selector.cells(count_rows, count_cols):
            config.set_span(pos, self.size, count_cols)
