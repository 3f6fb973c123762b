"""Cell border settings."""

from __future__ import annotations

from pi.table.grid.config import GridConfig
from pi.table.grid.entity import Selector, resolve
from pi.table.grid.types import Border as GridBorder
from pi.table.records import VecRecords


class Border(GridBorder):
    """Border of a cell; as an option it replaces the border of each selected cell.

    ```text
                            top border
                                |
                                V
    corner top left ------> +_______+  <---- corner top right
                            |       |
    left border ----------> |  cell |  <---- right border
                            |       |
    corner bottom left ---> +_______+  <---- corner bottom right
                                ^
                                |
                           bottom border
    ```

    A cell covered by a span is redirected to the span's origin, whose
    border runs around the whole merged cell.
    """

    @staticmethod
    def empty() -> EmptyBorder:
        """An option removing border overrides from the selected cells."""
        return EmptyBorder()

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        shape = (records.count_rows(), records.count_columns())
        for pos in resolve(selector, *shape, config):
            config.set_border(pos, self)


class EmptyBorder:
    """Reverts the selected cells to the style's borders."""

    def change_cell(self, records: VecRecords, config: GridConfig, selector: Selector) -> None:
        shape = (records.count_rows(), records.count_columns())
        for pos in resolve(selector, *shape, config):
            config.remove_border(pos)
