"""The option protocol every table setting implements."""

from __future__ import annotations

from typing import Protocol

from pi.table.grid.config import GridConfig
from pi.table.grid.entity import Selector
from pi.table.records import VecRecords


class TableOption(Protocol):
    """A setting applied to a whole table."""

    def change(self, records: VecRecords, config: GridConfig) -> None: ...


class CellOption(Protocol):
    """A setting applied to the cells a selector resolves to."""

    def change_cell(
        self, records: VecRecords, config: GridConfig, selector: Selector
    ) -> None: ...


class Modify:
    """Apply cell options to a selection, as a table option.

    ```python
    table.apply(Modify(Rows.first(), Alignment.center(), Padding(1, 1, 2, 2)))
    ```
    """

    def __init__(self, selector: Selector, *options: CellOption) -> None:
        self.selector = selector
        self.options = list(options)

    def with_(self, option: CellOption) -> Modify:
        self.options.append(option)
        return self

    def change(self, records: VecRecords, config: GridConfig) -> None:
        for option in self.options:
            option.change_cell(records, config, self.selector)
