"""Table: records plus the grid configuration they are rendered with."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from pi.table.config import Config, load_config
from pi.table.grid.builder import GridBuilder
from pi.table.grid.config import GridConfig
from pi.table.grid.entity import Selector
from pi.table.grid.types import GLOBAL, Padding
from pi.table.records import VecRecords
from pi.table.settings.option import CellOption, TableOption
from pi.table.settings.style import STYLES, Style
from pi.table.utils import visible_width

logger = logging.getLogger(__name__)


class Table:
    """A table handle: settings are applied in order, then rendered.

    ```python
    table = Table([["0-0", "0-1"], ["1-0", "1-1"]], header=["a", "b"])
    table.apply(Style.psql()).modify(Rows.first(), Alignment.center())
    print(table)
    ```
    """

    def __init__(
        self,
        rows: Iterable[Iterable[Any]] = (),
        header: Sequence[Any] | None = None,
        config: Config | None = None,
    ) -> None:
        data = [list(header)] if header is not None else []
        data.extend(rows)
        self._records = VecRecords(data)
        self._config = _new_grid_config(config or load_config())

    @classmethod
    def from_records(cls, records: VecRecords, config: Config | None = None) -> Table:
        table = cls(config=config)
        table._records = records
        return table

    @property
    def records(self) -> VecRecords:
        return self._records

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def shape(self) -> tuple[int, int]:
        return (self._records.count_rows(), self._records.count_columns())

    def apply(self, *options: TableOption) -> Table:
        """Apply table options in order; returns the table for chaining."""
        for option in options:
            logger.debug("Applying %s", type(option).__name__)
            option.change(self._records, self._config)
        return self

    def modify(self, selector: Selector, *options: CellOption) -> Table:
        """Apply cell options to the cells *selector* resolves to."""
        for option in options:
            logger.debug("Applying %s to %r", type(option).__name__, selector)
            option.change_cell(self._records, self._config, selector)
        return self

    def copy(self) -> Table:
        table = Table.from_records(self._records.copy())
        table._config = self._config.copy()
        return table

    def render_lines(self) -> list[str]:
        return GridBuilder(self._records, self._config).build_lines()

    def render(self) -> str:
        return "\n".join(self.render_lines())

    def total_width(self) -> int:
        lines = self.render_lines()
        return visible_width(lines[0]) if lines else 0

    def total_height(self) -> int:
        return len(self.render_lines())

    def __str__(self) -> str:
        return self.render()


def _new_grid_config(settings: Config) -> GridConfig:
    config = GridConfig(tab_width=settings.tab_width, truncation_suffix=settings.truncation_suffix)
    config.set_padding(GLOBAL, Padding(left=settings.padding_left, right=settings.padding_right))

    factory = STYLES.get(settings.style)
    if factory is None:
        logger.warning("Unknown table style %r, using ascii", settings.style)
        factory = Style.ascii
    factory().change(VecRecords(), config)
    return config
