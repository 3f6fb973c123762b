"""Grid engine: configuration, dimension estimation and rendering."""

from pi.table.grid.builder import GridBuilder
from pi.table.grid.config import (
    BorderGrid,
    Borders,
    GridConfig,
    HorizontalLine,
    VerticalLine,
    WidthTarget,
)
from pi.table.grid.dimension import DimensionPlan, estimate
from pi.table.grid.entity import (
    Cell,
    Columns,
    Rows,
    Segment,
    Selector,
    resolve,
)
from pi.table.grid.types import (
    GLOBAL,
    AlignmentHorizontal,
    AlignmentVertical,
    Border,
    Entity,
    Margin,
    Padding,
    Position,
)

__all__ = [
    "GLOBAL",
    "AlignmentHorizontal",
    "AlignmentVertical",
    "Border",
    "BorderGrid",
    "Borders",
    "Cell",
    "Columns",
    "DimensionPlan",
    "Entity",
    "GridBuilder",
    "GridConfig",
    "HorizontalLine",
    "Margin",
    "Padding",
    "Position",
    "Rows",
    "Segment",
    "Selector",
    "VerticalLine",
    "WidthTarget",
    "estimate",
    "resolve",
]
