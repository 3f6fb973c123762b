"""pi-table: text table layout and rendering."""

from pi.table.config import Config, load_config
from pi.table.errors import InconsistentGeometryError, TableError
from pi.table.grid import (
    Cell,
    Columns,
    GridBuilder,
    GridConfig,
    HorizontalLine,
    Rows,
    Segment,
    VerticalLine,
)
from pi.table.records import Records, VecRecords
from pi.table.settings import (
    Alignment,
    Border,
    BorderText,
    Concat,
    Footer,
    Format,
    Header,
    Height,
    Highlight,
    LineText,
    Margin,
    Modify,
    Padding,
    Panel,
    Shadow,
    Span,
    Style,
    Width,
)
from pi.table.table import Table
from pi.table.utils import truncate_to_width, visible_width

__all__ = [
    "Alignment",
    "Border",
    "BorderText",
    "Cell",
    "Columns",
    "Concat",
    "Config",
    "Footer",
    "Format",
    "GridBuilder",
    "GridConfig",
    "Header",
    "Height",
    "Highlight",
    "HorizontalLine",
    "InconsistentGeometryError",
    "LineText",
    "Margin",
    "Modify",
    "Padding",
    "Panel",
    "Records",
    "Rows",
    "Segment",
    "Shadow",
    "Span",
    "Style",
    "Table",
    "TableError",
    "VecRecords",
    "VerticalLine",
    "Width",
    "load_config",
    "truncate_to_width",
    "visible_width",
]
