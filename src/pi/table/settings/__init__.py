"""Table settings: every option a table can be modified with."""

from pi.table.settings.border import Border, EmptyBorder
from pi.table.settings.concat import Concat
from pi.table.settings.formatting import Alignment, Format, Margin, Padding
from pi.table.settings.highlight import Highlight
from pi.table.settings.line_text import BorderText, LineText
from pi.table.settings.measurement import Height, Width
from pi.table.settings.option import CellOption, Modify, TableOption
from pi.table.settings.panel import Footer, Header, Panel
from pi.table.settings.shadow import Shadow
from pi.table.settings.span import Span
from pi.table.settings.style import CorrectSpans, Style

__all__ = [
    "Alignment",
    "Border",
    "BorderText",
    "CellOption",
    "Concat",
    "CorrectSpans",
    "EmptyBorder",
    "Footer",
    "Format",
    "Header",
    "Height",
    "Highlight",
    "LineText",
    "Margin",
    "Modify",
    "Padding",
    "Panel",
    "Shadow",
    "Span",
    "Style",
    "TableOption",
    "Width",
]
