"""Table styles: named sets of default border characters.

A style fills every border character of the table that has no explicit
override.  Styles are immutable; the fluent setters return a changed copy::

    Style.modern().intersection_top("─").horizontals({1: HorizontalLine("─", "┬", "├", "┤")})
"""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Callable, Iterable, Mapping

from pi.table.grid.config import Borders, GridConfig, HorizontalLine, VerticalLine
from pi.table.records import VecRecords

LineSpec = Mapping[int, HorizontalLine] | Iterable[tuple[int, HorizontalLine]]


class Style:
    """Default border characters plus per-line overrides."""

    def __init__(
        self,
        borders: Borders | None = None,
        horizontals: Mapping[int, HorizontalLine] | None = None,
        verticals: Mapping[int, VerticalLine] | None = None,
    ) -> None:
        self._borders = borders or Borders()
        self._horizontals = dict(horizontals or {})
        self._verticals = dict(verticals or {})

    # -----------------------------------------------------------------------
    # Presets
    # -----------------------------------------------------------------------

    @classmethod
    def empty(cls) -> Style:
        return cls()

    @classmethod
    def blank(cls) -> Style:
        return cls(Borders(vertical=" "))

    @classmethod
    def ascii(cls) -> Style:
        return cls(
            Borders(
                top="-",
                bottom="-",
                left="|",
                right="|",
                horizontal="-",
                vertical="|",
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                top_intersection="+",
                bottom_intersection="+",
                left_intersection="+",
                right_intersection="+",
                intersection="+",
            )
        )

    @classmethod
    def dots(cls) -> Style:
        return cls(
            Borders(
                top=".",
                bottom=".",
                left=":",
                right=":",
                horizontal=".",
                vertical=":",
                top_left=".",
                top_right=".",
                bottom_left=":",
                bottom_right=":",
                top_intersection=".",
                bottom_intersection=":",
                left_intersection=":",
                right_intersection=":",
                intersection=":",
            )
        )

    @classmethod
    def psql(cls) -> Style:
        return cls(Borders(vertical="|"), {1: HorizontalLine("-", "+")})

    @classmethod
    def markdown(cls) -> Style:
        return cls(
            Borders(left="|", right="|", vertical="|"),
            {1: HorizontalLine("-", "|", "|", "|")},
        )

    @classmethod
    def modern(cls) -> Style:
        return cls(
            Borders(
                top="─",
                bottom="─",
                left="│",
                right="│",
                horizontal="─",
                vertical="│",
                top_left="┌",
                top_right="┐",
                bottom_left="└",
                bottom_right="┘",
                top_intersection="┬",
                bottom_intersection="┴",
                left_intersection="├",
                right_intersection="┤",
                intersection="┼",
            )
        )

    @classmethod
    def sharp(cls) -> Style:
        return cls.modern().remove_horizontal().horizontals(
            {1: HorizontalLine("─", "┼", "├", "┤")}
        )

    @classmethod
    def rounded(cls) -> Style:
        return (
            cls.sharp()
            .corner_top_left("╭")
            .corner_top_right("╮")
            .corner_bottom_left("╰")
            .corner_bottom_right("╯")
        )

    @classmethod
    def extended(cls) -> Style:
        return cls(
            Borders(
                top="═",
                bottom="═",
                left="║",
                right="║",
                horizontal="═",
                vertical="║",
                top_left="╔",
                top_right="╗",
                bottom_left="╚",
                bottom_right="╝",
                top_intersection="╦",
                bottom_intersection="╩",
                left_intersection="╠",
                right_intersection="╣",
                intersection="╬",
            )
        )

    @classmethod
    def re_structured_text(cls) -> Style:
        return cls(
            Borders(
                top="=",
                bottom="=",
                vertical=" ",
                top_intersection=" ",
                bottom_intersection=" ",
            ),
            {1: HorizontalLine("=", " ")},
        )

    @staticmethod
    def correct_spans() -> CorrectSpans:
        """Rewrite intersections that spans leave without a vertical arm."""
        return CorrectSpans()

    @classmethod
    def named(cls, name: str) -> Style:
        """Look up a preset by name; raises ``KeyError`` for unknown names."""
        return STYLES[name]()

    # -----------------------------------------------------------------------
    # Fluent setters
    # -----------------------------------------------------------------------

    def _with(self, **changes: str | None) -> Style:
        style = copy.deepcopy(self)
        style._borders = replace(self._borders, **changes)
        return style

    def top(self, c: str | None) -> Style:
        return self._with(top=c)

    def bottom(self, c: str | None) -> Style:
        return self._with(bottom=c)

    def left(self, c: str | None) -> Style:
        return self._with(left=c)

    def right(self, c: str | None) -> Style:
        return self._with(right=c)

    def horizontal(self, c: str | None) -> Style:
        return self._with(horizontal=c)

    def vertical(self, c: str | None) -> Style:
        return self._with(vertical=c)

    def corner_top_left(self, c: str | None) -> Style:
        return self._with(top_left=c)

    def corner_top_right(self, c: str | None) -> Style:
        return self._with(top_right=c)

    def corner_bottom_left(self, c: str | None) -> Style:
        return self._with(bottom_left=c)

    def corner_bottom_right(self, c: str | None) -> Style:
        return self._with(bottom_right=c)

    def intersection_top(self, c: str | None) -> Style:
        return self._with(top_intersection=c)

    def intersection_bottom(self, c: str | None) -> Style:
        return self._with(bottom_intersection=c)

    def intersection_left(self, c: str | None) -> Style:
        return self._with(left_intersection=c)

    def intersection_right(self, c: str | None) -> Style:
        return self._with(right_intersection=c)

    def intersection(self, c: str | None) -> Style:
        return self._with(intersection=c)

    def remove_horizontal(self) -> Style:
        """Drop the inner horizontal lines (the frame stays)."""
        style = self._with(
            horizontal=None,
            left_intersection=None,
            right_intersection=None,
            intersection=None,
        )
        style._horizontals = {}
        return style

    def remove_vertical(self) -> Style:
        """Drop the inner vertical lines (the frame stays)."""
        style = self._with(
            vertical=None,
            top_intersection=None,
            bottom_intersection=None,
            intersection=None,
        )
        style._verticals = {}
        return style

    def remove_frame(self) -> Style:
        return self._with(
            top=None,
            bottom=None,
            left=None,
            right=None,
            top_left=None,
            top_right=None,
            bottom_left=None,
            bottom_right=None,
            top_intersection=None,
            bottom_intersection=None,
            left_intersection=None,
            right_intersection=None,
        )

    def horizontals(self, lines: LineSpec) -> Style:
        """Set explicit horizontal lines by line index (0 is the top edge)."""
        style = copy.deepcopy(self)
        items = lines.items() if isinstance(lines, Mapping) else lines
        style._horizontals.update(dict(items))
        return style

    def verticals(self, lines: Mapping[int, VerticalLine]) -> Style:
        """Set explicit vertical lines by line index (0 is the left edge)."""
        style = copy.deepcopy(self)
        style._verticals.update(lines)
        return style

    # -----------------------------------------------------------------------
    # Getters
    # -----------------------------------------------------------------------

    @property
    def borders(self) -> Borders:
        return copy.copy(self._borders)

    def get_horizontal(self) -> HorizontalLine:
        """The inner horizontal line of the style."""
        b = self._borders
        return HorizontalLine(b.horizontal, b.intersection, b.left_intersection, b.right_intersection)

    def get_vertical(self) -> VerticalLine:
        """The inner vertical line of the style."""
        b = self._borders
        return VerticalLine(b.vertical, b.intersection, b.top_intersection, b.bottom_intersection)

    def get_horizontal_line(self, line: int) -> HorizontalLine | None:
        return self._horizontals.get(line)

    # -----------------------------------------------------------------------
    # Option
    # -----------------------------------------------------------------------

    def change(self, records: VecRecords, config: GridConfig) -> None:
        config.set_borders(self._borders)
        config.clear_lines()
        for line, value in self._horizontals.items():
            config.set_horizontal_line(line, value)
        for line, value in self._verticals.items():
            config.set_vertical_line(line, value)


class CorrectSpans:
    """Normalize intersections around spans.

    An inner intersection keeps its character only when a vertical line
    continues both above and below it.  With a vertical line only below it
    becomes the style's top intersection, only above the bottom
    intersection, and with neither the horizontal line runs through.
    """

    def change(self, records: VecRecords, config: GridConfig) -> None:
        config.correct_spans = True


STYLES: dict[str, Callable[[], Style]] = {
    "empty": Style.empty,
    "blank": Style.blank,
    "ascii": Style.ascii,
    "dots": Style.dots,
    "psql": Style.psql,
    "markdown": Style.markdown,
    "modern": Style.modern,
    "sharp": Style.sharp,
    "rounded": Style.rounded,
    "extended": Style.extended,
    "re_structured_text": Style.re_structured_text,
}
