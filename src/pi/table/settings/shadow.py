"""Shadow: a drop shadow drawn around the rendered table.

```text
┌───┐
│ 1 │▒
└───┘▒
 ▒▒▒▒▒
```

The shadow is applied to the finished block of lines, after every other
setting, and is not itself part of the grid: border texts and spans never
reach into it.
"""

from __future__ import annotations

from pi.table.grid.config import GridConfig
from pi.table.records import VecRecords
from pi.table.utils import visible_width


class Shadow:
    """A shadow *size* characters thick, shifted by *offset* along the table.

    By default the shadow falls to the right and below; ``left`` and ``top``
    flip either direction.
    """

    DEFAULT_FILL = "▒"

    def __init__(
        self,
        size: int = 1,
        offset: int = 1,
        left: bool = False,
        top: bool = False,
        fill: str = DEFAULT_FILL,
    ) -> None:
        self.size = max(size, 0)
        self.offset = max(offset, 0)
        self.left = left
        self.top = top
        self.fill = fill

    def change(self, records: VecRecords, config: GridConfig) -> None:
        config.set_shadow(self)

    def apply(self, lines: list[str]) -> list[str]:
        if not lines or self.size == 0:
            return lines

        count = len(lines)
        width = visible_width(lines[0])
        shaded_side = self.fill * self.size
        blank_side = " " * self.size

        result: list[str] = []
        for index, line in enumerate(lines):
            if self.top:
                shaded = index < count - self.offset
            else:
                shaded = index >= self.offset
            side = shaded_side if shaded else blank_side
            result.append(side + line if self.left else line + side)

        full = width + self.size
        gap = min(self.offset, full)
        if self.left:
            edge = self.fill * (full - gap) + " " * gap
        else:
            edge = " " * gap + self.fill * (full - gap)
        edges = [edge] * self.size

        return edges + result if self.top else result + edges
