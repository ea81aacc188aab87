"""Cell buffer the status bar paints into.

A ``Buffer`` is a rectangular grid of cells, each holding one glyph and a
Rich style. Rows can be exported as plain strings (handy in tests) or as
Rich segments for a Textual ``Strip``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from rich.cells import cell_len
from rich.segment import Segment
from rich.style import Style

from .util.truncate import StyledCell, iter_cells


@dataclass(frozen=True)
class Rect:
    """A rectangle in terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass
class Cell:
    """A single terminal cell.

    ``skip`` marks the second column of a double-width glyph; such cells
    are not emitted when exporting a row.
    """

    symbol: str = " "
    style: Style = field(default_factory=Style.null)
    skip: bool = False

    def patch_style(self, style: Optional[Style]) -> None:
        if style is not None:
            self.style = self.style + style


class Buffer:
    """A grid of :class:`Cell` objects covering ``area``."""

    def __init__(self, area: Rect, style: Optional[Style] = None):
        """Initialize an empty buffer.

        Args:
            area: Region of the screen the buffer covers
            style: Base style every cell starts with
        """
        self.area = area
        base = style if style is not None else Style.null()
        self.cells: list[Cell] = [
            Cell(style=base) for _ in range(max(area.area, 0))
        ]

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        return cls(area)

    @classmethod
    def with_lines(cls, lines: Sequence[str]) -> "Buffer":
        """Build a buffer from plain text rows, as expected output in tests."""
        width = max((cell_len(line) for line in lines), default=0)
        buffer = cls(Rect(0, 0, width, len(lines)))
        for y, line in enumerate(lines):
            buffer.set_string(0, y, line)
        return buffer

    def index_of(self, x: int, y: int) -> int:
        if not self.area.contains(x, y):
            raise IndexError(f"Position ({x}, {y}) is outside {self.area}")
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def get(self, x: int, y: int) -> Cell:
        return self.cells[self.index_of(x, y)]

    def set_cells(
        self,
        x: int,
        y: int,
        cells: Iterable[StyledCell],
        max_width: Optional[int] = None,
    ) -> int:
        """Paint glyphs starting at ``(x, y)``.

        Painting stops at ``max_width`` columns or at the buffer edge,
        whichever comes first; a wide glyph that does not fit entirely is
        not painted. Existing wide glyphs that are only partly overwritten
        are replaced by a blank. Returns the column after the last painted
        glyph.
        """
        if not self.area.contains(x, y):
            return x
        limit = self.area.right
        if max_width is not None:
            limit = min(limit, x + max(max_width, 0))
        column = x
        for glyph in cells:
            if column + glyph.width > limit:
                break
            self._split_wide_glyph(column, y)
            cell = self.get(column, y)
            cell.symbol = glyph.symbol
            cell.skip = False
            cell.patch_style(glyph.style)
            for offset in range(1, glyph.width):
                trailing = self.get(column + offset, y)
                trailing.symbol = ""
                trailing.skip = True
                trailing.patch_style(glyph.style)
            column += glyph.width
            self._drop_orphaned_continuations(column, y)
        return column

    def _split_wide_glyph(self, x: int, y: int) -> None:
        # A glyph whose continuation is about to be overwritten becomes blanks.
        lead = x
        while lead > self.area.left and self.get(lead, y).skip:
            lead -= 1
        if lead == x:
            return
        self.get(lead, y).symbol = " "
        for column in range(lead + 1, x):
            cell = self.get(column, y)
            cell.symbol = " "
            cell.skip = False

    def _drop_orphaned_continuations(self, x: int, y: int) -> None:
        # Continuations of a glyph whose head was just overwritten.
        while x < self.area.right:
            cell = self.get(x, y)
            if not cell.skip:
                break
            cell.symbol = " "
            cell.skip = False
            x += 1

    def set_string(
        self, x: int, y: int, text: str, style: Optional[Style] = None
    ) -> int:
        return self.set_cells(x, y, iter_cells([Segment(text, style)]))

    def line_segments(self, y: int) -> list[Segment]:
        """Return row ``y`` as segments, merging runs of equal style."""
        segments: list[Segment] = []
        text: list[str] = []
        current: Optional[Style] = None
        for x in range(self.area.left, self.area.right):
            cell = self.get(x, y)
            if cell.skip:
                continue
            if current is not None and cell.style != current:
                segments.append(Segment("".join(text), current))
                text = []
            current = cell.style
            text.append(cell.symbol)
        if text:
            segments.append(Segment("".join(text), current))
        return segments

    def to_lines(self) -> list[str]:
        """Return every row as plain text."""
        return [
            "".join(segment.text for segment in self.line_segments(y))
            for y in range(self.area.top, self.area.bottom)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Buffer(area={self.area!r}, lines={self.to_lines()!r})"
