"""Section store for the status bar.

A ``StatusBar`` owns a fixed number of ``Section`` slots. Slots are
addressed by position; the position is also the display order.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from typing import Iterator, Literal, Optional, Union, get_args

from rich.segment import Segment

from ....errors import IndexOutOfBoundsError
from ....utils.logging import get_logger
from ...buffer import Buffer, Rect
from ...render import render
from ...util.styled import StyledContent, StyledLike, styled
from ...util.truncate import iter_cells, measure

log = get_logger(__name__)

Align = Literal["left", "center", "right"]
ALIGNMENTS: tuple[str, ...] = get_args(Align)


@dataclass(frozen=True)
class Section:
    """One slot of a status bar.

    Separators are decorations drawn right before and after the content.
    They are only drawn when the section has content. Content with no
    display width, such as an empty string, counts as no content.
    """

    content: Optional[StyledContent] = None
    pre_separator: Optional[StyledContent] = None
    post_separator: Optional[StyledContent] = None

    @property
    def is_empty(self) -> bool:
        if self.content is None:
            return True
        return measure(iter_cells(self.content.segments())) == 0

    def with_content(self, content: Optional[StyledLike]) -> "Section":
        return replace(self, content=styled(content))

    def with_pre_separator(self, separator: Optional[StyledLike]) -> "Section":
        return replace(self, pre_separator=styled(separator))

    def with_post_separator(self, separator: Optional[StyledLike]) -> "Section":
        return replace(self, post_separator=styled(separator))

    def segments(self) -> list[Segment]:
        """Return separators and content as one segment list."""
        if self.is_empty:
            return []
        parts = (self.pre_separator, self.content, self.post_separator)
        return [
            segment
            for part in parts
            if part is not None
            for segment in part.segments()
        ]


SectionLike = Union[Section, StyledLike, None]


class StatusBar:
    """A single-line bar split into a fixed number of sections.

    Example:
        bar = StatusBar(3).section(0, "Left").section(1, "Center").section(2, "Right")
        render(Rect(0, 0, 30, 1), bar, buffer)
    """

    def __init__(
        self,
        section_count: int,
        *,
        spacing: int = 0,
        align: Align = "left",
    ):
        """Initialize a status bar with empty sections.

        Args:
            section_count: Number of sections; zero is allowed and renders nothing
            spacing: Blank columns between adjacent sections
            align: Placement of content within each section

        Raises:
            ValueError: If any argument is out of range
        """
        if isinstance(section_count, bool) or not isinstance(section_count, int):
            raise ValueError(f"section_count must be an integer, got {section_count!r}")
        if section_count < 0:
            raise ValueError(f"section_count must not be negative, got {section_count}")
        if isinstance(spacing, bool) or not isinstance(spacing, int) or spacing < 0:
            raise ValueError(f"spacing must be a non-negative integer, got {spacing!r}")
        if align not in ALIGNMENTS:
            raise ValueError(f"align must be one of {ALIGNMENTS}, got {align!r}")

        self._sections: list[Section] = [Section() for _ in range(section_count)]
        self.spacing = spacing
        self.align: Align = align

    @property
    def section_count(self) -> int:
        return len(self._sections)

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(tuple(self._sections))

    def __getitem__(self, index: int) -> Section:
        return self._sections[self._check_index(index)]

    def __repr__(self) -> str:
        return (
            f"StatusBar(section_count={self.section_count}, "
            f"spacing={self.spacing}, align={self.align!r})"
        )

    def _check_index(self, index: int) -> int:
        count = len(self._sections)
        try:
            position = None if isinstance(index, bool) else operator.index(index)
        except TypeError:
            position = None
        if position is None or not (0 <= position < count):
            log.debug(
                "section_index_rejected",
                requested_index=index,
                section_count=count,
            )
            raise IndexOutOfBoundsError(index, count)
        return position

    def section(self, index: int, content: SectionLike) -> "StatusBar":
        """Set the section at ``index``, replacing what was there.

        Args:
            index: Position of the section, ``0 <= index < section_count``
            content: A ``Section``, anything convertible to styled text,
                or ``None`` to clear the slot

        Returns:
            This status bar, so calls can be chained

        Raises:
            IndexOutOfBoundsError: If ``index`` is out of range
            TypeError: If ``content`` cannot be converted to styled text
        """
        index = self._check_index(index)
        if isinstance(content, Section):
            new_section = content
        else:
            new_section = replace(self._sections[index], content=styled(content))
        self._sections[index] = new_section
        log.debug("section_updated", index=index, empty=new_section.is_empty)
        return self

    def render(self, area: Rect, buffer: Buffer) -> None:
        """Paint this bar into ``buffer`` within ``area``."""
        render(area, self, buffer)
