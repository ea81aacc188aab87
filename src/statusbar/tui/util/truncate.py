"""Display-width aware truncation utilities.

Widths here are terminal columns, not code points: wide (East-Asian)
characters take two columns and combining marks take none.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple, Optional

from rich.cells import cell_len, get_character_cell_size
from rich.segment import Segment
from rich.style import Style


class StyledCell(NamedTuple):
    """One glyph to be painted: its symbol, style and column width."""

    symbol: str
    style: Optional[Style]
    width: int


def _is_control(char: str) -> bool:
    codepoint = ord(char)
    return codepoint < 32 or 0x7F <= codepoint < 0xA0


def iter_cells(segments: Iterable[Segment]) -> Iterator[StyledCell]:
    """Split segments into glyphs.

    Control segments and control characters are dropped. Zero-width
    characters are folded into the glyph before them.
    """
    pending: Optional[StyledCell] = None
    for segment in segments:
        if segment.control:
            continue
        for char in segment.text:
            if _is_control(char):
                continue
            width = get_character_cell_size(char)
            if width == 0:
                if pending is not None:
                    pending = pending._replace(symbol=pending.symbol + char)
                continue
            if pending is not None:
                yield pending
            pending = StyledCell(char, segment.style, width)
    if pending is not None:
        yield pending


def measure(cells: Iterable[StyledCell]) -> int:
    """Return the total display width of ``cells``."""
    return sum(cell.width for cell in cells)


def fit_cells(cells: Iterable[StyledCell], max_width: int) -> list[StyledCell]:
    """Return the longest prefix of ``cells`` that fits in ``max_width``.

    A glyph that would overflow is dropped whole, never split, so the
    result may be narrower than ``max_width``.
    """
    fitted: list[StyledCell] = []
    if max_width <= 0:
        return fitted
    used = 0
    for cell in cells:
        if used + cell.width > max_width:
            break
        fitted.append(cell)
        used += cell.width
    return fitted


def truncate_text(text: str, max_width: int, suffix: str = "") -> str:
    """Truncate plain text to a display width.

    Args:
        text: Text to truncate
        max_width: Maximum width in terminal columns, including suffix
        suffix: Suffix to add when truncated

    Returns:
        Truncated text
    """
    if not text or max_width <= 0:
        return ""

    if cell_len(text) <= max_width:
        return text

    suffix_width = cell_len(suffix)
    if max_width <= suffix_width:
        return "".join(
            cell.symbol for cell in fit_cells(iter_cells([Segment(suffix)]), max_width)
        )

    kept = fit_cells(iter_cells([Segment(text)]), max_width - suffix_width)
    return "".join(cell.symbol for cell in kept) + suffix
