"""Status bar render engine.

Layout is recomputed from scratch on every call; nothing is cached
between frames.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.logging import get_logger
from .buffer import Buffer, Rect
from .components.core.layout import section_areas
from .util.truncate import fit_cells, iter_cells, measure

if TYPE_CHECKING:
    from .components.core.section import StatusBar

log = get_logger(__name__)


def _align_offset(align: str, free: int) -> int:
    if align == "center":
        return free // 2
    if align == "right":
        return free
    return 0


def render(area: Rect, status_bar: "StatusBar", buffer: Buffer) -> None:
    """Paint ``status_bar`` into ``buffer`` on the first row of ``area``.

    Each section is truncated to its sub-area without splitting wide
    glyphs. Unused columns are left untouched. Never raises.
    """
    if area.is_empty() or status_bar.section_count == 0:
        return

    areas = section_areas(area, status_bar.section_count, status_bar.spacing)
    squeezed = sum(1 for sub_area in areas if sub_area.is_empty())
    if squeezed:
        log.debug(
            "sections_squeezed",
            width=area.width,
            section_count=status_bar.section_count,
            zero_width=squeezed,
        )

    for section, sub_area in zip(status_bar.sections, areas):
        if sub_area.is_empty() or section.is_empty:
            continue

        cells = fit_cells(iter_cells(section.segments()), sub_area.width)
        if not cells:
            continue

        free = sub_area.width - measure(cells)
        x = sub_area.left + _align_offset(status_bar.align, free)
        buffer.set_cells(x, sub_area.top, cells, sub_area.right - x)
