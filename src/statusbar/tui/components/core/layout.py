"""Layout utilities for the status bar.

Splits a drawing area into one sub-area per section.
"""

from __future__ import annotations

from ...buffer import Rect


def split_widths(total_width: int, section_count: int, spacing: int = 0) -> list[int]:
    """Partition a width across sections.

    Every section gets ``available // section_count`` columns. The
    remainder is handed out one column at a time starting from the last
    section and moving left, so the leftmost section keeps a stable width.

    Args:
        total_width: Width of the drawing area
        section_count: Number of sections
        spacing: Blank columns between adjacent sections

    Returns:
        One width per section, left to right
    """
    if section_count <= 0:
        return []

    gaps = spacing * (section_count - 1)
    available = max(0, total_width - gaps)
    base, remainder = divmod(available, section_count)

    widths = [base] * section_count
    for index in range(section_count - remainder, section_count):
        widths[index] += 1
    return widths


def section_areas(area: Rect, section_count: int, spacing: int = 0) -> list[Rect]:
    """Compute the sub-area of each section on the first row of ``area``.

    Sub-areas are contiguous left to right, separated by ``spacing``
    columns and clipped to ``area``. Sections squeezed out entirely get a
    zero-width rectangle.
    """
    if area.is_empty():
        return [Rect(area.x, area.y, 0, 0) for _ in range(max(section_count, 0))]

    areas = []
    x = area.left
    for width in split_widths(area.width, section_count, spacing):
        left = min(x, area.right)
        clipped = min(width, area.right - left)
        areas.append(Rect(left, area.top, clipped, 1))
        x += width + spacing
    return areas
