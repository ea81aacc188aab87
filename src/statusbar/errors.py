"""Exceptions raised by the status bar.

Rendering never raises; the only fallible operation is section mutation.
"""

from __future__ import annotations


class StatusBarError(Exception):
    """Base class for status bar errors."""


class IndexOutOfBoundsError(StatusBarError, IndexError):
    """A section index outside ``0 <= index < section_count`` was requested.

    Attributes:
        requested_index: The index the caller asked for
        section_count: Number of sections the bar was built with
    """

    def __init__(self, requested_index: int, section_count: int) -> None:
        self.requested_index = requested_index
        self.section_count = section_count
        super().__init__(
            f"Index out of bounds: {requested_index} "
            f"(status bar has {section_count} sections)"
        )

    def __reduce__(self):
        return type(self), (self.requested_index, self.section_count)
