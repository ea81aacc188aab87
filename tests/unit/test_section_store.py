"""Tests for the StatusBar section store."""

from __future__ import annotations

import pickle

import pytest
from rich.segment import Segment
from rich.style import Style
from rich.text import Text

from statusbar.errors import IndexOutOfBoundsError, StatusBarError
from statusbar.tui.components.core.section import Section, StatusBar
from statusbar.tui.util.styled import PlainContent, RichContent, SegmentContent, styled

pytestmark = pytest.mark.unit


def _plain(section: Section) -> str:
    return "".join(segment.text for segment in section.segments())


class _IntLike:
    """An integer-like index, the way numpy scalars behave."""

    def __init__(self, value: int):
        self.value = value

    def __index__(self) -> int:
        return self.value


# ── Construction ──────────────────────────────────────────────────────

class TestConstruction:
    """Building a bar with a fixed number of sections."""

    def test_sections_start_empty(self):
        bar = StatusBar(3)
        assert bar.section_count == 3
        assert len(bar) == 3
        assert all(section.is_empty for section in bar.sections)

    def test_zero_sections_is_legal(self):
        bar = StatusBar(0)
        assert bar.section_count == 0
        assert bar.sections == ()

    @pytest.mark.parametrize("count", [-1, 1.5, "3", True])
    def test_invalid_count_rejected(self, count):
        with pytest.raises(ValueError):
            StatusBar(count)

    def test_invalid_spacing_rejected(self):
        with pytest.raises(ValueError):
            StatusBar(2, spacing=-1)

    def test_invalid_align_rejected(self):
        with pytest.raises(ValueError):
            StatusBar(2, align="justify")

    def test_defaults(self):
        bar = StatusBar(1)
        assert bar.spacing == 0
        assert bar.align == "left"


# ── Mutation ──────────────────────────────────────────────────────────

class TestSectionMutation:
    """Setting section content by index."""

    def test_chaining_returns_same_bar(self):
        bar = StatusBar(3)
        result = bar.section(0, "Left").section(1, "Center").section(2, "Right")
        assert result is bar
        assert [_plain(s) for s in bar] == ["Left", "Center", "Right"]

    def test_overwrites_previous_content(self):
        bar = StatusBar(1).section(0, "first").section(0, "second")
        assert _plain(bar[0]) == "second"

    def test_none_clears_section(self):
        bar = StatusBar(1).section(0, "x").section(0, None)
        assert bar[0].is_empty

    def test_plain_string_is_promoted(self):
        bar = StatusBar(1).section(0, "text")
        assert bar[0].content == PlainContent("text")
        assert bar[0].segments() == [Segment("text", None)]

    def test_rich_text_keeps_style(self):
        bar = StatusBar(1).section(0, Text("ok", style="bold red"))
        assert isinstance(bar[0].content, RichContent)
        (segment,) = bar[0].segments()
        assert segment.text == "ok"
        assert segment.style == Style.parse("bold red")

    def test_segments_accepted(self):
        bar = StatusBar(1).section(0, [Segment("a"), Segment("b", Style(italic=True))])
        assert isinstance(bar[0].content, SegmentContent)
        assert _plain(bar[0]) == "ab"

    def test_section_object_accepted(self):
        section = Section().with_content("mid").with_pre_separator("[").with_post_separator("]")
        bar = StatusBar(1).section(0, section)
        assert _plain(bar[0]) == "[mid]"

    def test_new_content_keeps_separators(self):
        bar = StatusBar(1).section(0, Section().with_pre_separator("> ").with_content("a"))
        bar.section(0, "b")
        assert _plain(bar[0]) == "> b"

    def test_unconvertible_content_rejected(self):
        bar = StatusBar(1).section(0, "keep")
        with pytest.raises(TypeError):
            bar.section(0, 42)
        assert _plain(bar[0]) == "keep"


# ── Out-of-range indices ──────────────────────────────────────────────

class TestIndexOutOfBounds:
    """Only indices in [0, section_count) are accepted."""

    def test_index_past_end(self):
        bar = StatusBar(2)
        with pytest.raises(IndexOutOfBoundsError) as excinfo:
            bar.section(5, "x")
        assert excinfo.value.requested_index == 5
        assert excinfo.value.section_count == 2
        assert all(section.is_empty for section in bar.sections)

    @pytest.mark.parametrize("index", [3, -1, -3])
    def test_boundary_and_negative(self, index):
        bar = StatusBar(3).section(0, "a").section(2, "c")
        before = bar.sections
        with pytest.raises(IndexOutOfBoundsError):
            bar.section(index, "x")
        assert bar.sections == before

    def test_zero_section_bar_rejects_everything(self):
        with pytest.raises(IndexOutOfBoundsError):
            StatusBar(0).section(0, "x")

    def test_error_hierarchy(self):
        err = IndexOutOfBoundsError(4, 2)
        assert isinstance(err, StatusBarError)
        assert isinstance(err, IndexError)
        assert "4" in str(err) and "2" in str(err)

    def test_error_pickles(self):
        err = pickle.loads(pickle.dumps(IndexOutOfBoundsError(7, 3)))
        assert (err.requested_index, err.section_count) == (7, 3)

    def test_getitem_uses_same_check(self):
        with pytest.raises(IndexOutOfBoundsError):
            StatusBar(1)[-1]

    def test_integer_like_index_accepted(self):
        bar = StatusBar(3).section(_IntLike(2), "c")
        assert _plain(bar[_IntLike(2)]) == "c"
        assert _plain(bar.sections[2]) == "c"

    def test_integer_like_index_still_range_checked(self):
        with pytest.raises(IndexOutOfBoundsError) as excinfo:
            StatusBar(2).section(_IntLike(2), "x")
        assert excinfo.value.section_count == 2

    @pytest.mark.parametrize("index", [True, False, 1.0, "0", None])
    def test_non_integer_index_rejected(self, index):
        bar = StatusBar(2)
        with pytest.raises(IndexOutOfBoundsError) as excinfo:
            bar.section(index, "x")
        assert excinfo.value.requested_index is index
        assert all(section.is_empty for section in bar.sections)


# ── Section value ─────────────────────────────────────────────────────

class TestSection:
    """Section builders and segment composition."""

    def test_separators_skipped_without_content(self):
        section = Section().with_pre_separator("|").with_post_separator("|")
        assert section.is_empty
        assert section.segments() == []

    def test_builders_return_new_sections(self):
        base = Section()
        updated = base.with_content("x")
        assert base.is_empty
        assert not updated.is_empty

    @pytest.mark.parametrize("content", ["", Text(""), [], PlainContent("", style="red")])
    def test_zero_width_content_counts_as_empty(self, content):
        section = Section(pre_separator=styled("["), post_separator=styled("]"))
        section = section.with_content(content)
        assert section.is_empty
        assert section.segments() == []

    def test_control_only_content_counts_as_empty(self):
        assert Section().with_content("\x07").is_empty
