"""Tests for the tagged-line protocol."""

import pytest

from boilergen.engine import (
    MalformedTemplateError,
    Marker,
    TaggedLine,
    block,
    instance,
    postamble,
    preamble,
)


class TestBlock:
    """Test parsing marker-prefixed text."""

    def test_markers(self):
        lines = block("""
            |open
            -item
            |close
        """)
        assert lines == [
            TaggedLine(Marker.PREAMBLE, "open"),
            TaggedLine(Marker.INSTANCE, "item"),
            TaggedLine(Marker.POSTAMBLE, "close"),
        ]

    def test_indentation_before_marker_is_stripped(self):
        """Template indentation never leaks into the output."""
        lines = block("\t    -x\n        |y")
        assert [line.text for line in lines] == ["x", "y"]

    def test_text_after_marker_kept_verbatim(self):
        lines = block("    -    def f = 1  ")
        assert lines[0].text == "    def f = 1  "

    def test_blank_lines_dropped(self):
        lines = block("\n   \n|a\n\n\t\n-b\n")
        assert len(lines) == 2

    def test_bare_marker_is_empty_line(self):
        """A lone marker is an intentional empty output line."""
        lines = block("|\n-\n")
        assert lines == [
            TaggedLine(Marker.PREAMBLE, ""),
            TaggedLine(Marker.INSTANCE, ""),
        ]

    def test_frame_lines_after_instances_are_postamble(self):
        lines = block("|a\n|b\n-c\n-d\n|e\n|f")
        markers = [line.marker for line in lines]
        assert markers == [
            Marker.PREAMBLE,
            Marker.PREAMBLE,
            Marker.INSTANCE,
            Marker.INSTANCE,
            Marker.POSTAMBLE,
            Marker.POSTAMBLE,
        ]

    def test_unmarked_line_raises(self):
        with pytest.raises(MalformedTemplateError, match="no marker"):
            block("|ok\nnot tagged\n")


class TestTagHelpers:
    """Test building tagged lines without text markers."""

    def test_helpers(self):
        lines = preamble("a", "b") + instance("c") + postamble("d")
        assert [line.marker for line in lines] == [
            Marker.PREAMBLE,
            Marker.PREAMBLE,
            Marker.INSTANCE,
            Marker.POSTAMBLE,
        ]
        assert [line.text for line in lines] == ["a", "b", "c", "d"]
