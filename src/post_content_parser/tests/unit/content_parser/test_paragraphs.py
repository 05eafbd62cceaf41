"""Tests for paragraph assembly and the default paragraph splitter."""

import pytest

from post_content_parser.core.content_parser import (
    LINE_BREAK,
    BlockElement,
    assemble_paragraphs,
    split_paragraphs_by_line_breaks,
)

BR = LINE_BREAK


class TestAssembleParagraphs:
    """Test assemble_paragraphs."""

    def test_no_content(self):
        """Test that empty documents produce None."""
        assert assemble_paragraphs(None) is None

    def test_plain_text_is_not_wrapped(self):
        """Test that a bare string stays a bare string."""
        assert assemble_paragraphs("text") == "text"

    def test_inline_content_forms_one_paragraph(self):
        """Test that inline content is collected into a single paragraph."""
        bold = {"type": "bold"}
        assert assemble_paragraphs(["a", bold, "b"]) == [["a", bold, "b"]]

    def test_single_element_is_wrapped(self):
        """Test that a single non-string element becomes one paragraph."""
        element = {"type": "bold"}
        assert assemble_paragraphs(element) == [[element]]

    def test_block_elements_start_their_own_paragraph(self):
        """Test paragraph boundaries around block elements."""
        code = {"type": "code"}
        heading = {"type": "heading"}
        content = ["a", BlockElement(code), BlockElement(heading), "b", "c"]
        assert assemble_paragraphs(content) == [["a"], [code], [heading], ["b", "c"]]

    def test_custom_splitter_receives_assembled_paragraphs(self):
        """Test that the splitter is applied to the result."""
        received = []

        def splitter(paragraphs):
            received.append(paragraphs)
            return paragraphs

        result = assemble_paragraphs(["a", BR, BR, "b"], splitter)
        assert received == [[["a", BR, BR, "b"]]]
        assert result == [["a", BR, BR, "b"]]


class TestSplitParagraphsByLineBreaks:
    """Test split_paragraphs_by_line_breaks."""

    def test_double_line_break_splits(self):
        """Test that two adjacent line breaks separate paragraphs."""
        assert split_paragraphs_by_line_breaks([["a", BR, BR, "b"]]) == [["a"], ["b"]]

    def test_single_line_break_is_kept(self):
        """Test that a single line break stays inside the paragraph."""
        assert split_paragraphs_by_line_breaks([["a", BR, "b"]]) == [["a", BR, "b"]]

    def test_long_runs_split_once(self):
        """Test that a run longer than the threshold is a single delimiter."""
        assert split_paragraphs_by_line_breaks([["a", BR, BR, BR, BR, "b"]]) == [["a"], ["b"]]

    def test_edge_line_breaks_are_dropped(self):
        """Test that paragraphs do not start or end with line breaks."""
        assert split_paragraphs_by_line_breaks([[BR, "a", BR]]) == [["a"]]

    def test_empty_paragraphs_disappear(self):
        """Test that paragraphs made of line breaks only are removed."""
        assert split_paragraphs_by_line_breaks([[BR, BR], ["a"]]) == [["a"]]

    def test_custom_threshold(self):
        """Test splitting with a higher threshold."""
        paragraphs = [["a", BR, BR, "b", BR, BR, BR, "c"]]
        assert split_paragraphs_by_line_breaks(paragraphs, threshold=3) == [
            ["a", BR, BR, "b"],
            ["c"],
        ]

    def test_invalid_threshold(self):
        """Test that the threshold must be positive."""
        with pytest.raises(ValueError):
            split_paragraphs_by_line_breaks([["a"]], threshold=0)
