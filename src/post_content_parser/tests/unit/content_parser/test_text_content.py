"""Tests for flattening a subtree into plain text."""

from post_content_parser.core.content_parser import get_text_content
from post_content_parser.core.markup_tree import ElementNode, OtherNode, TextNode, parse_markup


class TestGetTextContent:
    """Test get_text_content."""

    def test_nested_markup_is_flattened(self):
        """Test that highlighting markup is dropped and its text kept."""
        root = parse_markup("<pre>some <b>bold</b> text</pre>")
        assert get_text_content(root.children[0]) == "some bold text"

    def test_br_contributes_newline(self):
        """Test that <br> elements become newlines."""
        root = parse_markup("<div>a<br>b</div>")
        assert get_text_content(root.children[0]) == "a\nb"

    def test_comments_contribute_nothing(self):
        """Test that non-text, non-element nodes are skipped."""
        element = ElementNode(
            "div",
            children=[TextNode("a"), OtherNode("comment", " note "), TextNode("b")],
        )
        assert get_text_content(element) == "ab"

    def test_result_is_not_trimmed(self):
        """Test that surrounding whitespace is kept."""
        element = ElementNode("div", children=[TextNode("  a  ")])
        assert get_text_content(element) == "  a  "

    def test_empty_element(self):
        """Test an element without children."""
        assert get_text_content(ElementNode("div")) == ""
