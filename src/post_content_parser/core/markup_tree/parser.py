"""
Markup Tree Parser

Builds a tree of ``MarkupNode`` values from an HTML string using
BeautifulSoup with the standard library ``html.parser`` backend.

Multi-valued attributes (``class``, ``rel``, ...) are disabled so that every
attribute keeps the literal string found in the markup: grammar rules match
``class="a a1 a2"`` against the whole value, not against a token list.

Usage:
    >>> root = parse_markup('<div class="a">b</div>')
    >>> root.children[0].get_attribute("class")
    'a'
"""

import logging
from typing import List

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from ...exceptions.parser_exceptions import MarkupParseError
from .nodes import ElementNode, MarkupNode, OtherNode, TextNode

logger = logging.getLogger(__name__)

DOCUMENT_TAG = "#document"
HTML_PARSER_BACKEND = "html.parser"


def _attribute_value(value) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return "" if value is None else str(value)


def _convert_children(parent: Tag) -> List[MarkupNode]:
    children: List[MarkupNode] = []
    for child in parent.children:
        if isinstance(child, Tag):
            children.append(
                ElementNode(
                    tag=child.name,
                    attributes={
                        name: _attribute_value(value)
                        for name, value in child.attrs.items()
                    },
                    children=_convert_children(child),
                )
            )
        elif isinstance(child, PreformattedString):
            # Comment, CData, Doctype, Declaration, ProcessingInstruction
            children.append(OtherNode(node_type=type(child).__name__.lower(), data=str(child)))
        elif isinstance(child, NavigableString):
            children.append(TextNode(str(child)))
    return children


def parse_markup(markup: str) -> ElementNode:
    """
    Parse an HTML fragment into a document root node.

    Args:
        markup: HTML markup of a post

    Returns:
        ElementNode with tag ``#document`` whose children are the top-level nodes

    Raises:
        MarkupParseError: If markup is not a string or the backend fails
    """
    if not isinstance(markup, str):
        raise MarkupParseError(f"markup must be a string, got {type(markup).__name__}")

    try:
        soup = BeautifulSoup(
            markup,
            HTML_PARSER_BACKEND,
            multi_valued_attributes=None,
        )
    except Exception as e:
        raise MarkupParseError(
            f"Failed to parse markup: {e}",
            markup_excerpt=markup[:80]
        ) from e

    root = ElementNode(tag=DOCUMENT_TAG, children=_convert_children(soup))
    logger.debug(f"Parsed markup into {len(root.children)} top-level nodes")
    return root
