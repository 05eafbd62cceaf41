"""
Markup Tree Package

Node types for parsed markup and the HTML parser adapter that produces them.
"""

from .nodes import (
    NodeKind,
    TextNode,
    ElementNode,
    OtherNode,
    MarkupNode,
    is_text,
    is_element,
)
from .parser import parse_markup, DOCUMENT_TAG

__all__ = [
    "NodeKind",
    "TextNode",
    "ElementNode",
    "OtherNode",
    "MarkupNode",
    "is_text",
    "is_element",
    "parse_markup",
    "DOCUMENT_TAG",
]
