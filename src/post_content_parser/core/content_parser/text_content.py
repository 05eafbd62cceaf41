"""
Element Text Content

Flattens a subtree into plain text for rules declared with
``convert_content_to_text``. For example ``<pre>some <b>bold</b> text</pre>``
becomes ``"some bold text"``; syntax highlighting markup inside code blocks
is dropped while the code itself survives.
"""

from ..markup_tree.nodes import ElementNode, is_element, is_text
from .types import LINE_BREAK, LINE_BREAK_TAG


def get_text_content(element: ElementNode) -> str:
    """
    Concatenate the text of all descendants of ``element``, depth first.

    ``<br>`` elements contribute a single newline, other elements contribute
    their own text content and nodes that are neither text nor element
    contribute nothing. The result is not trimmed.
    """
    parts = []
    for node in element.children:
        if is_element(node):
            if node.tag == LINE_BREAK_TAG:
                parts.append(LINE_BREAK)
            else:
                parts.append(get_text_content(node))
        elif is_text(node):
            parts.append(node.value)
    return "".join(parts)
