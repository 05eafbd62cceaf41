"""
Markup Tree Nodes

Tagged-variant node types for a parsed markup document. The content parser
only ever looks at nodes through this module: the concrete HTML parser behind
``parse_markup`` is free to change as long as it produces these types.

Key Components:
- NodeKind: Discriminator for the three node variants
- TextNode: A run of character data
- ElementNode: A tag with attributes and ordered children
- OtherNode: Anything else (comments, doctypes, processing instructions)
"""

from dataclasses import dataclass, field
from enum import Enum
from html import escape
from typing import Dict, List, Optional, Union

# Elements rendered without a closing tag.
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


class NodeKind(Enum):
    """Enumeration of markup node variants."""
    TEXT = "text"
    ELEMENT = "element"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


@dataclass
class TextNode:
    """A text node holding its already-unescaped character data."""
    value: str
    kind: NodeKind = field(default=NodeKind.TEXT, init=False, repr=False)

    def outer_html(self) -> str:
        return escape(self.value, quote=False)


@dataclass
class OtherNode:
    """A node that carries no content, such as a comment or a doctype."""
    node_type: str
    data: str = ""
    kind: NodeKind = field(default=NodeKind.OTHER, init=False, repr=False)

    def outer_html(self) -> str:
        if self.node_type == "comment":
            return f"<!--{self.data}-->"
        return ""


@dataclass
class ElementNode:
    """
    An element node with a lower-cased tag name.

    Attributes:
        tag: Tag name, lower-cased on creation
        attributes: Attribute values keyed by lower-cased attribute name
        children: Ordered child nodes
    """
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["MarkupNode"] = field(default_factory=list)
    kind: NodeKind = field(default=NodeKind.ELEMENT, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.tag, str) or not self.tag:
            raise ValueError(f"tag must be a non-empty string, got {self.tag!r}")
        self.tag = self.tag.lower()
        self.attributes = {
            name.lower(): value for name, value in self.attributes.items()
        }

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self.attributes

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name.lower())

    def inner_html(self) -> str:
        return "".join(child.outer_html() for child in self.children)

    def outer_html(self) -> str:
        """Render the element back to markup. Used for diagnostic output only."""
        attrs = "".join(
            f' {name}="{escape(value, quote=True)}"'
            for name, value in self.attributes.items()
        )
        if self.tag in VOID_ELEMENTS and not self.children:
            return f"<{self.tag}{attrs}>"
        return f"<{self.tag}{attrs}>{self.inner_html()}</{self.tag}>"


MarkupNode = Union[TextNode, ElementNode, OtherNode]


def is_text(node: MarkupNode) -> bool:
    return node.kind is NodeKind.TEXT


def is_element(node: MarkupNode) -> bool:
    return node.kind is NodeKind.ELEMENT
