"""
Content Parser Types

Core data structures shared by the content builder and the paragraph
assembler.

- LINE_BREAK: The line-break content node
- BlockElement: Transient wrapper for elements that start their own paragraph
- ParseContext: Per-node parsing state passed down the tree
- ParseOutcome: Sentinels telling "discarded" apart from "no rule matched"
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Optional, Union

# The line-break content node. Text nodes consisting of exactly this
# character, literal newlines inside text and <br> elements all become it.
LINE_BREAK = "\n"
LINE_BREAK_TAG = "br"

ContentNode = Any
Paragraph = List[ContentNode]
Content = Union[None, ContentNode, List[ContentNode]]


class ParseOutcome(Enum):
    """Results of parsing a node that are not content."""
    DISCARDED = "discarded"
    UNMATCHED = "unmatched"

    def __str__(self) -> str:
        return self.value


DISCARDED = ParseOutcome.DISCARDED
UNMATCHED = ParseOutcome.UNMATCHED


class BlockElement:
    """Wraps an element created by a ``block=True`` rule until paragraphs are assembled."""

    __slots__ = ("element",)

    def __init__(self, element: ContentNode) -> None:
        self.element = element

    def __repr__(self) -> str:
        return f"BlockElement({self.element!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockElement):
            return NotImplemented
        return self.element == other.element


@dataclass(frozen=True)
class ParseContext:
    """
    Parsing state for one node.

    Attributes:
        top_level: True only for direct children of the document root
        is_code: Set once a code-preserving element is entered; stays set
            for every descendant
    """
    top_level: bool = True
    is_code: bool = False

    def descend(self) -> "ParseContext":
        """Context for the children of the current node."""
        if not self.top_level:
            return self
        return replace(self, top_level=False)

    def with_code(self) -> "ParseContext":
        if self.is_code:
            return self
        return replace(self, is_code=True)


def is_line_break(value: Optional[ContentNode]) -> bool:
    return isinstance(value, str) and value == LINE_BREAK
