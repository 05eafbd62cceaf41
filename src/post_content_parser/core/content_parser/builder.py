"""
Content Builder - Markup Tree to Content Conversion

Walks a markup tree and converts it into content using the grammar rules of
a ``ParserConfig``. ``parse_node`` and ``parse_children`` call each other
recursively, so the recursion depth follows the nesting depth of the
document.

Two pieces of state travel down the tree in a ``ParseContext``:
- ``top_level`` is only true for the direct children of the document root;
  block rules are only honoured there.
- ``is_code`` is set when a code-preserving rule matches and stays set for
  the whole subtree: newlines inside it are kept as literal text instead of
  being extracted into line-break nodes.
"""

import logging
from typing import Any, List, Sequence

from ..markup_tree.nodes import ElementNode, MarkupNode, is_element, is_text
from .diagnostics import Diagnostic, DiagnosticCode
from .grammar import AttributeAccessor, ElementTypeRule, find_matching_rule
from .line_breaks import extract_line_breaks
from .parser_config import ParserConfig
from .text_content import get_text_content
from .types import (
    BlockElement,
    Content,
    DISCARDED,
    LINE_BREAK,
    LINE_BREAK_TAG,
    ParseContext,
    UNMATCHED,
)

logger = logging.getLogger(__name__)


class ContentBuilder:
    """
    Converts markup nodes into content elements.

    Attributes:
        config: Resolved parser configuration
    """

    def __init__(self, config: ParserConfig) -> None:
        self.config = config

    def build(self, root: ElementNode) -> Content:
        """Parse the children of a document root at the top level."""
        return self.parse_children(root.children, ParseContext(top_level=True, is_code=False))

    def parse_node(self, element: ElementNode, context: ParseContext) -> Any:
        """
        Convert a single element.

        Args:
            element: Element to convert
            context: Context of the element itself

        Returns:
            The created content element, a ``BlockElement`` wrapping it,
            ``LINE_BREAK`` for ``<br>``, ``DISCARDED`` when the element
            produces nothing, or ``UNMATCHED`` when no rule matches it
        """
        if element.tag == LINE_BREAK_TAG:
            return LINE_BREAK

        rule = find_matching_rule(element, self.config.syntax)
        if rule is None:
            return UNMATCHED

        if rule.is_code:
            context = context.with_code()

        content = self._get_element_content(element, rule, context)

        if content is not None and not rule.expects_content:
            self.config.diagnostics.report(
                Diagnostic(
                    code=DiagnosticCode.CONTENT_NOT_EXPECTED,
                    message="Content element type is declared as not having any content but in reality it does have content.",
                    markup=element.outer_html(),
                    rule=rule.describe(),
                )
            )

        # Empty elements are skipped unless the rule declares `content=False`.
        if content is None and rule.expects_content:
            logger.debug(f"Skipping empty element matched by {rule.describe()}")
            return DISCARDED

        created = rule.create_element(
            content,
            AttributeAccessor(element),
            self.config.context
        )
        if created is None:
            return DISCARDED

        if rule.block:
            if not context.top_level:
                self.config.diagnostics.report(
                    Diagnostic(
                        code=DiagnosticCode.NESTED_BLOCK_ELEMENT,
                        message="A `block` element was found on a non-top level. The element was discarded.",
                        markup=element.outer_html(),
                        rule=rule.describe(),
                    )
                )
                return DISCARDED
            return BlockElement(created)

        return created

    def parse_children(self, children: Sequence[MarkupNode], context: ParseContext) -> Content:
        """
        Convert a list of sibling nodes.

        Args:
            children: Sibling nodes in document order
            context: Context shared by the siblings

        Returns:
            None if nothing was produced, a bare string if the only product
            is a string, otherwise the flat list of produced content
        """
        content: List[Any] = []

        for node in children:
            if is_text(node):
                if node.value == LINE_BREAK:
                    content.append(LINE_BREAK)
                    continue
                result = node.value if context.is_code else extract_line_breaks(node.value)
            elif is_element(node):
                result = self.parse_node(node, context)
            else:
                # Comments, doctypes and the like carry no content.
                continue

            if result is DISCARDED or (isinstance(result, str) and not result):
                continue

            if result is UNMATCHED:
                content.extend(self._resolve_unknown_element(node, context))
            elif isinstance(result, list):
                content.extend(result)
            else:
                content.append(result)

        if not content:
            return None
        if len(content) == 1 and isinstance(content[0], str):
            return content[0]
        return content

    def _get_element_content(
        self,
        element: ElementNode,
        rule: ElementTypeRule,
        context: ParseContext
    ) -> Content:
        if rule.convert_content_to_text:
            text = get_text_content(element).strip()
            if not text:
                return None
            if context.is_code:
                return text
            return extract_line_breaks(text)

        if not element.children:
            return None
        return self.parse_children(element.children, context.descend())

    def _resolve_unknown_element(self, element: ElementNode, context: ParseContext) -> List[Any]:
        child_context = context.descend()

        def get_content_elements() -> List[Any]:
            content = self.parse_children(element.children, child_context)
            if content is None:
                return []
            return content if isinstance(content, list) else [content]

        elements = self.config.get_content_elements_for_unknown_element_type(
            node=element,
            get_content_elements=get_content_elements
        )
        if elements is None:
            return []
        # A bare string is one text item, not a sequence of characters.
        if isinstance(elements, str):
            return [elements] if elements else []
        return list(elements)
