"""
HTML Content Parser - Entry Point

Parses the HTML markup of a forum post into content: a list of paragraphs,
each a list of content nodes (strings, line breaks and elements created by
the grammar rules).

Usage:
    >>> syntax = [
    ...     ElementTypeRule("strong", lambda content, attrs, ctx: {
    ...         "type": "text", "style": "bold", "content": content
    ...     }),
    ... ]
    >>> parse_html_content("Text <strong>bold</strong>", syntax=syntax)
    [['Text ', {'type': 'text', 'style': 'bold', 'content': 'bold'}]]
"""

import logging
from typing import Any, Optional, Sequence

from ..markup_tree.nodes import ElementNode
from ..markup_tree.parser import parse_markup
from .builder import ContentBuilder
from .diagnostics import DiagnosticSink
from .grammar import ElementTypeRule
from .paragraphs import (
    DEFAULT_PARAGRAPH_BREAK_THRESHOLD,
    ParagraphSplitter,
    assemble_paragraphs,
)
from .parser_config import ParserConfig, UnknownElementHook, UnknownElementResolver

logger = logging.getLogger(__name__)


class HtmlContentParser:
    """
    Reusable parser bound to one configuration.

    Attributes:
        config: Resolved parser configuration
        builder: Content builder using that configuration
    """

    def __init__(self, config: ParserConfig) -> None:
        if not isinstance(config, ParserConfig):
            raise TypeError(f"config must be a ParserConfig, got {type(config).__name__}")
        self.config = config
        self.builder = ContentBuilder(config)

    def parse(self, markup: str):
        """
        Parse HTML markup of a post.

        Args:
            markup: HTML markup

        Returns:
            None if the markup holds no content, a bare string if the post is
            plain text only (whitespace included), otherwise a list of paragraphs

        Raises:
            MarkupParseError: If markup is not a string or cannot be parsed
        """
        return self.parse_tree(parse_markup(markup))

    def parse_tree(self, root: ElementNode):
        """Parse an already built markup tree, rooted at the document node."""
        content = self.builder.build(root)
        result = assemble_paragraphs(content, self.config.split_paragraphs)
        logger.debug(
            f"Parsed post into {type(result).__name__}"
            + (f" of {len(result)} paragraphs" if isinstance(result, list) else "")
        )
        return result


def parse_html_content(
    markup: str,
    syntax: Sequence[ElementTypeRule],
    context: Any = None,
    on_unknown_element_type: Optional[UnknownElementHook] = None,
    get_content_elements_for_unknown_element_type: Optional[UnknownElementResolver] = None,
    diagnostics: Optional[DiagnosticSink] = None,
    split_paragraphs: Optional[ParagraphSplitter] = None,
    paragraph_break_threshold: int = DEFAULT_PARAGRAPH_BREAK_THRESHOLD,
):
    """
    Parse HTML markup of a post into content paragraphs.

    See ``ParserConfig`` for the meaning and defaults of the options.

    Returns:
        None, a bare string, or a list of paragraphs
    """
    config = ParserConfig(
        syntax=syntax,
        context=context,
        on_unknown_element_type=on_unknown_element_type,
        get_content_elements_for_unknown_element_type=get_content_elements_for_unknown_element_type,
        diagnostics=diagnostics,
        split_paragraphs=split_paragraphs,
        paragraph_break_threshold=paragraph_break_threshold,
    )
    return HtmlContentParser(config).parse(markup)
