"""
Parsing-related exceptions for the post content parser.

Only real failures are exceptions here: a malformed grammar rule or a
markup tree that could not be built. Localized anomalies inside a document
(unknown elements, misplaced block elements) are reported as diagnostics
and never raised.
"""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class ContentParserError(Exception):
    """
    Base exception for content parsing errors.

    Attributes:
        message: Human-readable error description
        suggestions: Suggested fixes shown to the user
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return formatted error message with suggestions."""
        msg = super().__str__()

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for i, suggestion in enumerate(self.suggestions, 1):
                msg += f"\n  {i}. {suggestion}"

        return msg


class SyntaxDefinitionError(ContentParserError):
    """
    Raised when an element type rule is malformed.

    Attributes:
        tag: Tag of the offending rule, when known
        rule_index: Position of the rule in its syntax list, when known
    """

    def __init__(
        self,
        message: str,
        tag: Optional[str] = None,
        rule_index: Optional[int] = None
    ) -> None:
        suggestions = [
            "Every rule needs a non-empty 'tag' and a callable 'create_element'",
            "Attribute matchers take a literal string value or a compiled regular expression",
        ]
        if rule_index is not None:
            suggestions.append(f"Check syntax rule #{rule_index}")

        super().__init__(message, suggestions)
        self.tag = tag
        self.rule_index = rule_index

        logger.debug(
            f"SyntaxDefinitionError: {message}",
            extra={"tag": tag, "rule_index": rule_index}
        )


class MarkupParseError(ContentParserError):
    """Raised when markup could not be turned into a node tree."""

    def __init__(self, message: str, markup_excerpt: Optional[str] = None) -> None:
        super().__init__(message, ["Make sure the input is a string of HTML markup"])
        self.markup_excerpt = markup_excerpt
