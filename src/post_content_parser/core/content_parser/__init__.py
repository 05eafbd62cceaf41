"""
Content Parser Package

Converts the markup of forum posts into structured content using a
pluggable grammar of element type rules.

Components:
- grammar: Element type rules and rule matching
- line_breaks: Newline extraction from text
- text_content: Plain text of a subtree
- builder: Recursive tree to content conversion
- paragraphs: Paragraph assembly and splitting
- parser: Entry point (HtmlContentParser, parse_html_content)
- syntax_loader: Declarative rules from JSON definitions
"""

from .types import (
    LINE_BREAK,
    BlockElement,
    ParseContext,
    ParseOutcome,
    DISCARDED,
    UNMATCHED,
)
from .grammar import (
    AttributeMatcher,
    AttributeAccessor,
    ElementTypeRule,
    CODE_PRESERVING_TAGS,
    matches_rule,
    find_matching_rule,
    validate_syntax,
)
from .line_breaks import extract_line_breaks
from .text_content import get_text_content
from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticSink,
    LoggingDiagnosticSink,
    CollectingDiagnosticSink,
)
from .paragraphs import (
    assemble_paragraphs,
    split_paragraphs_by_line_breaks,
    DEFAULT_PARAGRAPH_BREAK_THRESHOLD,
)
from .parser_config import ParserConfig
from .builder import ContentBuilder
from .parser import HtmlContentParser, parse_html_content
from .syntax_loader import SyntaxLoader, load_syntax, load_syntax_file

__all__ = [
    # Types
    "LINE_BREAK",
    "BlockElement",
    "ParseContext",
    "ParseOutcome",
    "DISCARDED",
    "UNMATCHED",

    # Grammar
    "AttributeMatcher",
    "AttributeAccessor",
    "ElementTypeRule",
    "CODE_PRESERVING_TAGS",
    "matches_rule",
    "find_matching_rule",
    "validate_syntax",

    # Text handling
    "extract_line_breaks",
    "get_text_content",

    # Diagnostics
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "CollectingDiagnosticSink",

    # Assembly
    "assemble_paragraphs",
    "split_paragraphs_by_line_breaks",
    "DEFAULT_PARAGRAPH_BREAK_THRESHOLD",

    # Parsing
    "ParserConfig",
    "ContentBuilder",
    "HtmlContentParser",
    "parse_html_content",

    # Declarative syntax
    "SyntaxLoader",
    "load_syntax",
    "load_syntax_file",
]
