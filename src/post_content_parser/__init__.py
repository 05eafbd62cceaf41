"""
Post Content Parser

Converts the HTML markup of forum posts into structured content: paragraphs
of text, line breaks and elements built by a pluggable grammar.
"""

from .core.content_parser import (
    LINE_BREAK,
    AttributeMatcher,
    ElementTypeRule,
    ParserConfig,
    HtmlContentParser,
    parse_html_content,
    load_syntax,
    load_syntax_file,
    CollectingDiagnosticSink,
    DiagnosticCode,
)

__version__ = "0.1.0"

__all__ = [
    "LINE_BREAK",
    "AttributeMatcher",
    "ElementTypeRule",
    "ParserConfig",
    "HtmlContentParser",
    "parse_html_content",
    "load_syntax",
    "load_syntax_file",
    "CollectingDiagnosticSink",
    "DiagnosticCode",
    "__version__",
]
