"""
Parser Configuration

Options of one content parser, resolved once when the parser is created.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from ..markup_tree.nodes import ElementNode
from .diagnostics import Diagnostic, DiagnosticCode, DiagnosticSink, LoggingDiagnosticSink
from .grammar import ElementTypeRule, validate_syntax
from .paragraphs import (
    DEFAULT_PARAGRAPH_BREAK_THRESHOLD,
    ParagraphSplitter,
    split_paragraphs_by_line_breaks,
)

logger = logging.getLogger(__name__)

UnknownElementHook = Callable[[str], None]
UnknownElementResolver = Callable[..., List[Any]]


@dataclass
class ParserConfig:
    """
    Configuration of a content parser.

    Attributes:
        syntax: Ordered element type rules; the first matching rule wins
        context: Passed as the third argument to every ``create_element`` call
        on_unknown_element_type: Called with the rendered markup of every
            element no rule matches. Defaults to reporting an
            ``UNKNOWN_ELEMENT_TYPE`` diagnostic.
        get_content_elements_for_unknown_element_type: Called as
            ``resolver(node=..., get_content_elements=...)`` for elements no
            rule matches; returns the content elements spliced in place of
            the element. The default calls ``on_unknown_element_type`` and
            returns ``get_content_elements()``, i.e. the parsed children.
        diagnostics: Sink for non-fatal problems, a ``LoggingDiagnosticSink``
            by default
        split_paragraphs: Post-processing of the assembled paragraphs,
            ``split_paragraphs_by_line_breaks`` by default
        paragraph_break_threshold: Run length of line breaks separating
            paragraphs for the default splitter
    """
    syntax: Sequence[ElementTypeRule]
    context: Any = None
    on_unknown_element_type: Optional[UnknownElementHook] = None
    get_content_elements_for_unknown_element_type: Optional[UnknownElementResolver] = None
    diagnostics: Optional[DiagnosticSink] = None
    split_paragraphs: Optional[ParagraphSplitter] = None
    paragraph_break_threshold: int = DEFAULT_PARAGRAPH_BREAK_THRESHOLD

    def __post_init__(self):
        self.syntax = validate_syntax(self.syntax)

        if self.diagnostics is None:
            self.diagnostics = LoggingDiagnosticSink()

        if self.on_unknown_element_type is None:
            self.on_unknown_element_type = self._report_unknown_element_type

        if self.get_content_elements_for_unknown_element_type is None:
            self.get_content_elements_for_unknown_element_type = self._get_content_elements_default

        if self.split_paragraphs is None:
            if not isinstance(self.paragraph_break_threshold, int) or self.paragraph_break_threshold < 1:
                raise ValueError(
                    "paragraph_break_threshold must be a positive integer, "
                    f"got {self.paragraph_break_threshold!r}"
                )
            self.split_paragraphs = functools.partial(
                split_paragraphs_by_line_breaks,
                threshold=self.paragraph_break_threshold
            )

        for name in (
            "on_unknown_element_type",
            "get_content_elements_for_unknown_element_type",
            "split_paragraphs",
        ):
            if not callable(getattr(self, name)):
                raise TypeError(f"{name} must be callable")

        logger.debug(f"ParserConfig resolved with {len(self.syntax)} rules")

    def _report_unknown_element_type(self, markup: str) -> None:
        self.diagnostics.report(
            Diagnostic(
                code=DiagnosticCode.UNKNOWN_ELEMENT_TYPE,
                message="Unsupported HTML element found:",
                markup=markup,
            )
        )

    def _get_content_elements_default(
        self,
        node: ElementNode,
        get_content_elements: Callable[[], List[Any]]
    ) -> List[Any]:
        self.on_unknown_element_type(node.outer_html())
        return get_content_elements()
