"""
Parsing Diagnostics

Non-fatal problems found while converting a document are reported to a
diagnostic sink instead of being raised; the parser always returns a
best-effort result for the rest of the document.

Key Components:
- DiagnosticCode: Kinds of reported problems
- Diagnostic: One reported problem
- DiagnosticSink: Protocol of anything that accepts diagnostics
- LoggingDiagnosticSink: Default sink, writes warnings to a logger
- CollectingDiagnosticSink: Keeps diagnostics in memory (CLI, tests)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol


class DiagnosticCode(Enum):
    """Enumeration of diagnosed conditions."""
    CONTENT_NOT_EXPECTED = "content_not_expected"
    NESTED_BLOCK_ELEMENT = "nested_block_element"
    UNKNOWN_ELEMENT_TYPE = "unknown_element_type"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while parsing."""
    code: DiagnosticCode
    message: str
    markup: Optional[str] = None
    rule: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert diagnostic to dictionary representation."""
        result = {"code": self.code.value, "message": self.message}
        if self.markup is not None:
            result["markup"] = self.markup
        if self.rule is not None:
            result["rule"] = self.rule
        if self.details:
            result["details"] = dict(self.details)
        return result


class DiagnosticSink(Protocol):
    def report(self, diagnostic: Diagnostic) -> None:
        ...


class LoggingDiagnosticSink:
    """Writes every diagnostic as a warning to ``logger``."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("post_content_parser.diagnostics")

    def report(self, diagnostic: Diagnostic) -> None:
        message = diagnostic.message
        if diagnostic.markup is not None:
            message = f"{message} {diagnostic.markup}"
        self.logger.warning(
            message,
            extra={"diagnostic_code": diagnostic.code.value, "rule": diagnostic.rule}
        )


class CollectingDiagnosticSink:
    """Keeps reported diagnostics, optionally forwarding them to another sink."""

    def __init__(self, forward_to: Optional[DiagnosticSink] = None) -> None:
        self.diagnostics: List[Diagnostic] = []
        self.forward_to = forward_to

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        if self.forward_to is not None:
            self.forward_to.report(diagnostic)

    def codes(self) -> List[DiagnosticCode]:
        return [diagnostic.code for diagnostic in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self):
        return iter(self.diagnostics)
