"""
Exceptions package for the post content parser.

This package contains custom exception classes for grammar definition,
markup parsing and configuration errors.
"""

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    EnvironmentVariableError,
)

from .parser_exceptions import (
    ContentParserError,
    SyntaxDefinitionError,
    MarkupParseError,
)

__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
    "EnvironmentVariableError",
    # Parsing exceptions
    "ContentParserError",
    "SyntaxDefinitionError",
    "MarkupParseError",
]
