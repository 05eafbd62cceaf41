"""
Configuration-related exceptions for the post content parser.

Raised while loading ``postcontent.config.json``, declarative syntax files
and ``POST_CONTENT_*`` environment overrides. All of them share the
suggestion formatting of ``ContentParserError`` and add the offending file.
"""

from typing import List, Optional

from .parser_exceptions import ContentParserError


class ConfigurationError(ContentParserError):
    """
    Base exception for configuration-related errors.

    Attributes:
        config_file: Path of the file that caused the error, when known
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        super().__init__(message, suggestions)
        self.config_file = config_file

    def __str__(self) -> str:
        msg = self.message
        if self.config_file:
            msg += f" (file: {self.config_file})"
        return msg + self._format_list("Suggestions", self.suggestions)

    @staticmethod
    def _format_list(title: str, items: List[str]) -> str:
        if not items:
            return ""
        return f"\n\n{title}:" + "".join(
            f"\n  {i}. {item}" for i, item in enumerate(items, 1)
        )


class ConfigurationFileNotFoundError(ConfigurationError):
    """Raised when a configuration or syntax file given explicitly does not exist."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        searched_paths: Optional[List[str]] = None
    ) -> None:
        suggestions = [
            "Relative paths are resolved against the project root (the working directory)",
            "Omit --config-path to fall back to postcontent.config.json or the defaults",
        ]
        if searched_paths:
            suggestions.append(f"Searched in: {', '.join(searched_paths)}")

        super().__init__(message, config_file, suggestions)
        self.searched_paths = searched_paths or []


class ConfigurationValidationError(ConfigurationError):
    """
    Raised when the merged configuration does not satisfy its JSON schema.

    Attributes:
        validation_errors: Messages of every schema violation
        invalid_fields: Dot-notation keys of the offending values
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None
    ) -> None:
        suggestions = ["Allowed keys are version, syntax_file, parser.* and logging.*"]
        if invalid_fields:
            suggestions.append(f"Fix these fields: {', '.join(invalid_fields)}")

        super().__init__(message, config_file, suggestions)
        self.validation_errors = validation_errors or []
        self.invalid_fields = invalid_fields or []

    def __str__(self) -> str:
        return super().__str__() + self._format_list("Validation errors", self.validation_errors)


class EnvironmentVariableError(ConfigurationError):
    """Raised when a ``POST_CONTENT_*`` variable cannot be converted."""

    def __init__(
        self,
        message: str,
        variable_name: Optional[str] = None
    ) -> None:
        suggestions = []
        if variable_name:
            suggestions.append(f"Fix or unset {variable_name} in the environment or the .env file")

        super().__init__(message, None, suggestions)
        self.variable_name = variable_name
