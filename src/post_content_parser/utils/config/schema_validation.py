"""
Schema validation for configuration management.

This module holds the JSON schema of ``postcontent.config.json`` and
validates configuration dictionaries against it.
"""

import logging
from typing import Any, Dict, Optional

import jsonschema

from ...exceptions.config_exceptions import ConfigurationValidationError


logger = logging.getLogger(__name__)

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "version": {"type": "string"},
        "syntax_file": {"type": ["string", "null"]},
        "parser": {
            "type": "object",
            "properties": {
                "paragraph_break_threshold": {"type": "integer", "minimum": 1},
                "strict": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
                "format": {"enum": ["standard", "json", "detailed"]},
                "file": {"type": ["string", "null"]},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


class SchemaValidator:
    """
    Schema validation for configuration management.

    Collects every schema violation into one ConfigurationValidationError.
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        self.schema = schema or CONFIG_SCHEMA
        self.logger = logger

    def validate_config(self, config: Dict[str, Any], config_file: str = "unknown") -> bool:
        """
        Validate configuration against the JSON schema.

        Args:
            config: Configuration dictionary to validate
            config_file: Configuration file name for error reporting

        Returns:
            True if validation passes

        Raises:
            ConfigurationValidationError: If validation fails
        """
        validator = jsonschema.Draft7Validator(self.schema)
        errors = sorted(validator.iter_errors(config), key=lambda e: list(e.absolute_path))
        if not errors:
            self.logger.debug("Configuration passed schema validation")
            return True

        validation_errors = [error.message for error in errors]
        invalid_fields = [
            ".".join(str(p) for p in error.absolute_path)
            for error in errors
            if error.absolute_path
        ]
        raise ConfigurationValidationError(
            f"Configuration validation failed: {errors[0].message}",
            config_file,
            validation_errors,
            invalid_fields
        )
