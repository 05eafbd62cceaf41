"""
Declarative Syntax Loader

Builds element type rules from JSON definitions, so a grammar can live in a
configuration file instead of code. Every loaded rule creates a plain dict:

    {"tag": "span", "type": "spoiler",
     "attributes": [{"name": "class", "value": "spoiler"}]}

turns ``<span class="spoiler">text</span>`` into
``{"type": "spoiler", "content": "text"}``.

Entry fields:
- tag, type (required)
- attributes: list of ``{name, value}`` (literal) or ``{name, pattern}`` (regex)
- block, content, convertContentToText, preserveWhitespace: rule flags
- properties: constant fields copied into every element
- attributeProperties: element field name -> attribute name to copy
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema

from ...exceptions.config_exceptions import ConfigurationFileNotFoundError
from ...exceptions.parser_exceptions import SyntaxDefinitionError
from .grammar import AttributeMatcher, ElementTypeRule

logger = logging.getLogger(__name__)

ATTRIBUTE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "value": {"type": "string"},
        "pattern": {"type": "string"},
    },
    "oneOf": [
        {"required": ["value"]},
        {"required": ["pattern"]},
    ],
    "additionalProperties": False,
}

RULE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["tag", "type"],
    "properties": {
        "tag": {"type": "string", "minLength": 1},
        "type": {"type": "string", "minLength": 1},
        "attributes": {"type": "array", "items": ATTRIBUTE_SCHEMA},
        "block": {"type": "boolean"},
        "content": {"type": "boolean"},
        "convertContentToText": {"type": "boolean"},
        "preserveWhitespace": {"type": "boolean"},
        "properties": {"type": "object"},
        "attributeProperties": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
    "additionalProperties": False,
}

SYNTAX_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "oneOf": [
        {"type": "array", "items": RULE_SCHEMA},
        {
            "type": "object",
            "required": ["syntax"],
            "properties": {"syntax": {"type": "array", "items": RULE_SCHEMA}},
        },
    ],
}


def _element_factory(
    element_type: str,
    properties: Dict[str, Any],
    attribute_properties: Dict[str, str]
):
    def create_element(content, attributes, context):
        element = {"type": element_type}
        element.update(properties)
        for property_name, attribute_name in attribute_properties.items():
            value = attributes.get_attribute(attribute_name)
            if value is not None:
                element[property_name] = value
        if content is not None:
            element["content"] = content
        return element

    create_element.__name__ = f"create_{element_type}_element"
    return create_element


class SyntaxLoader:
    """
    Validates JSON syntax definitions and turns them into rules.

    Attributes:
        validator: jsonschema validator for the syntax schema
    """

    def __init__(self) -> None:
        self.validator = jsonschema.Draft7Validator(SYNTAX_SCHEMA)

    def validate(self, data: Any) -> List[str]:
        """
        Validate raw syntax data against the schema.

        Returns:
            Human-readable validation errors (empty when valid)
        """
        errors = []
        for error in sorted(self.validator.iter_errors(data), key=lambda e: list(e.path)):
            location = "/".join(str(part) for part in error.path) or "<root>"
            errors.append(f"{location}: {error.message}")
        return errors

    def load(self, data: Any) -> List[ElementTypeRule]:
        """
        Build rules from parsed JSON data.

        Args:
            data: A list of rule entries, or an object with a ``syntax`` list

        Raises:
            SyntaxDefinitionError: If the data does not match the schema or a
                pattern is not a valid regular expression
        """
        errors = self.validate(data)
        if errors:
            raise SyntaxDefinitionError(
                "Invalid syntax definition:\n  " + "\n  ".join(errors)
            )

        entries = data["syntax"] if isinstance(data, dict) else data
        rules = [self._build_rule(index, entry) for index, entry in enumerate(entries)]
        logger.info(f"Loaded {len(rules)} syntax rules")
        return rules

    def load_file(self, path: Union[str, Path]) -> List[ElementTypeRule]:
        """
        Load rules from a JSON file.

        Raises:
            ConfigurationFileNotFoundError: If the file does not exist
            SyntaxDefinitionError: If the file is not valid JSON or not a valid syntax
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigurationFileNotFoundError(
                f"Syntax file not found: {path}",
                config_file=str(path)
            )

        logger.debug(f"Loading syntax from {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SyntaxDefinitionError(f"Invalid JSON in syntax file {path}: {e}") from e

        return self.load(data)

    def _build_rule(self, index: int, entry: Dict[str, Any]) -> ElementTypeRule:
        matchers = []
        for attribute in entry.get("attributes", []):
            if "pattern" in attribute:
                try:
                    matchers.append(AttributeMatcher.pattern(attribute["name"], attribute["pattern"]))
                except SyntaxDefinitionError as e:
                    raise SyntaxDefinitionError(e.message, tag=entry["tag"], rule_index=index) from e
            else:
                matchers.append(AttributeMatcher(attribute["name"], attribute["value"]))

        return ElementTypeRule(
            tag=entry["tag"],
            create_element=_element_factory(
                entry["type"],
                entry.get("properties", {}),
                entry.get("attributeProperties", {}),
            ),
            attributes=matchers,
            content=entry.get("content", True),
            block=entry.get("block", False),
            convert_content_to_text=entry.get("convertContentToText", False),
            preserve_whitespace=entry.get("preserveWhitespace"),
        )


def load_syntax(data: Any) -> List[ElementTypeRule]:
    """Build rules from parsed JSON data."""
    return SyntaxLoader().load(data)


def load_syntax_file(path: Union[str, Path]) -> List[ElementTypeRule]:
    """Build rules from a JSON syntax file."""
    return SyntaxLoader().load_file(path)
