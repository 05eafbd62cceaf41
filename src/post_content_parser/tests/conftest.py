"""Shared test fixtures and configuration for post content parser tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from post_content_parser.core.content_parser import (
    AttributeMatcher,
    CollectingDiagnosticSink,
    ElementTypeRule,
)


def element_factory(element_type: str) -> Callable[..., Dict[str, Any]]:
    """Factory building ``{"type": element_type, "content": content}`` elements."""
    def create_element(content, attributes, context):
        return {"type": element_type, "content": content}
    return create_element


@pytest.fixture
def make_element():
    """Provide the element factory helper."""
    return element_factory


@pytest.fixture
def diagnostics():
    """Provide an in-memory diagnostic sink."""
    return CollectingDiagnosticSink()


@pytest.fixture
def bold_syntax() -> List[ElementTypeRule]:
    """Provide a syntax with a single bold rule."""
    return [
        ElementTypeRule(
            "strong",
            lambda content, attributes, context: {
                "type": "text",
                "style": "bold",
                "content": content,
            },
        ),
    ]


@pytest.fixture
def forum_syntax() -> List[ElementTypeRule]:
    """Provide a syntax resembling a real imageboard post grammar."""
    return [
        ElementTypeRule("strong", element_factory("bold")),
        ElementTypeRule(
            "span",
            element_factory("spoiler"),
            attributes=[AttributeMatcher("class", "spoiler")],
        ),
        ElementTypeRule(
            "span",
            element_factory("quote"),
            attributes=[AttributeMatcher.pattern("class", r"^quote")],
        ),
        ElementTypeRule(
            "a",
            lambda content, attributes, context: {
                "type": "link",
                "url": attributes.get_attribute("href"),
                "content": content,
            },
        ),
        ElementTypeRule(
            "pre",
            element_factory("code"),
            block=True,
            convert_content_to_text=True,
        ),
        ElementTypeRule("p", element_factory("heading"), block=True),
        ElementTypeRule(
            "img",
            lambda content, attributes, context: {
                "type": "image",
                "src": attributes.get_attribute("src"),
            },
            content=False,
        ),
    ]


@pytest.fixture
def syntax_definition() -> List[Dict[str, Any]]:
    """Provide a declarative syntax definition."""
    return [
        {"tag": "strong", "type": "text", "properties": {"style": "bold"}},
        {
            "tag": "span",
            "type": "spoiler",
            "attributes": [{"name": "class", "value": "spoiler"}],
        },
        {
            "tag": "a",
            "type": "link",
            "attributeProperties": {"url": "href"},
        },
        {"tag": "pre", "type": "code", "block": True, "convertContentToText": True},
    ]


@pytest.fixture
def syntax_file(tmp_path: Path, syntax_definition) -> Path:
    """Write the declarative syntax definition to a temporary file."""
    path = tmp_path / "syntax.json"
    path.write_text(json.dumps(syntax_definition), encoding="utf-8")
    return path
