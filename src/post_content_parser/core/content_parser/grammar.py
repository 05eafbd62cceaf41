"""
Grammar Module - Element Type Rules

A grammar ("syntax") is an ordered list of element type rules. Each rule
names a tag, optional attribute conditions and a factory building a content
element from the parsed content of a matching node.

Rules are tried in declaration order and the first match wins, so several
rules may share a tag and tell elements apart by their attributes:

    >>> syntax = [
    ...     ElementTypeRule("span", make_spoiler,
    ...                     attributes=[AttributeMatcher("class", "spoiler")]),
    ...     ElementTypeRule("span", make_quote,
    ...                     attributes=[AttributeMatcher.pattern("class", r"^quote")]),
    ... ]

Key Components:
- AttributeMatcher: Literal or regular expression condition on one attribute
- AttributeAccessor: Read-only attribute view handed to element factories
- ElementTypeRule: One grammar rule
- matches_rule / find_matching_rule: Rule matching
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Pattern, Sequence, Tuple, Union

from ...exceptions.parser_exceptions import SyntaxDefinitionError
from ..markup_tree.nodes import ElementNode

logger = logging.getLogger(__name__)

# Tags whose content is literal text: whitespace and newlines inside them
# are kept verbatim unless a rule says otherwise.
CODE_PRESERVING_TAGS = frozenset({"pre"})

ElementFactory = Callable[[Any, "AttributeAccessor", Any], Any]


@dataclass(frozen=True)
class AttributeMatcher:
    """
    Condition on a single attribute of an element.

    Attributes:
        name: Attribute name (case-insensitive)
        value: Literal string compared for exact equality, or a compiled
            regular expression that must be found in the attribute value
    """
    name: str
    value: Union[str, Pattern[str]]

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise SyntaxDefinitionError("Attribute matcher name cannot be empty")
        if not isinstance(self.value, (str, re.Pattern)):
            raise SyntaxDefinitionError(
                f"Attribute matcher value for '{self.name}' must be a string or a "
                f"compiled regular expression, got {type(self.value).__name__}"
            )
        object.__setattr__(self, "name", self.name.strip().lower())

    @classmethod
    def pattern(cls, name: str, regex: str) -> "AttributeMatcher":
        """Create a matcher from a regular expression string."""
        try:
            compiled = re.compile(regex)
        except re.error as e:
            raise SyntaxDefinitionError(
                f"Invalid regular expression for attribute '{name}': {e}"
            ) from e
        return cls(name, compiled)

    @property
    def is_pattern(self) -> bool:
        return isinstance(self.value, re.Pattern)

    def test(self, value: str) -> bool:
        if self.is_pattern:
            return self.value.search(value) is not None
        return value == self.value

    def describe(self) -> str:
        if self.is_pattern:
            return f"{self.name}~/{self.value.pattern}/"
        return f'{self.name}="{self.value}"'


class AttributeAccessor:
    """Read-only access to the attributes of the element being created."""

    __slots__ = ("_element",)

    def __init__(self, element: ElementNode) -> None:
        self._element = element

    def get_attribute(self, name: str) -> Optional[str]:
        return self._element.get_attribute(name)

    def has_attribute(self, name: str) -> bool:
        return self._element.has_attribute(name)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self._element.get_attribute(name)
        return default if value is None else value

    def __contains__(self, name: str) -> bool:
        return self.has_attribute(name)

    def __repr__(self) -> str:
        return f"AttributeAccessor({self._element.attributes!r})"


class ElementTypeRule:
    """
    A grammar rule turning matching elements into content elements.

    Attributes:
        tag: Lower-cased tag name the rule applies to
        create_element: Factory called as ``create_element(content, attributes, context)``
        attributes: Conditions that must all hold for the rule to match
        content: False marks elements that never have content; such elements
            are created even when empty. Any other rule producing no content
            is skipped.
        block: The element always starts its own paragraph and is only
            allowed at the top level of a document
        convert_content_to_text: Build the content from the plain text of
            the element instead of parsing its children
        preserve_whitespace: Whether the element's subtree keeps newlines
            verbatim. None means "only for literal-content tags" (``pre``).
    """

    def __init__(
        self,
        tag: str,
        create_element: ElementFactory,
        attributes: Optional[Sequence[AttributeMatcher]] = None,
        content: bool = True,
        block: bool = False,
        convert_content_to_text: bool = False,
        preserve_whitespace: Optional[bool] = None,
    ) -> None:
        """
        Initialize and validate a rule.

        Raises:
            SyntaxDefinitionError: If the tag is empty, the factory is not
                callable or an attribute matcher is of the wrong type
        """
        if not isinstance(tag, str) or not tag.strip():
            raise SyntaxDefinitionError("Element type rule tag cannot be empty", tag=tag)

        if not callable(create_element):
            raise SyntaxDefinitionError(
                f"create_element of rule '{tag}' must be callable",
                tag=tag
            )

        attributes = tuple(attributes or ())
        for matcher in attributes:
            if not isinstance(matcher, AttributeMatcher):
                raise SyntaxDefinitionError(
                    f"Attribute conditions of rule '{tag}' must be AttributeMatcher "
                    f"instances, got {type(matcher).__name__}",
                    tag=tag
                )

        self.tag = tag.strip().lower()
        self.create_element = create_element
        self.attributes: Tuple[AttributeMatcher, ...] = attributes
        self.content = content
        self.block = block
        self.convert_content_to_text = convert_content_to_text
        self.preserve_whitespace = preserve_whitespace

    @property
    def expects_content(self) -> bool:
        return self.content is not False

    @property
    def is_code(self) -> bool:
        if self.preserve_whitespace is None:
            return self.tag in CODE_PRESERVING_TAGS
        return self.preserve_whitespace

    def describe(self) -> str:
        """One-line description used in diagnostics."""
        conditions = " ".join(matcher.describe() for matcher in self.attributes)
        flags = [
            name for name, enabled in (
                ("block", self.block),
                ("no-content", not self.expects_content),
                ("text", self.convert_content_to_text),
                ("code", self.is_code),
            ) if enabled
        ]
        description = f"<{self.tag}{' ' + conditions if conditions else ''}>"
        if flags:
            description += f" [{', '.join(flags)}]"
        return description

    def __repr__(self) -> str:
        return f"ElementTypeRule({self.describe()})"


def matches_rule(element: ElementNode, rule: ElementTypeRule) -> bool:
    """
    Check whether ``element`` satisfies ``rule``.

    The tag must be equal (both sides are lower-cased) and every attribute
    condition must hold: the attribute is present and its value equals the
    literal, or the regular expression is found in it.
    """
    if element.tag != rule.tag:
        return False
    for matcher in rule.attributes:
        value = element.get_attribute(matcher.name)
        if value is None or not matcher.test(value):
            return False
    return True


def find_matching_rule(
    element: ElementNode,
    syntax: Sequence[ElementTypeRule]
) -> Optional[ElementTypeRule]:
    """Return the first rule of ``syntax`` matching ``element``, or None."""
    for rule in syntax:
        if matches_rule(element, rule):
            return rule
    return None


def validate_syntax(syntax: Sequence[ElementTypeRule]) -> Tuple[ElementTypeRule, ...]:
    """
    Check that ``syntax`` is an ordered sequence of rules.

    Returns:
        The rules as a tuple, order preserved

    Raises:
        SyntaxDefinitionError: If syntax is not a list/tuple or holds a non-rule
    """
    if isinstance(syntax, (str, bytes, dict)) or not isinstance(syntax, Sequence):
        raise SyntaxDefinitionError(
            f"syntax must be an ordered list of ElementTypeRule, got {type(syntax).__name__}"
        )
    for index, rule in enumerate(syntax):
        if not isinstance(rule, ElementTypeRule):
            raise SyntaxDefinitionError(
                f"syntax entry must be an ElementTypeRule, got {type(rule).__name__}",
                rule_index=index
            )
    logger.debug(f"Validated syntax with {len(syntax)} rules")
    return tuple(syntax)
