"""Tests for element type rules and rule matching."""

import re

import pytest

from post_content_parser.core.content_parser import (
    AttributeAccessor,
    AttributeMatcher,
    ElementTypeRule,
    find_matching_rule,
    matches_rule,
    validate_syntax,
)
from post_content_parser.core.markup_tree import ElementNode
from post_content_parser.exceptions import SyntaxDefinitionError


def noop(content, attributes, context):
    return content


class TestAttributeMatcher:
    """Test AttributeMatcher."""

    def test_literal_match_is_exact(self):
        """Test that literal values compare for equality."""
        matcher = AttributeMatcher("class", "a")
        assert matcher.test("a")
        assert not matcher.test("a a1")
        assert not matcher.is_pattern

    def test_pattern_match_searches(self):
        """Test that patterns are searched, not fully matched."""
        matcher = AttributeMatcher.pattern("class", r"a\d")
        assert matcher.is_pattern
        assert matcher.test("a a1 a2")
        assert not matcher.test("a b")

    def test_compiled_pattern_is_accepted(self):
        """Test constructing a matcher from a compiled expression."""
        matcher = AttributeMatcher("class", re.compile(r"^quote"))
        assert matcher.test("quote-link")

    def test_name_is_normalized(self):
        """Test that matcher names are lower-cased."""
        assert AttributeMatcher(" Class ", "a").name == "class"

    def test_invalid_definitions(self):
        """Test rejection of malformed matchers."""
        with pytest.raises(SyntaxDefinitionError):
            AttributeMatcher("", "a")
        with pytest.raises(SyntaxDefinitionError):
            AttributeMatcher("class", 1)
        with pytest.raises(SyntaxDefinitionError):
            AttributeMatcher.pattern("class", "(")


class TestElementTypeRule:
    """Test ElementTypeRule."""

    def test_defaults(self):
        """Test default flags of a rule."""
        rule = ElementTypeRule("DIV", noop)
        assert rule.tag == "div"
        assert rule.expects_content
        assert not rule.block
        assert not rule.convert_content_to_text
        assert not rule.is_code
        assert rule.attributes == ()

    def test_pre_is_code_by_default(self):
        """Test that pre rules preserve whitespace unless told otherwise."""
        assert ElementTypeRule("pre", noop).is_code
        assert not ElementTypeRule("pre", noop, preserve_whitespace=False).is_code
        assert ElementTypeRule("code", noop, preserve_whitespace=True).is_code

    def test_invalid_rules(self):
        """Test rejection of malformed rules."""
        with pytest.raises(SyntaxDefinitionError):
            ElementTypeRule("", noop)
        with pytest.raises(SyntaxDefinitionError):
            ElementTypeRule("div", "not callable")
        with pytest.raises(SyntaxDefinitionError):
            ElementTypeRule("div", noop, attributes=[{"name": "class", "value": "a"}])

    def test_describe(self):
        """Test the one-line rule description."""
        rule = ElementTypeRule(
            "div",
            noop,
            attributes=[AttributeMatcher("class", "a"), AttributeMatcher.pattern("id", "^x")],
            block=True,
        )
        assert rule.describe() == '<div class="a" id~/^x/> [block]'
        assert ElementTypeRule("pre", noop).describe() == "<pre> [code]"
        assert ElementTypeRule("img", noop, content=False).describe() == "<img> [no-content]"


class TestRuleMatching:
    """Test matches_rule and find_matching_rule."""

    def test_tag_must_match(self):
        """Test that tags are compared."""
        assert matches_rule(ElementNode("div"), ElementTypeRule("div", noop))
        assert not matches_rule(ElementNode("span"), ElementTypeRule("div", noop))

    def test_all_attribute_conditions_must_hold(self):
        """Test attribute presence and value conditions."""
        rule = ElementTypeRule(
            "div",
            noop,
            attributes=[AttributeMatcher("class", "a"), AttributeMatcher("id", "b")],
        )
        assert matches_rule(ElementNode("div", {"class": "a", "id": "b"}), rule)
        assert not matches_rule(ElementNode("div", {"class": "a"}), rule)
        assert not matches_rule(ElementNode("div", {"class": "a", "id": "c"}), rule)

    def test_first_matching_rule_wins(self):
        """Test that rules are tried in declaration order."""
        specific = ElementTypeRule("span", noop, attributes=[AttributeMatcher("class", "x")])
        generic = ElementTypeRule("span", noop)
        syntax = [specific, generic]
        assert find_matching_rule(ElementNode("span", {"class": "x"}), syntax) is specific
        assert find_matching_rule(ElementNode("span"), syntax) is generic
        assert find_matching_rule(ElementNode("span", {"class": "x"}), [generic, specific]) is generic
        assert find_matching_rule(ElementNode("div"), syntax) is None


class TestAttributeAccessor:
    """Test AttributeAccessor."""

    def test_read_access(self):
        """Test reading attributes of the element."""
        accessor = AttributeAccessor(ElementNode("a", {"href": "/x"}))
        assert accessor.get_attribute("href") == "/x"
        assert accessor.get_attribute("title") is None
        assert accessor.get("title", "none") == "none"
        assert "href" in accessor
        assert accessor.has_attribute("HREF")


class TestValidateSyntax:
    """Test validate_syntax."""

    def test_returns_tuple_in_order(self):
        """Test that the order of rules is preserved."""
        rules = [ElementTypeRule("a", noop), ElementTypeRule("b", noop)]
        assert validate_syntax(rules) == tuple(rules)
        assert validate_syntax([]) == ()

    def test_rejects_non_sequences(self):
        """Test rejection of unordered or non-rule syntax."""
        with pytest.raises(SyntaxDefinitionError):
            validate_syntax({"a": ElementTypeRule("a", noop)})
        with pytest.raises(SyntaxDefinitionError):
            validate_syntax("a")

    def test_rejects_non_rules(self):
        """Test that every entry must be a rule."""
        with pytest.raises(SyntaxDefinitionError) as exc_info:
            validate_syntax([ElementTypeRule("a", noop), {"tag": "b"}])
        assert exc_info.value.rule_index == 1
