"""
Unit tests for the AST renderers.
"""

import json

import pytest
from regparse.backend import format_tree, describe_symbol, to_dict
from regparse.ir import (
    Concatenation, CharMatcher, RawCharacter, DOT, AnyOf, NoneOf, LogicalNot,
)


class TestDescribeSymbol:
    """Tests for one-line symbol descriptions."""

    def test_raw_character(self):
        assert describe_symbol(RawCharacter("a")) == "'a'"

    def test_dot(self):
        assert describe_symbol(DOT) == "Dot"

    def test_runs_are_collapsed(self):
        """Test that three or more consecutive characters become a range."""
        assert describe_symbol(AnyOf("0123456789")) == "AnyOf['0'-'9']"

    def test_short_runs_are_listed(self):
        assert describe_symbol(AnyOf("ab_")) == "AnyOf['_', 'a', 'b']"

    def test_none_of(self):
        assert describe_symbol(NoneOf("xyz")) == "NoneOf['x'-'z']"

    def test_logical_not(self):
        assert describe_symbol(LogicalNot(AnyOf("a"))) == "Not(AnyOf['a'])"

    def test_unknown_symbol(self):
        with pytest.raises(TypeError):
            describe_symbol("a")


class TestFormatTree:
    """Tests for the indented tree dump."""

    def test_single_matcher(self, parse):
        assert format_tree(parse("a")) == "CharMatcher 'a'"

    def test_nested_tree(self, parse):
        expected = "\n".join([
            "Concatenation",
            "  CharMatcher 'a'",
            "  ZeroOrMoreTimes",
            "    Group",
            "      Or",
            "        CharMatcher 'b'",
            "        CharMatcher AnyOf['0'-'9']",
        ])
        assert format_tree(parse("a(b|\\d)*")) == expected

    def test_empty_group(self, parse):
        assert format_tree(parse("()")) == "Group\n  Concatenation (empty)"

    def test_indent_width(self, parse):
        assert format_tree(parse("a?"), indent=4) == "ZeroOrOneTime\n    CharMatcher 'a'"

    def test_negated_class(self, parse):
        assert format_tree(parse("[^a-c]")) == "CharMatcher Not(AnyOf['a'-'c'])"


class TestToDict:
    """Tests for the JSON-ready conversion."""

    def test_matcher(self):
        assert to_dict(CharMatcher(RawCharacter("a"))) == {
            "type": "CharMatcher",
            "symbol": {"type": "RawCharacter", "char": "a"},
        }

    def test_alternation(self, parse):
        result = to_dict(parse("a|b|c"))
        assert result["type"] == "Or"
        assert result["left"]["type"] == "Or"
        assert result["right"]["symbol"]["char"] == "c"

    def test_sets_are_sorted(self, parse):
        result = to_dict(parse("[cab]"))
        assert result["symbol"] == {"type": "AnyOf", "chars": ["a", "b", "c"]}

    def test_empty_concatenation(self):
        assert to_dict(Concatenation()) == {"type": "Concatenation", "items": []}

    def test_json_serialisable(self, parse):
        """Test that the output survives json.dumps."""
        tree = parse("(a|[^0-9])+\\w?.")
        assert json.loads(json.dumps(to_dict(tree))) == to_dict(tree)

    def test_unknown_node(self):
        with pytest.raises(TypeError):
            to_dict(RawCharacter("a"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
