"""
Unit tests for symbols.
"""

import pytest
from regparse.ir import RawCharacter, Dot, DOT, AnyOf, NoneOf, LogicalNot


class TestRawCharacter:
    """Tests for RawCharacter symbol."""

    def test_matches_only_itself(self):
        symbol = RawCharacter("a")
        assert symbol.matches("a")
        assert not symbol.matches("A")

    def test_immutability(self):
        """Test that RawCharacter is immutable."""
        symbol = RawCharacter("a")
        with pytest.raises(AttributeError):
            symbol.char = "b"


class TestDot:
    """Tests for Dot symbol."""

    def test_matches_anything(self):
        for ch in "a\n \x00✓":
            assert DOT.matches(ch)

    def test_all_dots_equal(self):
        assert Dot() == DOT


class TestSets:
    """Tests for AnyOf and NoneOf."""

    def test_any_of(self):
        symbol = AnyOf("abc")
        assert symbol.matches("b")
        assert not symbol.matches("d")

    def test_none_of(self):
        symbol = NoneOf("abc")
        assert not symbol.matches("b")
        assert symbol.matches("d")

    def test_chars_are_a_frozenset(self):
        """Test that any iterable is normalised to a frozenset."""
        assert AnyOf(["a", "b", "a"]).chars == frozenset("ab")
        assert AnyOf("ba") == AnyOf(["a", "b"])

    def test_any_of_and_none_of_differ(self):
        assert AnyOf("a") != NoneOf("a")

    def test_empty_sets(self):
        assert not AnyOf("").matches("a")
        assert NoneOf("").matches("a")

    def test_hashable(self):
        assert hash(AnyOf("ab")) == hash(AnyOf("ba"))


class TestLogicalNot:
    """Tests for LogicalNot symbol."""

    def test_negates(self):
        symbol = LogicalNot(AnyOf("ab"))
        assert symbol.matches("c")
        assert not symbol.matches("a")

    def test_double_negation(self):
        symbol = LogicalNot(LogicalNot(RawCharacter("x")))
        assert symbol.matches("x")
        assert not symbol.matches("y")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
