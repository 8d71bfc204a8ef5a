"""
Unit tests for the predefined character-class table.
"""

import pytest
from regparse.frontend import charclasses
from regparse.ir import AnyOf, NoneOf, RawCharacter


class TestCharClassLookup:
    """Tests for is_recognized and lookup."""

    def test_recognized_letters(self):
        """Test that exactly the documented letters are recognized."""
        assert charclasses.letters() == "sSdDwWxOnrtvf"
        for letter in "sSdDwWxOnrtvf":
            assert charclasses.is_recognized(letter)

    @pytest.mark.parametrize("letter", ["a", "o", "X", "b", "\\", "*"])
    def test_unrecognized_letters(self, letter):
        """Test letters outside the table."""
        assert not charclasses.is_recognized(letter)

    def test_lookup_unknown_letter(self):
        """Test that looking up an unknown letter raises KeyError."""
        with pytest.raises(KeyError):
            charclasses.lookup("q")

    def test_table_is_read_only(self):
        """Test that the table cannot be modified."""
        with pytest.raises(TypeError):
            charclasses._CHAR_CLASSES["q"] = RawCharacter("q")


class TestCharClassContents:
    """Tests for what each class accepts."""

    def test_digits(self):
        """Test '\\d' and '\\D'."""
        assert charclasses.lookup("d") == AnyOf("0123456789")
        assert charclasses.lookup("D") == NoneOf("0123456789")
        assert not charclasses.lookup("D").matches("5")
        assert charclasses.lookup("D").matches("x")

    def test_whitespace(self):
        """Test '\\s' and '\\S'."""
        space = charclasses.lookup("s")
        for ch in " \t\r\n\x0b\x0c":
            assert space.matches(ch)
            assert not charclasses.lookup("S").matches(ch)
        assert not space.matches("a")

    def test_word_characters(self):
        """Test '\\w' and '\\W'."""
        word = charclasses.lookup("w")
        assert len(word.chars) == 63
        assert word.matches("_")
        assert word.matches("Z")
        assert not word.matches("-")
        assert charclasses.lookup("W").matches("-")

    def test_hex_and_octal(self):
        """Test '\\x' and '\\O'."""
        assert charclasses.lookup("x") == AnyOf("0123456789abcdefABCDEF")
        assert charclasses.lookup("O") == AnyOf("01234567")
        assert not charclasses.lookup("O").matches("8")

    @pytest.mark.parametrize("letter, expected", [
        ("n", "\n"),
        ("r", "\r"),
        ("t", "\t"),
        ("v", "\x0b"),
        ("f", "\x0c"),
    ])
    def test_control_characters(self, letter, expected):
        """Test the single-character escapes."""
        assert charclasses.lookup(letter) == RawCharacter(expected)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
