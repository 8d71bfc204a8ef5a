"""
Predefined character classes reachable through a backslash escape.

'\\d', '\\w', '\\s' and friends map to a set symbol; '\\n', '\\t' and the
other control escapes map to a single raw character.
"""

import string
from types import MappingProxyType
from typing import Mapping

from ..ir import AnyOf, NoneOf, RawCharacter, Symbol

WHITESPACE = " \t\r\n\x0b\x0c"
DIGITS = string.digits
WORD_CHARS = string.ascii_letters + string.digits + "_"
HEX_DIGITS = string.hexdigits
OCTAL_DIGITS = string.octdigits

_CHAR_CLASSES: Mapping[str, Symbol] = MappingProxyType({
    's': AnyOf(WHITESPACE),
    'S': NoneOf(WHITESPACE),
    'd': AnyOf(DIGITS),
    'D': NoneOf(DIGITS),
    'w': AnyOf(WORD_CHARS),
    'W': NoneOf(WORD_CHARS),
    'x': AnyOf(HEX_DIGITS),
    'O': AnyOf(OCTAL_DIGITS),
    'n': RawCharacter('\n'),
    'r': RawCharacter('\r'),
    't': RawCharacter('\t'),
    'v': RawCharacter('\x0b'),
    'f': RawCharacter('\x0c'),
})


def is_recognized(letter: str) -> bool:
    """Check if a letter names a predefined class."""
    return letter in _CHAR_CLASSES


def lookup(letter: str) -> Symbol:
    """Get the symbol for a class letter.

    Raises:
        KeyError: If the letter is not recognized
    """
    return _CHAR_CLASSES[letter]


def letters() -> str:
    """All recognized class letters, in table order."""
    return "".join(_CHAR_CLASSES)
