"""
Lexer module for regparse.

Every character of a pattern becomes exactly one token. The ten regex
metacharacters get their own token type; everything else is a CHARACTER
token carrying the character itself. Tokenizing never fails.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterator, List


class TokenType(Enum):
    """Token types for regex patterns."""
    CHARACTER = auto()             # any non-special character

    # Grouping
    LEFT_ROUND_BRACKET = auto()    # (
    RIGHT_ROUND_BRACKET = auto()   # )

    # Modifiers
    STAR = auto()                  # *
    PLUS = auto()                  # +
    QUESTION_MARK = auto()         # ?

    OR = auto()                    # |
    DOT = auto()                   # .
    BACKSLASH = auto()             # \

    # Character classes
    LEFT_SQUARE_BRACKET = auto()   # [
    RIGHT_SQUARE_BRACKET = auto()  # ]


@dataclass(frozen=True)
class Token:
    """A token in a regex pattern.

    Attributes:
        type: The token type
        value: The source character the token was made from
    """
    type: TokenType
    value: str

    @property
    def is_special(self) -> bool:
        return self.type is not TokenType.CHARACTER

    def __repr__(self) -> str:
        if self.is_special:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"


_SPECIAL_CHARS = {
    '(': TokenType.LEFT_ROUND_BRACKET,
    ')': TokenType.RIGHT_ROUND_BRACKET,
    '*': TokenType.STAR,
    '+': TokenType.PLUS,
    '?': TokenType.QUESTION_MARK,
    '|': TokenType.OR,
    '.': TokenType.DOT,
    '\\': TokenType.BACKSLASH,
    '[': TokenType.LEFT_SQUARE_BRACKET,
    ']': TokenType.RIGHT_SQUARE_BRACKET,
}

# Canonical token for every special character
SPECIAL_TOKENS: Dict[str, Token] = {
    char: Token(type=token_type, value=char)
    for char, token_type in _SPECIAL_CHARS.items()
}


class Lexer:
    """Lexer for regex patterns.

    The lexer is stateless, so one instance can be shared freely, including
    across threads.

    Example:
        >>> lexer = Lexer()
        >>> lexer.tokenize("a*")
        [Token(CHARACTER, 'a'), Token(STAR)]
    """

    def tokenize(self, pattern: str) -> List[Token]:
        """Tokenize a regex pattern.

        Args:
            pattern: Pattern string

        Returns:
            List of Token objects, one per character of the pattern
        """
        return list(self.tokenize_iter(pattern))

    def tokenize_iter(self, pattern: str) -> Iterator[Token]:
        """Tokenize a regex pattern lazily.

        Args:
            pattern: Pattern string

        Yields:
            Token objects one at a time
        """
        for char in pattern:
            yield self._to_token(char)

    @staticmethod
    def _to_token(char: str) -> Token:
        special = SPECIAL_TOKENS.get(char)
        if special is not None:
            return special
        return Token(type=TokenType.CHARACTER, value=char)

    @staticmethod
    def is_special_char(char: str) -> bool:
        """Check if a character has its own token type."""
        return char in SPECIAL_TOKENS


def tokenize(pattern: str) -> List[Token]:
    """Convenience function to tokenize a pattern.

    Args:
        pattern: Pattern string

    Returns:
        List of Token objects
    """
    return Lexer().tokenize(pattern)
