"""
Parser module for regparse.

This module provides a recursive descent parser that turns the token list
produced by the lexer into an AST. One method per grammar rule:

    regexp        := alternation | <empty>
    alternation   := concatenation ('|' concatenation)*
    concatenation := unit+
    unit          := primary ('*' | '+' | '?')?
    primary       := CHAR | '.' | group | backslashed | characterClass
    group         := '(' regexp ')'
    characterClass:= '[' '^'? (classChar ('-' classChar)?)* ']'
    backslashed   := '\\' (special character | class letter)

The empty alternative of 'regexp' is only taken at the end of input or in
front of ')', which is what makes '()' legal.
"""

from typing import Iterable, List, Optional

from ..ir import (
    Concatenation, Or, CharMatcher, ZeroOrMoreTimes, OneOrMoreTimes, ZeroOrOneTime, Group, Regexp,
    RawCharacter, DOT, AnyOf, LogicalNot,
)
from ..utils.settings import DEFAULT_SETTINGS
from . import charclasses
from .lexer import Token, TokenType, tokenize


class RegexSyntaxError(Exception):
    """Exception raised when a pattern violates the regex grammar."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.position is not None:
            return f"Position {self.position}: {self.message}"
        return self.message


# Token types that can start a unit
_PRIMARY_STARTS = (
    TokenType.CHARACTER,
    TokenType.DOT,
    TokenType.LEFT_ROUND_BRACKET,
    TokenType.BACKSLASH,
    TokenType.LEFT_SQUARE_BRACKET,
)

_MODIFIERS = {
    TokenType.STAR: ZeroOrMoreTimes,
    TokenType.PLUS: OneOrMoreTimes,
    TokenType.QUESTION_MARK: ZeroOrOneTime,
}

# Characters that must be escaped inside '[...]'
_CLASS_SPECIALS = frozenset("-^]\\")


class Parser:
    """Recursive descent parser for regex patterns.

    The parser keeps its position in the token list as instance state, so an
    instance parses exactly one token list and must not be shared between
    threads. Use the module-level parse() to get a fresh parser per call.

    Example:
        >>> parser = Parser(tokenize("ab*"))
        >>> tree = parser.parse()
    """

    def __init__(self, tokens: Iterable[Token], max_group_depth: Optional[int] = None):
        """Initialize the parser.

        Args:
            tokens: Tokens produced by the lexer
            max_group_depth: Deepest allowed group nesting (default from settings)
        """
        self._tokens = tuple(tokens)
        self._pos: int = 0
        self._depth: int = 0
        self._max_group_depth = (
            DEFAULT_SETTINGS.max_group_depth if max_group_depth is None else max_group_depth
        )
        self._consumed = False

    def parse(self) -> Regexp:
        """Parse the whole token list into an AST.

        Returns:
            Regexp: Root of the AST

        Raises:
            RegexSyntaxError: If the tokens do not form a valid pattern
        """
        if self._consumed:
            raise RuntimeError("Parser instances are single-use")
        self._consumed = True

        try:
            tree = self._parse_regexp()
        except RecursionError:
            raise self._error("Groups nested too deeply for the interpreter stack") from None
        if self._has_next():
            raise self._error("Tokens left over after attempted parse")
        return tree

    # ==================== Cursor ====================

    def _has_next(self) -> bool:
        return self._pos < len(self._tokens)

    def _peek(self) -> Optional[Token]:
        """Get the next token without consuming it."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> Token:
        """Consume the next token and return it."""
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _advance_or_fail(self, message: str) -> Token:
        if not self._has_next():
            raise self._error(message)
        return self._advance()

    def _next_is(self, *token_types: TokenType) -> bool:
        token = self._peek()
        return token is not None and token.type in token_types

    def _next_is_raw(self, char: str) -> bool:
        token = self._peek()
        return token is not None and token.value == char

    def _error(self, message: str, position: Optional[int] = None) -> RegexSyntaxError:
        return RegexSyntaxError(message, self._pos if position is None else position)

    # ==================== Grammar ====================

    def _parse_regexp(self) -> Regexp:
        if not self._has_next() or self._next_is(TokenType.RIGHT_ROUND_BRACKET):
            return Concatenation()
        return self._parse_alternation()

    def _parse_alternation(self) -> Regexp:
        tree = self._parse_concatenation()
        while self._next_is(TokenType.OR):
            self._advance()
            tree = Or(tree, self._parse_concatenation())
        return tree

    def _parse_concatenation(self) -> Regexp:
        units: List[Regexp] = []
        while self._next_is(*_PRIMARY_STARTS):
            units.append(self._parse_unit())

        if not units:
            token = self._peek()
            if token is None:
                raise self._error("Expected symbols but found end of input")
            if token.type in _MODIFIERS:
                raise self._error(f"Nothing to repeat before '{token.value}'")
            raise self._error(f"Expected symbols but found '{token.value}'")

        if len(units) == 1:
            return units[0]
        return Concatenation(tuple(units))

    def _parse_unit(self) -> Regexp:
        primary = self._parse_primary()

        token = self._peek()
        if token is None or token.type not in _MODIFIERS:
            return primary
        self._advance()

        if self._next_is(*_MODIFIERS):
            raise self._error(f"Multiple repetition modifiers after '{token.value}'")
        return _MODIFIERS[token.type](primary)

    def _parse_primary(self) -> Regexp:
        token = self._advance()

        if token.type == TokenType.CHARACTER:
            return CharMatcher(RawCharacter(token.value))
        elif token.type == TokenType.DOT:
            return CharMatcher(DOT)
        elif token.type == TokenType.LEFT_ROUND_BRACKET:
            return self._parse_group()
        elif token.type == TokenType.BACKSLASH:
            return self._parse_backslashed()
        elif token.type == TokenType.LEFT_SQUARE_BRACKET:
            return self._parse_character_class()

        raise self._error(f"Failed to parse {token!r}", self._pos - 1)

    def _parse_group(self) -> Regexp:
        start = self._pos - 1
        if self._depth >= self._max_group_depth:
            raise self._error(f"Groups nested deeper than {self._max_group_depth} levels", start)

        self._depth += 1
        expr = self._parse_regexp()
        self._depth -= 1

        if not self._next_is(TokenType.RIGHT_ROUND_BRACKET):
            raise self._error("Unclosed group", start)
        self._advance()
        return Group(expr)

    def _parse_backslashed(self) -> Regexp:
        start = self._pos - 1
        token = self._advance_or_fail("No character after a backslash")

        if token.is_special:
            return CharMatcher(RawCharacter(token.value))
        if charclasses.is_recognized(token.value):
            return CharMatcher(charclasses.lookup(token.value))
        raise self._error(f"Invalid character after a backslash: \\{token.value}", start)

    def _parse_character_class(self) -> Regexp:
        start = self._pos - 1
        negated = self._next_is_raw('^')
        if negated:
            self._advance()

        symbol = AnyOf(self._parse_class_body())

        if not self._next_is(TokenType.RIGHT_SQUARE_BRACKET):
            raise self._error("Unclosed character class", start)
        self._advance()

        if negated:
            return CharMatcher(LogicalNot(symbol))
        return CharMatcher(symbol)

    def _parse_class_body(self) -> List[str]:
        chars: List[str] = []
        while self._has_next() and not self._next_is(TokenType.RIGHT_SQUARE_BRACKET):
            range_start = self._pos
            first = self._parse_class_char("Unexpected special character in a character class")

            if not self._next_is_raw('-'):
                chars.append(first)
                continue

            self._advance()
            last = self._parse_class_char("Unexpected special character after a hyphen in a character class")
            if first > last:
                raise self._error(
                    f"Bad range '{first}-{last}' in a character class "
                    f"(first character has a larger code than the second one)",
                    range_start,
                )
            chars.extend(chr(code) for code in range(ord(first), ord(last) + 1))
        return chars

    def _parse_class_char(self, special_message: str) -> str:
        """Read one class character, either plain or a backslash-escaped one of '-^]\\'."""
        start = self._pos
        token = self._advance_or_fail("Unexpected end of input in a character class")

        if token.type == TokenType.BACKSLASH:
            escaped = self._advance_or_fail("No character after a backslash")
            if escaped.value in _CLASS_SPECIALS:
                return escaped.value
            raise self._error(f"Invalid character after a backslash: \\{escaped.value}", start)

        if token.value in _CLASS_SPECIALS:
            raise self._error(f"{special_message}: '{token.value}'", start)
        return token.value


def parse(tokens: Iterable[Token], max_group_depth: Optional[int] = None) -> Regexp:
    """Parse a token list into an AST.

    Args:
        tokens: Tokens produced by the lexer
        max_group_depth: Deepest allowed group nesting (default from settings)

    Returns:
        Regexp: Root of the AST

    Raises:
        RegexSyntaxError: If the tokens do not form a valid pattern
    """
    return Parser(tokens, max_group_depth).parse()


def parse_pattern(pattern: str, max_group_depth: Optional[int] = None) -> Regexp:
    """Convenience function to tokenize and parse a pattern string."""
    return parse(tokenize(pattern), max_group_depth)
