"""
Symbol definitions for regparse.

A symbol describes which single characters a character matcher accepts.
Symbols are produced by the parser and consumed by a downstream matching
engine; the only behaviour they carry here is a membership test.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Union


@dataclass(frozen=True)
class RawCharacter:
    """A single literal character.

    Attributes:
        char: The character matched
    """
    char: str

    def matches(self, ch: str) -> bool:
        return ch == self.char


@dataclass(frozen=True)
class Dot:
    """Wildcard symbol produced by '.'; accepts any character."""

    def matches(self, ch: str) -> bool:
        return True


@dataclass(frozen=True)
class AnyOf:
    """Accepts any character from a set.

    Attributes:
        chars: The accepted characters
    """
    chars: FrozenSet[str]

    def __init__(self, chars: Iterable[str]):
        object.__setattr__(self, "chars", frozenset(chars))

    def matches(self, ch: str) -> bool:
        return ch in self.chars


@dataclass(frozen=True)
class NoneOf:
    """Accepts any character outside a set.

    Attributes:
        chars: The rejected characters
    """
    chars: FrozenSet[str]

    def __init__(self, chars: Iterable[str]):
        object.__setattr__(self, "chars", frozenset(chars))

    def matches(self, ch: str) -> bool:
        return ch not in self.chars


@dataclass(frozen=True)
class LogicalNot:
    """Negation of another symbol, produced by '[^...]'.

    Attributes:
        symbol: The negated symbol
    """
    symbol: "Symbol"

    def matches(self, ch: str) -> bool:
        return not self.symbol.matches(ch)


# Dot carries no state, one instance is enough
DOT = Dot()

Symbol = Union[RawCharacter, Dot, AnyOf, NoneOf, LogicalNot]
