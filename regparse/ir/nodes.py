"""
AST node definitions for regparse.

This module contains the data classes that make up the tree returned by the
parser. Nodes are immutable; children are stored as tuples.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .symbols import Symbol


@dataclass(frozen=True)
class Concatenation:
    """A sequence of expressions matched one after another.

    An empty concatenation matches the empty string and only appears as the
    body of an empty group or an empty pattern.

    Attributes:
        items: The concatenated expressions, in source order
    """
    items: Tuple["Regexp", ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class Or:
    """Alternation between two expressions.

    Chains like 'a|b|c' nest on the left: Or(Or(a, b), c).

    Attributes:
        left: Left alternative
        right: Right alternative
    """
    left: "Regexp"
    right: "Regexp"


@dataclass(frozen=True)
class CharMatcher:
    """Matches a single character described by a symbol.

    Attributes:
        symbol: What the matcher accepts
    """
    symbol: Symbol


@dataclass(frozen=True)
class ZeroOrMoreTimes:
    """Kleene star: expr*

    Attributes:
        expr: The repeated expression
    """
    expr: "Regexp"


@dataclass(frozen=True)
class OneOrMoreTimes:
    """Repetition: expr+

    Attributes:
        expr: The repeated expression
    """
    expr: "Regexp"


@dataclass(frozen=True)
class ZeroOrOneTime:
    """Optional: expr?

    Attributes:
        expr: The optional expression
    """
    expr: "Regexp"


@dataclass(frozen=True)
class Group:
    """Non-capturing group: (expr)

    Attributes:
        expr: The grouped expression, possibly an empty concatenation
    """
    expr: "Regexp"


# Type aliases
Regexp = Union[Concatenation, Or, CharMatcher, ZeroOrMoreTimes, OneOrMoreTimes,
               ZeroOrOneTime, Group]
