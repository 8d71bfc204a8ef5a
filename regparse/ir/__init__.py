"""
Intermediate Representation (IR) module for regparse.

This module defines the AST node and symbol data structures produced by the
parser and handed to a downstream matching engine.
"""

from .nodes import (
    # Expressions
    Concatenation,
    Or,
    CharMatcher,
    ZeroOrMoreTimes,
    OneOrMoreTimes,
    ZeroOrOneTime,
    Group,
    Regexp,
)
from .symbols import (
    RawCharacter,
    Dot,
    DOT,
    AnyOf,
    NoneOf,
    LogicalNot,
    Symbol,
)

__all__ = [
    # Expressions
    "Concatenation",
    "Or",
    "CharMatcher",
    "ZeroOrMoreTimes",
    "OneOrMoreTimes",
    "ZeroOrOneTime",
    "Group",
    "Regexp",
    # Symbols
    "RawCharacter",
    "Dot",
    "DOT",
    "AnyOf",
    "NoneOf",
    "LogicalNot",
    "Symbol",
]
