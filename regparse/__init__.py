"""
regparse - Regular expression parser

Turns regular-expression pattern strings into an abstract syntax tree for a
downstream matching engine. Supports concatenation, alternation, the '*',
'+' and '?' modifiers, non-capturing groups, character classes with ranges
and negation, and backslash escapes for metacharacters and predefined
classes.

Example:
    >>> from regparse import tokenize, parse
    >>> tree = parse(tokenize("a(b|c)*"))

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "regparse Team"

from .frontend import tokenize, parse, parse_pattern, RegexSyntaxError
from .core import PatternCompiler, ParseResult

__all__ = [
    "__version__",
    "__author__",
    "tokenize",
    "parse",
    "parse_pattern",
    "RegexSyntaxError",
    "PatternCompiler",
    "ParseResult",
]
