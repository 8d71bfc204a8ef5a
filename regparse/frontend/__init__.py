"""
Frontend module for regparse.

This module provides the lexer, the recursive descent parser and the table
of predefined character classes.
"""

from .lexer import Lexer, Token, TokenType, SPECIAL_TOKENS, tokenize
from .parser import Parser, RegexSyntaxError, parse, parse_pattern

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "SPECIAL_TOKENS",
    "tokenize",
    # Parser components
    "Parser",
    "RegexSyntaxError",
    "parse",
    "parse_pattern",
]
