"""
Main orchestration module for regparse.

This module provides the high-level PatternCompiler class that coordinates
tokenizing, parsing and rendering of patterns.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..backend.printer import format_tree, to_dict
from ..frontend.lexer import Lexer, Token
from ..frontend.parser import Parser, RegexSyntaxError
from ..ir import Regexp
from ..utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of checking a pattern.

    Attributes:
        success: Whether the pattern parsed
        tree: The parsed tree (if applicable)
        error_message: Error message if parsing failed
        position: Token position of the error (if known)
    """
    success: bool
    tree: Optional[Regexp] = None
    error_message: Optional[str] = None
    position: Optional[int] = None


class PatternCompiler:
    """Front door for turning pattern strings into trees.

    Example:
        >>> compiler = PatternCompiler()
        >>> result = compiler.check("a(b|c)*")
        >>> if result.success:
        ...     print(compiler.render(result.tree))
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the compiler.

        Args:
            settings: Parser and output settings. Defaults to DEFAULT_SETTINGS.
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._lexer = Lexer()

    @property
    def settings(self) -> Settings:
        return self._settings

    def tokenize(self, pattern: str) -> List[Token]:
        """Tokenize a pattern string.

        Args:
            pattern: Pattern string

        Returns:
            List of Token objects
        """
        tokens = self._lexer.tokenize(pattern)
        logger.debug(f"Tokenized {pattern!r} into {len(tokens)} tokens")
        return tokens

    def parse(self, pattern: str) -> Regexp:
        """Parse a pattern string into a tree.

        Args:
            pattern: Pattern string

        Returns:
            Regexp: Root of the tree

        Raises:
            RegexSyntaxError: If the pattern is not valid
        """
        tokens = self.tokenize(pattern)
        parser = Parser(tokens, max_group_depth=self._settings.max_group_depth)
        try:
            return parser.parse()
        except RegexSyntaxError as e:
            logger.debug(f"Syntax error in {pattern!r}: {e}")
            raise

    def check(self, pattern: str) -> ParseResult:
        """Parse a pattern and report the outcome instead of raising.

        Args:
            pattern: Pattern string

        Returns:
            ParseResult: The tree on success, the error details otherwise
        """
        try:
            tree = self.parse(pattern)
        except RegexSyntaxError as e:
            return ParseResult(
                success=False,
                error_message=e.message,
                position=e.position,
            )
        return ParseResult(success=True, tree=tree)

    def render(self, tree: Regexp) -> str:
        """Render a tree in the configured output format.

        Args:
            tree: Root of the tree

        Returns:
            str: The rendered tree
        """
        if self._settings.output_format == "json":
            return json.dumps(to_dict(tree), indent=self._settings.indent)
        return format_tree(tree, indent=self._settings.indent)
