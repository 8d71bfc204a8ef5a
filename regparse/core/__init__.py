"""
Core module for regparse.

This module contains the orchestration layer that ties the frontend parser
and the backend renderers together.
"""

from ..frontend.parser import RegexSyntaxError
from .compiler import PatternCompiler, ParseResult

__all__ = [
    "PatternCompiler",
    "ParseResult",
    "RegexSyntaxError",
]
