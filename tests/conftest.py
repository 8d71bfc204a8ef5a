"""
Pytest configuration and fixtures for regparse tests.
"""

import pytest
from pathlib import Path


@pytest.fixture
def fixtures_file():
    """Path to the pattern corpus shipped with the tests."""
    return Path(__file__).parent / "fixtures" / "patterns.txt"


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from regparse.frontend import Lexer
    return Lexer()


@pytest.fixture
def compiler():
    """Provide a PatternCompiler instance."""
    from regparse import PatternCompiler
    return PatternCompiler()


@pytest.fixture
def parse():
    """Provide a function that tokenizes and parses a pattern."""
    from regparse import parse_pattern
    return parse_pattern
