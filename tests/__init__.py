"""
Test suite for regparse.

This package contains tests for the regparse parser including:
- Unit tests for the lexer, parser and character-class table
- Tests for the AST nodes, symbols and renderers
- Tests for the orchestration layer and command-line tools
"""

__version__ = "0.1.0"
