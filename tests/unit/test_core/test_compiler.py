"""
Unit tests for the PatternCompiler orchestration layer.
"""

import json
import logging

import pytest
from regparse import PatternCompiler, ParseResult, RegexSyntaxError
from regparse.frontend import TokenType
from regparse.ir import Concatenation, CharMatcher, RawCharacter, Group
from regparse.utils import Settings, DEFAULT_SETTINGS


class TestPatternCompilerParse:
    """Tests for tokenize and parse."""

    def test_default_settings(self, compiler):
        assert compiler.settings is DEFAULT_SETTINGS

    def test_tokenize(self, compiler):
        tokens = compiler.tokenize("a*")
        assert [t.type for t in tokens] == [TokenType.CHARACTER, TokenType.STAR]

    def test_parse(self, compiler):
        assert compiler.parse("ab") == Concatenation(
            (CharMatcher(RawCharacter("a")), CharMatcher(RawCharacter("b")))
        )

    def test_parse_raises(self, compiler):
        with pytest.raises(RegexSyntaxError, match="Unclosed group"):
            compiler.parse("(a")

    def test_parse_logs_errors(self, compiler, caplog):
        """Test that syntax errors are logged at DEBUG before propagating."""
        with caplog.at_level(logging.DEBUG, logger="regparse.core.compiler"):
            with pytest.raises(RegexSyntaxError):
                compiler.parse("a)")
        assert any("Syntax error" in record.getMessage() for record in caplog.records)

    def test_depth_setting(self):
        compiler = PatternCompiler(Settings(max_group_depth=1))
        assert compiler.parse("(a)") == Group(CharMatcher(RawCharacter("a")))
        with pytest.raises(RegexSyntaxError, match="nested deeper"):
            compiler.parse("((a))")


class TestPatternCompilerCheck:
    """Tests for the non-raising check()."""

    def test_success(self, compiler):
        result = compiler.check("a|b")
        assert isinstance(result, ParseResult)
        assert result.success
        assert result.tree is not None
        assert result.error_message is None

    def test_failure(self, compiler):
        result = compiler.check("[z-a]")
        assert not result.success
        assert result.tree is None
        assert "Bad range" in result.error_message
        assert result.position == 1


class TestPatternCompilerRender:
    """Tests for render()."""

    def test_tree_format(self, compiler):
        assert compiler.render(compiler.parse("a")) == "CharMatcher 'a'"

    def test_json_format(self):
        compiler = PatternCompiler(Settings(output_format="json"))
        rendered = compiler.render(compiler.parse("a"))
        assert json.loads(rendered)["type"] == "CharMatcher"


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.max_group_depth == 100
        assert settings.output_format == "tree"
        assert settings.format_choices == ["tree", "json"]

    def test_invalid_format(self):
        with pytest.raises(ValueError):
            Settings(output_format="xml")

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            Settings(max_group_depth=-1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
