# =============================================================================
# test_config.py - Lexer Configuration Tests
# =============================================================================

import pytest

from voxl_asm.config import DEFAULT_NUMERIC_ENV, LexerConfig
from voxl_asm.lexer import NumericType


class TestNumericTypeNames:

    @pytest.mark.parametrize("name,expected", [
        ("signed", NumericType.SIGNED),
        ("UNSIGNED", NumericType.UNSIGNED),
        (" Float ", NumericType.FLOAT),
    ])
    def test_from_name(self, name, expected):
        assert NumericType.from_name(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="unknown numeric type"):
            NumericType.from_name("decimal")


class TestLexerConfig:
    """Defaults and environment overrides."""

    def test_default_is_unsigned(self):
        assert LexerConfig().default_numeric is NumericType.UNSIGNED

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv(DEFAULT_NUMERIC_ENV, raising=False)
        assert LexerConfig.from_env().default_numeric is NumericType.UNSIGNED

    def test_from_env_signed(self, monkeypatch):
        monkeypatch.setenv(DEFAULT_NUMERIC_ENV, "signed")
        assert LexerConfig.from_env().default_numeric is NumericType.SIGNED

    def test_from_env_invalid_ignored(self, monkeypatch):
        monkeypatch.setenv(DEFAULT_NUMERIC_ENV, "hex")
        assert LexerConfig.from_env().default_numeric is NumericType.UNSIGNED
