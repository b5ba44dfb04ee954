"""
Lexer Configuration
===================

Settings that control tokenization. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

Environment variables (all optional):
    VOXL_DEFAULT_NUMERIC: Interpretation of unprefixed numeric literals
        ("signed", "unsigned" or "float", case-insensitive)
"""

import logging
import os
from dataclasses import dataclass

from voxl_asm.lexer import NumericType

logger = logging.getLogger(__name__)

DEFAULT_NUMERIC_ENV = "VOXL_DEFAULT_NUMERIC"


@dataclass
class LexerConfig:
    """
    Configuration for a tokenizer run.

    Attributes:
        default_numeric: How unprefixed numeric literals are read (default: UNSIGNED)
    """

    default_numeric: NumericType = NumericType.UNSIGNED

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create a LexerConfig from environment variables.

        Invalid values are logged and ignored.
        """
        config = cls()

        if numeric := os.environ.get(DEFAULT_NUMERIC_ENV):
            try:
                config.default_numeric = NumericType.from_name(numeric)
            except ValueError:
                logger.warning(f"Ignoring invalid {DEFAULT_NUMERIC_ENV}={numeric!r}")

        return config
