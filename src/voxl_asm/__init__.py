"""
VOXL Assembler Front End
========================

This package provides the lexical-analysis stage of the assembler for the
VOXL virtual machine. It turns assembly source text into typed tokens with
exact source ranges, ready for a parser and code generator.

Main Components
---------------
- **lexer**: The tokenizer (``Lexer``, ``Token``, ``TokenType``, ``tokenize``)
- **text_mapping**: Source positions, ranges and the file registry
- **isa**: VOXL registers and the mnemonic to opcode table
- **errors**: Exception hierarchy with source-pointing messages
- **config**: Tokenizer settings (``LexerConfig``)

Quick Start
-----------
    >>> from voxl_asm import FileRegistry, Lexer
    >>> registry = FileRegistry()
    >>> f = registry.new_file("main.vxl", "call MAIN")
    >>> [t.type.name for t in Lexer.tokenize(f.contents, f)]
    ['OPCODE', 'IDENTIFIER']

Or use the command-line tool:
    $ vxlex main.vxl
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from voxl_asm.text_mapping import Position, TextRange, FileInfo, FileRegistry
from voxl_asm.isa import Register, REGISTER_SUFFIXES, opcode_for, mnemonic_for
from voxl_asm.lexer import Lexer, Token, TokenType, NumericType, DIRECTIVES, tokenize
from voxl_asm.config import LexerConfig
from voxl_asm.errors import (
    VoxlError,
    LexerError,
    UnexpectedCharacterError,
    EmptyIdentifierError,
    InvalidHexLiteralError,
    InvalidBinaryLiteralError,
    InvalidFloatLiteralError,
    UnexpectedSecondDecimalPointError,
    InvalidUnsignedIntegerLiteralError,
    InvalidSignedIntegerLiteralError,
    InvalidRegisterError,
    ExpectedRegisterFoundEOFError,
    UnknownDirectiveError,
)

__all__ = [
    "__version__",
    # Source mapping
    "Position",
    "TextRange",
    "FileInfo",
    "FileRegistry",
    # Instruction set
    "Register",
    "REGISTER_SUFFIXES",
    "opcode_for",
    "mnemonic_for",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "NumericType",
    "DIRECTIVES",
    "tokenize",
    "LexerConfig",
    # Errors
    "VoxlError",
    "LexerError",
    "UnexpectedCharacterError",
    "EmptyIdentifierError",
    "InvalidHexLiteralError",
    "InvalidBinaryLiteralError",
    "InvalidFloatLiteralError",
    "UnexpectedSecondDecimalPointError",
    "InvalidUnsignedIntegerLiteralError",
    "InvalidSignedIntegerLiteralError",
    "InvalidRegisterError",
    "ExpectedRegisterFoundEOFError",
    "UnknownDirectiveError",
]
