"""
VOXL Assembly Language Lexer
============================

This module implements the lexer (tokenizer) for VOXL assembly language.
It converts source text into a list of tokens that the parser consumes.

Token Types
-----------
- COMMA, COLON: Punctuation
- REGISTER: $r0-$r9, $rsp, $rfp, $rfl, $rou, $rra, $rrb
- OPCODE: Instruction mnemonics (ldi, call, ...)
- IDENTIFIER: Labels and symbol names
- UNSIGNED_INTEGER / SIGNED_INTEGER: Numeric literals
- Directives: %repeat, %end_repeat, %if, %else, %endif, %import, %const

Number Formats
--------------
| Format      | Prefix | Example   | Token            |
|-------------|--------|-----------|------------------|
| Default     | (none) | 52, -3    | per NumericType  |
| Hexadecimal | 0x     | 0x2abc    | UNSIGNED_INTEGER |
| Binary      | 0b     | 0b1010    | UNSIGNED_INTEGER |
| Signed      | 0i     | 0i-123    | SIGNED_INTEGER   |
| Unsigned    | 0u     | 0u52      | UNSIGNED_INTEGER |
| Float       | 0f     | (none)    | not supported    |

Every literal must fit in 64 bits; binary literals are capped at 64 digits.

Comments
--------
'#' starts a comment that runs to the end of the line.

Errors
------
Lexing is fail-fast: the first problem raises a LexerError subclass from
voxl_asm.errors and no further input is read. Tokens produced before the
error remain available through ``Lexer.tokens``.

Example
-------
>>> from voxl_asm.lexer import tokenize
>>> for token in tokenize("ldi 52, $r0"):
...     print(token)
Token(OPCODE, 3, 1:1)
Token(UNSIGNED_INTEGER, 52, 1:5)
Token(COMMA, 1:7)
Token(REGISTER, R0, 1:9)
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Iterable, Optional, Union

from voxl_asm.errors import (
    EmptyIdentifierError,
    ExpectedRegisterFoundEOFError,
    InvalidBinaryLiteralError,
    InvalidHexLiteralError,
    InvalidRegisterError,
    InvalidSignedIntegerLiteralError,
    InvalidUnsignedIntegerLiteralError,
    UnexpectedCharacterError,
    UnknownDirectiveError,
)
from voxl_asm.isa import REGISTER_SUFFIXES, Register, opcode_for
from voxl_asm.text_mapping import FileInfo, FileRegistry, Position, TextRange

if TYPE_CHECKING:
    from voxl_asm.config import LexerConfig

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1
I64_MAX = 2**63 - 1


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for VOXL assembly language."""

    # Punctuation
    COMMA = auto()             # ,
    COLON = auto()             # :

    # Operands and names
    REGISTER = auto()          # $r0 .. $r9, $rsp, ...  (value: Register)
    OPCODE = auto()            # ldi, call, ...         (value: opcode int)
    IDENTIFIER = auto()        # MAIN, loop_start       (value: name)
    UNSIGNED_INTEGER = auto()  # 52, 0x2a, 0b101, 0u7   (value: int)
    SIGNED_INTEGER = auto()    # 0i-123                 (value: int)

    # Directives (recognised here, executed by later stages)
    REPEAT = auto()            # %repeat
    END_REPEAT = auto()        # %end_repeat
    IF = auto()                # %if
    ELSE = auto()              # %else
    ENDIF = auto()             # %endif
    IMPORT = auto()            # %import
    CONSTANT = auto()          # %const


DIRECTIVES: dict[str, TokenType] = {
    "repeat": TokenType.REPEAT,
    "end_repeat": TokenType.END_REPEAT,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "endif": TokenType.ENDIF,
    "import": TokenType.IMPORT,
    "const": TokenType.CONSTANT,
}


class NumericType(Enum):
    """How an unprefixed numeric literal is interpreted."""

    SIGNED = auto()
    UNSIGNED = auto()
    FLOAT = auto()

    @classmethod
    def from_name(cls, name: str) -> "NumericType":
        """
        Look up a mode by case-insensitive name.

        Raises:
            ValueError: If the name is not signed, unsigned or float
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown numeric type '{name}'") from None


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        type: The TokenType classification
        range: Source span of the lexeme, including any sigil or radix prefix
        value: Register, opcode, integer value or identifier name; None for
            punctuation and directives
    """
    type: TokenType
    range: TextRange
    value: Union[Register, int, str, None] = None

    def __repr__(self) -> str:
        where = self.range.start
        if isinstance(self.value, Register):
            return f"Token({self.type.name}, {self.value.name}, {where})"
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r}, {where})"
        return f"Token({self.type.name}, {where})"

    @property
    def text(self) -> str:
        """The exact source text of the lexeme."""
        return self.range.text

    @property
    def location(self) -> Position:
        return self.range.start


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes VOXL assembly source.

    A Lexer is built for one source unit, driven once with ``process()``,
    then consumed with ``into_tokens()``. The cursor only moves forward;
    every sub-scanner consumes exactly the characters of its own lexeme.

    Usage:
        lexer = Lexer(source, file, NumericType.UNSIGNED)
        lexer.process()
        tokens = lexer.into_tokens()

    Attributes:
        chars: The decoded source characters
        file: Handle of the registered file, stamped on every range
        default_numeric: Interpretation of unprefixed numeric literals
    """

    DECIMAL_DIGITS = "0123456789"
    BINARY_DIGITS = "01"
    HEX_DIGITS = string.hexdigits

    # Characters that may follow a leading '0' to select a literal format
    RADIX_PREFIXES = "xbiuf"

    # First letters of the named register suffixes: f, s, o, r
    REGISTER_FIRST_LETTERS = frozenset(suffix[0] for suffix in REGISTER_SUFFIXES)

    # ASCII information separators, which str.isspace accepts
    NON_WHITESPACE_CONTROLS = frozenset("\x1c\x1d\x1e\x1f")

    def __init__(
        self,
        chars: Iterable[str],
        file: FileInfo,
        default_numeric: NumericType = NumericType.UNSIGNED,
    ):
        self.chars = list(chars)
        self.file = file
        self.default_numeric = default_numeric

        self._tokens: list[Token] = []

        # Cursor
        self._index = 0
        self._row = 0
        self._col = 0

    @classmethod
    def tokenize(
        cls,
        chars: Iterable[str],
        file: FileInfo,
        default_numeric: NumericType = NumericType.UNSIGNED,
    ) -> list[Token]:
        """
        Tokenize a whole source unit.

        Raises:
            LexerError: On the first lexical error
            NotImplementedError: On a float literal
        """
        lexer = cls(chars, file, default_numeric)
        lexer.process()
        return lexer.into_tokens()

    @property
    def position(self) -> Position:
        """The cursor: the position of the next unread character."""
        return Position(self._index, self._row, self._col)

    @property
    def tokens(self) -> list[Token]:
        """A copy of the tokens produced so far."""
        return list(self._tokens)

    def into_tokens(self) -> list[Token]:
        return self._tokens

    # =========================================================================
    # Driver
    # =========================================================================

    def process(self) -> None:
        """
        Scan the whole input, appending tokens in source order.

        Raises:
            LexerError: On the first lexical error
            NotImplementedError: On a float literal
        """
        while (char := self._current()) is not None:
            if char == "\n":
                self._advance_row()
            elif char == "%":
                self._scan_directive()
            elif char == "#":
                self._skip_comment()
            elif char == ",":
                self._advance()
                self._emit(TokenType.COMMA, 1)
            elif char == ":":
                self._advance()
                self._emit(TokenType.COLON, 1)
            elif char == "$":
                self._scan_register()
            elif char == "0" and self._peek() is not None and self._peek() in self.RADIX_PREFIXES:
                self._scan_prefixed_number()
            elif char.isspace() and char not in self.NON_WHITESPACE_CONTROLS:
                self._advance()
            elif char.isalpha() or char == "_":
                self._scan_identifier()
            elif char in self.DECIMAL_DIGITS or char == "-":
                self._scan_default_numeric(prefix_len=0)
            else:
                raise UnexpectedCharacterError(char, self.position, self.file)

        logger.debug(f"Tokenized '{self.file.name}': {len(self._tokens)} tokens")

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _current(self) -> Optional[str]:
        if self._index < len(self.chars):
            return self.chars[self._index]
        return None

    def _peek(self) -> Optional[str]:
        if self._index + 1 < len(self.chars):
            return self.chars[self._index + 1]
        return None

    def _advance(self) -> None:
        """Consume one character that is not a line break."""
        self._index += 1
        self._col += 1

    def _advance_row(self) -> None:
        """Consume a line break."""
        self._index += 1
        self._col = 0
        self._row += 1

    def _consume_digits(self, digits: str) -> int:
        """Consume a maximal run of characters from ``digits``; return its length."""
        length = 0
        while (char := self._current()) is not None and char in digits:
            self._advance()
            length += 1
        return length

    def _consume_name(self) -> tuple[int, bool]:
        """
        Consume a maximal run of letters and underscores.

        Returns:
            (length, whether the run contained an underscore)
        """
        length = 0
        has_underscore = False
        while (char := self._current()) is not None and (char.isalpha() or char == "_"):
            if char == "_":
                has_underscore = True
            self._advance()
            length += 1
        return length, has_underscore

    def _consume_alphanumeric(self) -> Position:
        """Consume the rest of an alphanumeric run; return the position after it."""
        while (char := self._current()) is not None and char.isalnum():
            self._advance()
        return self.position

    def _lexeme(self, length: int) -> str:
        return "".join(self.chars[self._index - length:self._index])

    # =========================================================================
    # Ranges and Token Creation
    # =========================================================================

    def _current_range(self, length: int) -> TextRange:
        """Range of the last ``length`` characters consumed on this line."""
        return TextRange(
            Position(self._index - length, self._row, self._col - length),
            self.position,
            self.file,
        )

    def _range_from(self, start: Position) -> TextRange:
        return TextRange(start, self.position, self.file)

    def _emit(self, token_type: TokenType, length: int, value=None) -> None:
        self._tokens.append(Token(token_type, self._current_range(length), value))

    # =========================================================================
    # Comments, Directives and Names
    # =========================================================================

    def _skip_comment(self) -> None:
        """Skip from '#' up to, not including, the next line break."""
        while (char := self._current()) is not None and char != "\n":
            self._advance()

    def _scan_directive(self) -> None:
        self._advance()  # consume %

        length, _ = self._consume_name()
        if length == 0:
            raise EmptyIdentifierError(self.position, self.file)

        keyword = self._current_range(length)
        token_type = DIRECTIVES.get(self._lexeme(length))
        if token_type is None:
            raise UnknownDirectiveError(keyword)

        self._emit(token_type, length + 1)

    def _scan_identifier(self) -> None:
        """
        Scan a name: an opcode if it is an underscore-free mnemonic,
        otherwise an identifier.
        """
        length, has_underscore = self._consume_name()
        if length == 0:
            raise EmptyIdentifierError(self.position, self.file)

        name = self._lexeme(length)
        if not has_underscore:
            code = opcode_for(name)
            if code is not None:
                self._emit(TokenType.OPCODE, length, code)
                return

        self._emit(TokenType.IDENTIFIER, length, name)

    # =========================================================================
    # Registers
    # =========================================================================

    def _scan_register(self) -> None:
        """
        Scan '$r' followed by a digit or a two-letter suffix.

        Invalid spellings report a range from the '$' through the end of
        the alphanumeric run actually present in the source.
        """
        start = self.position
        self._advance()  # consume $

        if self._current() is None:
            raise ExpectedRegisterFoundEOFError(self.position, self.file)

        if self._current() != "r":
            self._consume_alphanumeric()
            raise InvalidRegisterError(self._range_from(start))

        self._advance()  # consume r

        first = self._current()
        if first is None:
            raise ExpectedRegisterFoundEOFError(self.position, self.file)

        if first in self.DECIMAL_DIGITS:
            self._advance()
            boundary = self.position
            if self._consume_alphanumeric() != boundary:
                raise InvalidRegisterError(self._range_from(start))
            register = Register.from_digit(int(first))

        elif first in self.REGISTER_FIRST_LETTERS:
            self._advance()
            second = self._current()
            if second is None:
                raise ExpectedRegisterFoundEOFError(self.position, self.file)

            register = REGISTER_SUFFIXES.get(first + second)
            if register is None:
                self._consume_alphanumeric()
                raise InvalidRegisterError(self._range_from(start))
            self._advance()

        else:
            self._consume_alphanumeric()
            raise InvalidRegisterError(self._range_from(start))

        self._tokens.append(Token(TokenType.REGISTER, self._range_from(start), register))

    # =========================================================================
    # Numbers
    # =========================================================================

    def _scan_prefixed_number(self) -> None:
        """Scan a literal that starts with '0' and a radix letter."""
        radix = self._peek()
        self._advance()  # consume 0
        self._advance()  # consume radix letter

        if radix == "x":
            self._scan_hex(prefix_len=2)
        elif radix == "b":
            self._scan_binary(prefix_len=2)
        elif radix == "i":
            self._scan_signed(prefix_len=2)
        elif radix == "u":
            self._scan_unsigned(prefix_len=2)
        else:
            self._scan_float(prefix_len=2)

    def _scan_default_numeric(self, prefix_len: int) -> None:
        if self.default_numeric is NumericType.SIGNED:
            self._scan_signed(prefix_len)
        elif self.default_numeric is NumericType.UNSIGNED:
            # The configured mode is strict: no silent switch to signed
            if self._current() == "-":
                raise UnexpectedCharacterError("-", self.position, self.file)
            self._scan_unsigned(prefix_len)
        else:
            self._scan_float(prefix_len)

    def _scan_hex(self, prefix_len: int) -> None:
        length = self._consume_digits(self.HEX_DIGITS)
        digits = self._current_range(length)

        if length == 0:
            raise InvalidHexLiteralError(digits)
        value = int(self._lexeme(length), 16)
        if value > U64_MAX:
            raise InvalidHexLiteralError(digits)

        self._emit(TokenType.UNSIGNED_INTEGER, prefix_len + length, value)

    def _scan_binary(self, prefix_len: int) -> None:
        """Accumulate bits one digit at a time, at most 64 of them."""
        value = 0
        length = 0

        while (char := self._current()) is not None and char in self.BINARY_DIGITS:
            self._advance()
            if length == 64:
                raise InvalidBinaryLiteralError(self._current_range(length + 1))
            value = (value << 1) | int(char)
            length += 1

        if length == 0:
            raise InvalidBinaryLiteralError(self._current_range(0))

        self._emit(TokenType.UNSIGNED_INTEGER, prefix_len + length, value)

    def _scan_signed(self, prefix_len: int) -> None:
        sign_len = 0
        negative = self._current() == "-"
        if negative:
            self._advance()
            sign_len = 1

        value = 0
        length = 0
        while (char := self._current()) is not None and char in self.DECIMAL_DIGITS:
            self._advance()
            length += 1
            value = value * 10 + int(char)
            if value > I64_MAX:
                raise InvalidSignedIntegerLiteralError(self._current_range(sign_len + length))

        if length == 0:
            raise InvalidSignedIntegerLiteralError(self._current_range(0))

        if negative:
            value = -value

        self._emit(TokenType.SIGNED_INTEGER, prefix_len + sign_len + length, value)

    def _scan_unsigned(self, prefix_len: int) -> None:
        value = 0
        length = 0
        while (char := self._current()) is not None and char in self.DECIMAL_DIGITS:
            self._advance()
            length += 1
            value = value * 10 + int(char)
            if value > U64_MAX:
                raise InvalidUnsignedIntegerLiteralError(self._current_range(length))

        if length == 0:
            raise InvalidUnsignedIntegerLiteralError(self._current_range(0))

        self._emit(TokenType.UNSIGNED_INTEGER, prefix_len + length, value)

    def _scan_float(self, prefix_len: int) -> None:
        # TODO: decode fractional literals; InvalidFloatLiteralError and
        # UnexpectedSecondDecimalPointError are reserved for that scanner.
        raise NotImplementedError(
            f"{self.file.name}:{self.position}: float literals are not supported"
        )


# =============================================================================
# Convenience Entry Point
# =============================================================================

def tokenize(
    source: str,
    file: Optional[FileInfo] = None,
    config: Optional["LexerConfig"] = None,
) -> list[Token]:
    """
    Tokenize a string of VOXL source.

    Args:
        source: The source text
        file: Registered handle for ``source``; when omitted the text is
            registered in a private registry under the name '<input>'
        config: Lexer settings; defaults to unsigned unprefixed literals

    Returns:
        The tokens in source order

    Raises:
        LexerError: On the first lexical error
    """
    if file is None:
        file = FileRegistry().new_file("<input>", source)
    default_numeric = config.default_numeric if config is not None else NumericType.UNSIGNED
    return Lexer.tokenize(source, file, default_numeric)
