"""
VOXL Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the VOXL assembler front
end. All exceptions inherit from VoxlError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
VoxlError (base)
└── LexerError (tokenizer failures, fail-fast)
    ├── UnexpectedCharacterError - character that cannot start a token
    ├── EmptyIdentifierError - '%' or identifier start with no name
    ├── InvalidHexLiteralError - empty or > 64-bit hex literal
    ├── InvalidBinaryLiteralError - empty or > 64-digit binary literal
    ├── InvalidFloatLiteralError - malformed float literal
    ├── UnexpectedSecondDecimalPointError - '1.2.3'
    ├── InvalidUnsignedIntegerLiteralError - empty or overflowing u64
    ├── InvalidSignedIntegerLiteralError - empty or overflowing i64
    ├── InvalidRegisterError - unknown '$...' register spelling
    ├── ExpectedRegisterFoundEOFError - input ends inside a register
    └── UnknownDirectiveError - '%name' that is not a directive

Each lexer error carries either a ``position`` (a single point) or a
``range`` (a span on one line). Both are zero-based internally; the
rendered message uses 1-based line and column numbers:

    main.vxl:3:8: error: invalid register
        ldi 5, $rzz
               ^^^^
"""

from typing import Optional

from voxl_asm.text_mapping import Position, TextRange, FileInfo


# =============================================================================
# Base Exception Class
# =============================================================================

class VoxlError(Exception):
    """
    Base exception for all VOXL assembler errors.

        try:
            tokens = tokenize(source, file)
        except VoxlError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(VoxlError):
    """
    Base exception for tokenizer failures.

    Subclasses set ``description`` and pass either a position or a range.
    Two lexer errors compare equal when they are the same class and carry
    the same payload, so tests can assert on whole error values.

    Attributes:
        position: Where the error starts
        range: The offending span, or None for point errors
        file: The file handle the error refers to (optional)
    """

    description = "lexical error"

    def __init__(
        self,
        position: Optional[Position] = None,
        range: Optional[TextRange] = None,
        file: Optional[FileInfo] = None,
    ):
        if position is None and range is not None:
            position = range.start
        if file is None and range is not None:
            file = range.file
        self.position = position
        self.range = range
        self.file = file
        super().__init__(self._format_message())

    @property
    def message(self) -> str:
        return self.description

    def _payload(self) -> tuple:
        return (self.position, self.range)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __reduce__(self):
        return (type(self), self._init_args())

    def _init_args(self) -> tuple:
        """Constructor arguments that rebuild this error, for copy and pickle."""
        if type(self) is LexerError:
            return (self.position, self.range, self.file)
        # Subclasses take either a range or a (position, file) pair
        if self.range is not None:
            return (self.range,)
        return (self.position, self.file)

    def __repr__(self) -> str:
        if self.range is not None:
            return f"{type(self).__name__}({self.range!r})"
        return f"{type(self).__name__}({self.position!r})"

    def source_line(self) -> Optional[str]:
        """Return the text of the line the error sits on, if the file is known."""
        if self.file is None or self.position is None:
            return None
        return self.file.line_text(self.position.row)

    def _format_message(self) -> str:
        """
        Format the error with location, source context and a caret underline.

        Example output:
            main.vxl:1:8: error: invalid register
                ldi 5, $rzz
                       ^^^^
        """
        parts = []

        if self.position is not None:
            name = self.file.name if self.file is not None else "<input>"
            location = f"{name}:{self.position.row + 1}:{self.position.column + 1}"
            parts.append(f"{location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        line = self.source_line()
        if line is not None:
            parts.append(f"    {line}")
            width = 1
            if self.range is not None:
                width = max(1, self.range.end.column - self.range.start.column)
            padding = " " * (4 + self.position.column)
            parts.append(f"{padding}{'^' * width}")

        return "\n".join(parts)


class UnexpectedCharacterError(LexerError):
    """A character that cannot begin any token, e.g. '@' or '-' in unsigned mode."""

    def __init__(self, char: str, position: Position, file: Optional[FileInfo] = None):
        self.char = char
        super().__init__(position=position, file=file)

    @property
    def message(self) -> str:
        return f"unexpected character {self.char!r}"

    def _payload(self) -> tuple:
        return (self.char, self.position)

    def _init_args(self) -> tuple:
        return (self.char, self.position, self.file)

    def __repr__(self) -> str:
        return f"UnexpectedCharacterError({self.char!r}, {self.position!r})"


class EmptyIdentifierError(LexerError):
    """A directive sigil or identifier start followed by no name characters."""

    description = "expected identifier"

    def __init__(self, position: Position, file: Optional[FileInfo] = None):
        super().__init__(position=position, file=file)


class InvalidHexLiteralError(LexerError):
    """Hex literal with no digits or a value that does not fit in 64 bits."""

    description = "invalid hexadecimal literal"

    def __init__(self, range: TextRange):
        super().__init__(range=range)


class InvalidBinaryLiteralError(LexerError):
    """Binary literal with no digits or more than 64 digits."""

    description = "invalid binary literal"

    def __init__(self, range: TextRange):
        super().__init__(range=range)


class InvalidFloatLiteralError(LexerError):
    """Malformed floating-point literal. Reserved until float literals are decoded."""

    description = "invalid float literal"

    def __init__(self, range: TextRange):
        super().__init__(range=range)


class UnexpectedSecondDecimalPointError(LexerError):
    """A second '.' inside a float literal. Reserved until float literals are decoded."""

    description = "unexpected second decimal point"

    def __init__(self, position: Position, file: Optional[FileInfo] = None):
        super().__init__(position=position, file=file)


class InvalidUnsignedIntegerLiteralError(LexerError):
    """Unsigned decimal literal with no digits or a value above 2**64 - 1."""

    description = "invalid unsigned integer literal"

    def __init__(self, range: TextRange):
        super().__init__(range=range)


class InvalidSignedIntegerLiteralError(LexerError):
    """Signed decimal literal with no digits or a magnitude above 2**63 - 1."""

    description = "invalid signed integer literal"

    def __init__(self, range: TextRange):
        super().__init__(range=range)


class InvalidRegisterError(LexerError):
    """A '$' register spelling outside the register set."""

    description = "invalid register"

    def __init__(self, range: TextRange):
        super().__init__(range=range)


class ExpectedRegisterFoundEOFError(LexerError):
    """Input ended in the middle of a register literal."""

    description = "expected register, found end of file"

    def __init__(self, position: Position, file: Optional[FileInfo] = None):
        super().__init__(position=position, file=file)


class UnknownDirectiveError(LexerError):
    """A '%name' whose name is not one of the recognised directives."""

    def __init__(self, range: TextRange):
        super().__init__(range=range)

    @property
    def message(self) -> str:
        return f"unknown directive '%{self.range.text}'"
