# =============================================================================
# test_errors.py - Error Hierarchy Tests
# =============================================================================
# Tests for the lexer exception hierarchy: classification, structural
# equality and the rendered "file:line:col: error:" messages.
# =============================================================================

import copy
import pickle

import pytest

from voxl_asm.errors import (
    EmptyIdentifierError,
    ExpectedRegisterFoundEOFError,
    InvalidFloatLiteralError,
    InvalidHexLiteralError,
    InvalidRegisterError,
    LexerError,
    UnexpectedCharacterError,
    UnexpectedSecondDecimalPointError,
    UnknownDirectiveError,
    VoxlError,
)
from voxl_asm.lexer import tokenize
from voxl_asm.text_mapping import FileRegistry, Position, TextRange


def raised_by(source: str) -> LexerError:
    with pytest.raises(LexerError) as exc_info:
        tokenize(source)
    return exc_info.value


def raised_by_file(f) -> LexerError:
    with pytest.raises(LexerError) as exc_info:
        tokenize(f.contents, f)
    return exc_info.value


# =============================================================================
# Hierarchy
# =============================================================================

class TestHierarchy:
    """All lexer errors are VoxlErrors."""

    @pytest.mark.parametrize("source", ["@", "%", "0x", "$rq", "$", "%nope"])
    def test_lexer_errors_are_voxl_errors(self, source):
        assert isinstance(raised_by(source), VoxlError)

    def test_reserved_float_errors(self):
        """Float-literal errors exist for a future float scanner."""
        f = FileRegistry().new_file("<test>", "1.2.3")
        r = TextRange(Position(0, 0, 0), Position(5, 0, 5), f)
        assert isinstance(InvalidFloatLiteralError(r), LexerError)
        error = UnexpectedSecondDecimalPointError(Position(3, 0, 3), f)
        assert error.position.column == 3


# =============================================================================
# Equality
# =============================================================================

class TestEquality:
    """Errors compare by class and payload."""

    def test_same_payload_equal(self):
        a = UnexpectedCharacterError("@", Position(2, 0, 2))
        b = UnexpectedCharacterError("@", Position(2, 0, 2))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_char_not_equal(self):
        assert UnexpectedCharacterError("@", Position(0, 0, 0)) != UnexpectedCharacterError("!", Position(0, 0, 0))

    def test_different_class_not_equal(self):
        position = Position(1, 0, 1)
        assert EmptyIdentifierError(position) != ExpectedRegisterFoundEOFError(position)

    def test_range_errors_compare_ranges(self):
        f = FileRegistry().new_file("<test>", "0x")
        r = TextRange(Position(2, 0, 2), Position(2, 0, 2), f)
        assert raised_by_file(f) == InvalidHexLiteralError(r)


# =============================================================================
# Copying and Pickling
# =============================================================================

class TestCopyAndPickle:
    """Errors rebuild from their own payload, e.g. when sent between processes."""

    @pytest.mark.parametrize("source", ["ldi @", "$rq", "%", "$", "0b", "%bogus"])
    def test_copy(self, source):
        error = raised_by(source)
        duplicate = copy.copy(error)
        assert duplicate == error
        assert str(duplicate) == str(error)

    @pytest.mark.parametrize("source", ["ldi @", "$rq", "%", "$", "0b", "%bogus"])
    def test_pickle_round_trip(self, source):
        error = raised_by(source)
        restored = pickle.loads(pickle.dumps(error))
        assert type(restored) is type(error)
        assert restored.position == error.position
        assert str(restored) == str(error)

    def test_base_class_copy(self):
        error = LexerError(position=Position(0, 0, 0))
        assert copy.copy(error) == error


# =============================================================================
# Message Formatting
# =============================================================================

class TestMessages:
    """Rendered messages point at the source."""

    def test_range_error_message(self):
        error = raised_by("ldi 5, $rzz")
        lines = str(error).split("\n")
        assert lines[0] == "<input>:1:8: error: invalid register"
        assert lines[1] == "    ldi 5, $rzz"
        assert lines[2] == " " * 11 + "^^^^"

    def test_point_error_message(self):
        error = raised_by("ret\n  @")
        lines = str(error).split("\n")
        assert lines[0] == "<input>:2:3: error: unexpected character '@'"
        assert lines[1] == "      @"
        assert lines[2] == " " * 6 + "^"

    def test_unknown_directive_message(self):
        error = raised_by("%bogus")
        assert isinstance(error, UnknownDirectiveError)
        assert "unknown directive '%bogus'" in str(error)

    def test_zero_width_range_gets_one_caret(self):
        error = raised_by("0x")
        assert str(error).split("\n")[2] == " " * 6 + "^"

    def test_message_uses_file_name(self):
        f = FileRegistry().new_file("lib/math.vxl", "call $rq")
        error = raised_by_file(f)
        assert isinstance(error, InvalidRegisterError)
        assert str(error).startswith("lib/math.vxl:1:6: error:")

    def test_error_without_file(self):
        error = EmptyIdentifierError(Position(0, 0, 0))
        assert str(error) == "<input>:1:1: error: expected identifier"
        assert error.source_line() is None
