# =============================================================================
# test_text_mapping.py - Source Mapping Tests
# =============================================================================
# Tests for Position, TextRange, FileInfo and FileRegistry.
# =============================================================================

import pytest

from voxl_asm.text_mapping import FileInfo, FileRegistry, Position, TextRange


class TestPosition:
    """Positions are zero-based and print 1-based."""

    def test_str_is_one_based(self):
        assert str(Position(12, 2, 4)) == "3:5"

    def test_ordering_follows_offset(self):
        assert Position(3, 0, 3) < Position(5, 1, 0)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Position(0, 0, 0).row = 1


class TestTextRange:
    """Ranges read their text from the file they point into."""

    def test_text_and_length(self, registry):
        f = registry.new_file("main.vxl", "ldi 52, $r0")
        r = TextRange(Position(4, 0, 4), Position(6, 0, 6), f)
        assert r.text == "52"
        assert r.length == 2

    def test_empty_range(self, registry):
        f = registry.new_file("main.vxl", "0x")
        r = TextRange(Position(2, 0, 2), Position(2, 0, 2), f)
        assert r.text == ""
        assert r.length == 0

    def test_str(self, registry):
        f = registry.new_file("main.vxl", "ret\ncall MAIN")
        r = TextRange(Position(9, 1, 5), Position(13, 1, 9), f)
        assert str(r) == "main.vxl:2:6-10"


class TestFileRegistry:
    """The registry owns file text and issues stable ids."""

    def test_ids_are_sequential(self, registry):
        a = registry.new_file("a.vxl", "ret")
        b = registry.new_file("b.vxl", "nop")
        assert (a.file_id, b.file_id) == (0, 1)
        assert len(registry) == 2
        assert list(registry) == [a, b]

    def test_get_returns_same_handle(self, registry):
        f = registry.new_file("a.vxl", "ret")
        assert registry.get(0) is f

    def test_get_unknown_id(self, registry):
        with pytest.raises(KeyError):
            registry.get(3)

    def test_handles_compare_by_identity(self, registry):
        a = registry.new_file("same.vxl", "ret")
        b = registry.new_file("same.vxl", "ret")
        assert a != b
        assert a == registry.get(0)

    def test_load_from_disk(self, registry, source_file):
        path = source_file("call MAIN\n")
        f = registry.load(path)
        assert isinstance(f, FileInfo)
        assert f.name == str(path)
        assert f.contents == "call MAIN\n"

    def test_load_missing_file(self, registry, tmp_path):
        with pytest.raises(FileNotFoundError):
            registry.load(tmp_path / "missing.vxl")


class TestLineText:
    """FileInfo.line_text supports diagnostics."""

    def test_lines(self, registry):
        f = registry.new_file("main.vxl", "ldi 1, $r0\r\ncall MAIN\n")
        assert f.line_text(0) == "ldi 1, $r0"
        assert f.line_text(1) == "call MAIN"
        assert f.line_text(2) == ""
        assert f.line_text(3) is None
