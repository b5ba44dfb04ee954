"""
Shared pytest fixtures for the VOXL assembler tests.
"""

import pytest

from voxl_asm.text_mapping import FileRegistry


@pytest.fixture
def registry() -> FileRegistry:
    """A fresh, empty file registry."""
    return FileRegistry()


@pytest.fixture
def source_file(tmp_path):
    """Write a VOXL source file under tmp_path and return its path."""
    def _write(text: str, name: str = "main.vxl"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
