"""
Source Text Mapping
===================

Source coordinates and the registry that owns source file text.

- **Position**: a zero-based point in a file (offset, row, column)
- **TextRange**: a half-open span between two positions on one line,
  stamped with the file it belongs to
- **FileInfo**: a registered file; shared by reference across every token
  and range that points into it
- **FileRegistry**: owns FileInfo records and hands out stable integer ids

Example
-------
>>> registry = FileRegistry()
>>> f = registry.new_file("main.vxl", "ldi 52, $r0")
>>> r = TextRange(Position(4, 0, 4), Position(6, 0, 6), f)
>>> r.text
'52'
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Positions and Ranges
# =============================================================================

@dataclass(frozen=True, order=True)
class Position:
    """
    A point in source text.

    Attributes:
        offset: Character index from the start of the file (0-indexed)
        row: Line number (0-indexed)
        column: Characters since the last line break (0-indexed)
    """
    offset: int
    row: int
    column: int

    def __str__(self) -> str:
        """Format as 1-based 'line:column' for messages."""
        return f"{self.row + 1}:{self.column + 1}"


@dataclass(frozen=True, eq=False)
class FileInfo:
    """
    A registered source file.

    FileInfo objects are handles: they compare by identity, so two files
    with the same name and contents remain distinct.

    Attributes:
        file_id: Stable index in the owning FileRegistry
        name: Display name (usually the path)
        contents: Full text of the file
    """
    file_id: int
    name: str
    contents: str = field(repr=False)

    def line_text(self, row: int) -> Optional[str]:
        """Return the text of a zero-based line without its line break."""
        lines = self.contents.split("\n")
        if 0 <= row < len(lines):
            return lines[row].rstrip("\r")
        return None


@dataclass(frozen=True)
class TextRange:
    """
    A half-open span of source text.

    Ranges never cross a line break, so column arithmetic on ``start`` and
    ``end`` is always valid.

    Attributes:
        start: First position covered
        end: Position just past the last character covered
        file: The file the range points into
    """
    start: Position
    end: Position
    file: FileInfo

    @property
    def length(self) -> int:
        return self.end.offset - self.start.offset

    @property
    def text(self) -> str:
        """The source text covered by this range."""
        return self.file.contents[self.start.offset:self.end.offset]

    def __str__(self) -> str:
        return f"{self.file.name}:{self.start}-{self.end.column + 1}"


# =============================================================================
# File Registry
# =============================================================================

class FileRegistry:
    """
    Owns the text of every source file handed to the assembler.

    The registry is the single owner of file contents; tokens and errors
    only hold references to the FileInfo handles it issues.

    Usage:
        registry = FileRegistry()
        main = registry.new_file("main.vxl", source_text)
        lib = registry.load(Path("lib.vxl"))
    """

    def __init__(self) -> None:
        self._files: list[FileInfo] = []

    def new_file(self, name: str, contents: str) -> FileInfo:
        """
        Register source text and return its handle.

        Args:
            name: Display name for diagnostics
            contents: Full text of the file

        Returns:
            A FileInfo whose file_id is its index in this registry
        """
        info = FileInfo(len(self._files), name, contents)
        self._files.append(info)
        logger.debug(f"Registered file '{name}' as #{info.file_id} ({len(contents)} chars)")
        return info

    def load(self, path: Path, encoding: str = "utf-8") -> FileInfo:
        """
        Read a file from disk and register it.

        Raises:
            FileNotFoundError: If the path does not exist
            UnicodeDecodeError: If the file is not valid text
        """
        path = Path(path)
        return self.new_file(str(path), path.read_text(encoding=encoding))

    def get(self, file_id: int) -> FileInfo:
        """Return the file registered under ``file_id``."""
        if not 0 <= file_id < len(self._files):
            raise KeyError(f"no file registered with id {file_id}")
        return self._files[file_id]

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[FileInfo]:
        return iter(self._files)
