"""Reading files whole, by lines, and splitting strings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class FileContents:
    """A file's text split into pieces."""

    lines: list[str] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        return len(self.lines)


def read_file(path: PathLike) -> str:
    """Return the whole text of ``path`` with line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_split(path: PathLike, delim: str) -> FileContents:
    """Read ``path`` and split its text at every ``delim``."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    text = read_file(path)
    pieces = text.split(delim)
    if pieces and pieces[-1] == "":
        pieces.pop()
    return FileContents(pieces)


def split(line: str, delim: str) -> list[str]:
    """Split ``line`` at each ``delim`` character, dropping an empty tail."""
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    pieces = line.split(delim)
    if pieces[-1] == "":
        pieces.pop()
    return pieces


class _LastFileCache:
    """Remembers the lines of the most recently requested file."""

    def __init__(self) -> None:
        self.path: Optional[str] = None
        self.contents = FileContents()

    def lines_of(self, path: PathLike) -> list[str]:
        key = os.fspath(path)
        if key != self.path:
            self.contents = read_split(key, "\n")
            self.path = key
        return self.contents.lines


_cache = _LastFileCache()


def getline_file(path: PathLike, line_number: int) -> str:
    """Return line ``line_number`` (from 0) of ``path``.

    The lines of the last file asked for are kept, so repeated calls on
    the same file read it only once.
    """
    if line_number < 0:
        raise IndexError("line number must not be negative")
    return _cache.lines_of(path)[line_number]