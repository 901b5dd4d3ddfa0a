# python
"""
aoc2022/transcript.py
Classify lines of a terminal transcript (`$ cd`, `$ ls`, `dir`, file sizes)
into tagged commands for the tree builder.
"""
import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .errors import ParseError

ROOT_MARKER = "/"
PARENT_MARKER = ".."

_CD_RE = re.compile(r"\$ cd (\S+)")
_LS_RE = re.compile(r"\$ ls")
_DIR_RE = re.compile(r"dir (\S+)")
_FILE_RE = re.compile(r"(\d+) (\S+)")


@dataclass(frozen=True)
class ChangeDirectory:
    target: str

    @property
    def is_root(self) -> bool:
        return self.target == ROOT_MARKER

    @property
    def is_parent(self) -> bool:
        return self.target == PARENT_MARKER


@dataclass(frozen=True)
class ListDirectory:
    pass


@dataclass(frozen=True)
class DirectoryEntry:
    name: str


@dataclass(frozen=True)
class FileEntry:
    size: int
    name: str


Command = Union[ChangeDirectory, ListDirectory, DirectoryEntry, FileEntry]


def parse_line(line: str, line_no: Optional[int] = None) -> Command:
    """
    Classify a single transcript line. Raises ParseError for anything
    that is not one of the four known shapes.
    """
    m = _CD_RE.fullmatch(line)
    if m:
        return ChangeDirectory(m.group(1))
    if _LS_RE.fullmatch(line):
        return ListDirectory()
    m = _DIR_RE.fullmatch(line)
    if m:
        return DirectoryEntry(m.group(1))
    m = _FILE_RE.fullmatch(line)
    if m:
        return FileEntry(int(m.group(1)), m.group(2))
    raise ParseError(f"unrecognized transcript line: {line!r}", line=line, line_no=line_no)


def parse_transcript(text: str) -> Iterator[Command]:
    """
    Yield one command per line, in order. A final line break does not
    start another line, but blank lines inside the transcript are errors.
    """
    for line_no, line in enumerate(text.splitlines(), start=1):
        yield parse_line(line, line_no=line_no)
