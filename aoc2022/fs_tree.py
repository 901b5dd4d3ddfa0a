# python
"""
aoc2022/fs_tree.py
Arena-backed directory tree rebuilt from a transcript, plus the post-order
size aggregation used by day 7.

Directories live in a flat list and refer to each other by index, so the
parent back-reference is just an int and never owns anything.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import StructuralError
from .transcript import (
    ChangeDirectory,
    Command,
    DirectoryEntry,
    FileEntry,
    ListDirectory,
    ROOT_MARKER,
)

logger = logging.getLogger(__name__)

ROOT_INDEX = 0


@dataclass(frozen=True)
class File:
    name: str
    size: int


@dataclass
class Directory:
    name: str
    parent: Optional[int] = None
    children: Dict[str, int] = field(default_factory=dict)
    files: Dict[str, File] = field(default_factory=dict)


class FileTree:
    """
    Flat arena of directories. Index 0 is always the root.
    """

    def __init__(self, root_name: str = ROOT_MARKER):
        self.directories: List[Directory] = [Directory(root_name)]

    @property
    def root(self) -> Directory:
        return self.directories[ROOT_INDEX]

    def __getitem__(self, index: int) -> Directory:
        return self.directories[index]

    def __len__(self) -> int:
        return len(self.directories)

    def mkdir(self, parent: int, name: str) -> int:
        """Return the index of child `name` under `parent`, creating it if absent."""
        existing = self.directories[parent].children.get(name)
        if existing is not None:
            return existing
        index = len(self.directories)
        self.directories.append(Directory(name, parent=parent))
        self.directories[parent].children[name] = index
        return index

    def add_file(self, parent: int, name: str, size: int) -> None:
        self.directories[parent].files[name] = File(name, size)

    def path_of(self, index: int) -> Tuple[str, ...]:
        """Names from just below the root down to `index`; the root is ()."""
        parts: List[str] = []
        while index != ROOT_INDEX:
            directory = self.directories[index]
            parts.append(directory.name)
            index = directory.parent
        return tuple(reversed(parts))

    def find(self, parts: Sequence[str]) -> Optional[int]:
        index = ROOT_INDEX
        for name in parts:
            child = self.directories[index].children.get(name)
            if child is None:
                return None
            index = child
        return index

    def iter_files(self) -> Iterable[File]:
        for directory in self.directories:
            yield from directory.files.values()


def apply_command(tree: FileTree, cursor: int, command: Command) -> int:
    """
    Apply one transcript command to `tree` with the cursor at `cursor` and
    return the new cursor position.
    """
    if isinstance(command, ChangeDirectory):
        if command.is_root:
            return ROOT_INDEX
        current = tree[cursor]
        if command.is_parent:
            if current.parent is None:
                raise StructuralError("cannot cd .. from the root directory")
            return current.parent
        child = current.children.get(command.target)
        if child is None:
            path = "/" + "/".join(tree.path_of(cursor))
            raise StructuralError(f"no directory {command.target!r} under {path}")
        return child
    if isinstance(command, ListDirectory):
        return cursor
    if isinstance(command, DirectoryEntry):
        tree.mkdir(cursor, command.name)
        return cursor
    if isinstance(command, FileEntry):
        tree.add_file(cursor, command.name, command.size)
        return cursor
    raise TypeError(f"unsupported command: {command!r}")


def build_tree(commands: Iterable[Command]) -> FileTree:
    tree = FileTree()
    cursor = ROOT_INDEX
    count = 0
    for command in commands:
        cursor = apply_command(tree, cursor, command)
        count += 1
    logger.debug("built tree with %d directories from %d commands", len(tree), count)
    return tree


def directory_sizes(tree: FileTree) -> Dict[int, int]:
    """
    Cumulative size of every directory, keyed by arena index, computed in
    post order (children before parents).

    mkdir only ever appends, so a child's index is always greater than its
    parent's and walking the arena backwards visits children first.
    """
    sizes: Dict[int, int] = {}
    for index in reversed(range(len(tree))):
        directory = tree[index]
        sizes[index] = sizes.get(index, 0) + sum(f.size for f in directory.files.values())
        if directory.parent is not None:
            sizes[directory.parent] = sizes.get(directory.parent, 0) + sizes[index]
    return sizes


def aggregate(tree: FileTree, predicate: Callable[[int], bool]) -> int:
    """Sum every directory size (root included) for which predicate(size) holds."""
    return sum(size for size in directory_sizes(tree).values() if predicate(size))
