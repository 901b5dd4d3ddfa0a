# python
"""
aoc2022/days/day07.py
No Space Left On Device: rebuild the directory tree from a terminal
transcript and reason about directory sizes.
"""
import logging

from ..errors import StructuralError
from ..fs_tree import FileTree, aggregate, build_tree, directory_sizes, ROOT_INDEX
from ..inputs import read_input
from ..transcript import parse_transcript

logger = logging.getLogger(__name__)

SIZE_LIMIT = 100_000
DISK_CAPACITY = 70_000_000
SPACE_REQUIRED = 30_000_000


def load_tree(text: str) -> FileTree:
    return build_tree(parse_transcript(text))


def small_directories_total(tree: FileTree, limit: int = SIZE_LIMIT) -> int:
    """Sum of every directory size that is at most `limit`."""
    return aggregate(tree, lambda size: size <= limit)


def smallest_to_free(
    tree: FileTree,
    capacity: int = DISK_CAPACITY,
    required: int = SPACE_REQUIRED,
) -> int:
    """
    Size of the smallest directory whose removal leaves at least `required`
    free space on a disk of `capacity`.
    """
    sizes = directory_sizes(tree)
    used = sizes[ROOT_INDEX]
    need = required - (capacity - used)
    if need <= 0:
        logger.info("already %d free, nothing to delete", capacity - used)
        return 0
    candidates = [size for size in sizes.values() if size >= need]
    if not candidates:
        raise StructuralError(f"no directory frees {need} bytes")
    return min(candidates)


def part1(file_path) -> int:
    return small_directories_total(load_tree(read_input(file_path)))


def part2(file_path) -> int:
    return smallest_to_free(load_tree(read_input(file_path)))
