# python
"""
tests/test_fs_tree.py
Tree building and size aggregation over parsed transcripts.
"""
from pathlib import Path

import pytest

from aoc2022.errors import StructuralError
from aoc2022.fs_tree import (
    ROOT_INDEX,
    FileTree,
    aggregate,
    apply_command,
    build_tree,
    directory_sizes,
)
from aoc2022.transcript import ChangeDirectory, DirectoryEntry, FileEntry, parse_transcript

SAMPLE = Path(__file__).resolve().parents[1] / "resources" / "day07.txt"


def _build(lines):
    return build_tree(parse_transcript("\n".join(lines)))


def test_small_scenario_with_threshold() -> None:
    tree = _build(["$ cd /", "$ ls", "dir a", "100 f.txt", "$ cd a", "$ ls", "50 g.txt"])
    sizes = directory_sizes(tree)
    assert sizes[ROOT_INDEX] == 150
    assert sizes[tree.find(["a"])] == 50
    assert aggregate(tree, lambda size: size <= 200) == 200


def test_root_total_equals_sum_of_all_files() -> None:
    tree = build_tree(parse_transcript(SAMPLE.read_text(encoding="utf-8")))
    assert directory_sizes(tree)[ROOT_INDEX] == sum(f.size for f in tree.iter_files())
    assert directory_sizes(tree)[ROOT_INDEX] == 48381165


def test_repeated_dir_entry_is_idempotent() -> None:
    once = _build(["$ cd /", "$ ls", "dir a", "$ cd a", "$ ls", "10 x"])
    twice = _build(["$ cd /", "$ ls", "dir a", "$ cd a", "$ ls", "10 x", "$ cd /", "$ ls", "dir a"])
    assert len(once) == len(twice)
    assert directory_sizes(once)[ROOT_INDEX] == directory_sizes(twice)[ROOT_INDEX] == 10


def test_root_only_listing() -> None:
    tree = _build(["$ cd /", "$ ls", "10 a", "20 b", "30 c"])
    assert len(tree) == 1
    assert aggregate(tree, lambda size: True) == 60


def test_cd_parent_at_root_fails() -> None:
    with pytest.raises(StructuralError):
        _build(["$ cd /", "$ cd .."])


def test_cd_into_unlisted_child_fails() -> None:
    with pytest.raises(StructuralError):
        _build(["$ cd /", "$ ls", "dir a", "$ cd b"])


def test_file_attaches_to_cursor_not_sibling() -> None:
    tree = _build(["$ cd /", "$ ls", "dir a", "dir b", "$ cd b", "$ ls", "7 only-in-b"])
    a = tree[tree.find(["a"])]
    b = tree[tree.find(["b"])]
    assert a.files == {}
    assert b.files["only-in-b"].size == 7


def test_file_entry_overwrites() -> None:
    tree = _build(["$ cd /", "$ ls", "5 f", "$ ls", "9 f"])
    assert tree.root.files["f"].size == 9
    assert directory_sizes(tree)[ROOT_INDEX] == 9


def test_apply_command_returns_new_cursor() -> None:
    tree = FileTree()
    cursor = apply_command(tree, ROOT_INDEX, DirectoryEntry("a"))
    assert cursor == ROOT_INDEX
    cursor = apply_command(tree, cursor, ChangeDirectory("a"))
    assert tree[cursor].name == "a"
    assert tree[cursor].parent == ROOT_INDEX
    assert apply_command(tree, cursor, FileEntry(3, "x")) == cursor
    assert apply_command(tree, cursor, ChangeDirectory("..")) == ROOT_INDEX
    assert apply_command(tree, cursor, ChangeDirectory("/")) == ROOT_INDEX


def test_path_of_and_find() -> None:
    tree = _build(["$ cd /", "$ ls", "dir a", "$ cd a", "$ ls", "dir e"])
    e = tree.find(["a", "e"])
    assert tree.path_of(e) == ("a", "e")
    assert tree.path_of(ROOT_INDEX) == ()
    assert tree.find(["missing"]) is None


def _deep(depth: int) -> str:
    lines = ["$ cd /"]
    for _ in range(depth):
        lines += ["$ ls", "dir d", "$ cd d"]
    lines += ["$ ls", "7 f"]
    return "\n".join(lines)


def test_deeply_nested_transcript_sizes() -> None:
    depth = 2000
    tree = build_tree(parse_transcript(_deep(depth)))
    assert len(tree) == depth + 1
    sizes = directory_sizes(tree)
    assert sizes[ROOT_INDEX] == 7
    assert set(sizes.values()) == {7}
    assert aggregate(tree, lambda size: size <= 100_000) == 7 * (depth + 1)
