# python
"""
tests/test_fs_snapshot.py
JSON snapshots and text rendering of rebuilt directory trees.
"""
import json
from pathlib import Path

import pytest

from aoc2022.days.day07 import load_tree
from aoc2022.errors import ParseError
from aoc2022.fs_snapshot import (
    FileSystemSnapshot,
    dumps,
    from_snapshot,
    loads,
    render_text,
    render_tree,
    to_snapshot,
    validate_snapshot,
)
from aoc2022.fs_tree import ROOT_INDEX, directory_sizes

SAMPLE = Path(__file__).resolve().parents[1] / "resources" / "day07.txt"


def _sample_tree():
    return load_tree(SAMPLE.read_text(encoding="utf-8"))


def test_snapshot_shape() -> None:
    snap = to_snapshot(_sample_tree())
    assert snap["type"] == "dir"
    assert snap["name"] == "/"
    names = [child["name"] for child in snap["children"]]
    assert names == sorted(names)
    b = next(child for child in snap["children"] if child["name"] == "b.txt")
    assert b == {"type": "file", "name": "b.txt", "size": 14848514}
    validate_snapshot(snap)


def test_snapshot_reload_keeps_sizes() -> None:
    tree = _sample_tree()
    reloaded = loads(dumps(tree))
    assert directory_sizes(reloaded)[ROOT_INDEX] == directory_sizes(tree)[ROOT_INDEX]
    assert sorted(directory_sizes(reloaded).values()) == sorted(directory_sizes(tree).values())


def test_invalid_snapshots_rejected() -> None:
    with pytest.raises(ParseError):
        from_snapshot({"type": "dir", "name": "/", "children": [{"type": "file", "name": "x", "size": -1}]})
    with pytest.raises(ParseError):
        from_snapshot({"type": "file", "name": "x"})
    with pytest.raises(ParseError):
        from_snapshot({"type": "dir", "name": "/", "extra": True})
    with pytest.raises(ParseError):
        loads("{not json")


def test_render_tree_with_sizes() -> None:
    tree = load_tree("$ cd /\n$ ls\ndir a\n5 z\n$ cd a\n$ ls\n3 f\n")
    out = render_tree(tree, directory_sizes(tree))
    assert out.splitlines() == [
        "- / (dir, size=8)",
        "  - a (dir, size=3)",
        "    - f (file, size=3)",
        "  - z (file, size=5)",
    ]


def test_dumps_is_json() -> None:
    assert json.loads(dumps(_sample_tree()))["type"] == "dir"


def _deep_tree(depth: int):
    lines = ["$ cd /"]
    for _ in range(depth):
        lines += ["$ ls", "dir d", "$ cd d"]
    lines += ["$ ls", "7 f"]
    return load_tree("\n".join(lines))


def test_deep_tree_snapshot_and_render() -> None:
    depth = 2000
    tree = _deep_tree(depth)

    node = to_snapshot(tree)
    levels = 0
    while True:
        dirs = [child for child in node["children"] if child["type"] == "dir"]
        if not dirs:
            break
        node = dirs[0]
        levels += 1
    assert levels == depth
    assert node["children"] == [{"type": "file", "name": "f", "size": 7}]

    lines = render_tree(tree, directory_sizes(tree)).splitlines()
    assert len(lines) == depth + 2
    assert lines[-1] == "  " * (depth + 1) + "- f (file, size=7)"

    index = FileSystemSnapshot.from_tree(tree)
    assert index.get_node(("d",) * depth + ("f",))["size"] == 7


def test_file_system_snapshot_lookups() -> None:
    index = FileSystemSnapshot.from_tree(_sample_tree())
    assert index.get_node(())["name"] == "/"
    assert index.get_node(("a", "e", "i")) == {"type": "file", "name": "i", "size": 584}
    assert [child["name"] for child in index.list_dir(("a",))] == ["e", "f", "g", "h.lst"]
    assert index.list_dir(("b.txt",)) is None
    assert index.get_node(("missing",)) is None
    assert index.list_dir(("missing",)) is None


def test_file_system_snapshot_validates_raw_input() -> None:
    with pytest.raises(ParseError):
        FileSystemSnapshot({"type": "dir", "name": "/", "children": [{"type": "link", "name": "x"}]})
    index = FileSystemSnapshot({"type": "dir", "name": "/", "children": [{"type": "dir", "name": "logs"}]})
    assert index.list_dir(("logs",)) == []


def test_render_text_includes_sizes() -> None:
    first = render_text(_sample_tree()).splitlines()[0]
    assert first == "- / (dir, size=48381165)"
