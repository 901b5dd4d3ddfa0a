"""Filesystem snapshot helpers: JSON-compatible dumps of a FileTree and back."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import jsonschema

from .errors import ParseError
from .fs_tree import ROOT_INDEX, FileTree, directory_sizes

logger = logging.getLogger(__name__)

FS_NODE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "enum": ["dir", "file"]},
        "name": {"type": "string"},
        "children": {
            "type": "array",
            "items": {"$ref": "#"},
        },
        "size": {"type": "integer", "minimum": 0},
    },
    "required": ["type", "name"],
    "additionalProperties": False,
}

FS_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    **FS_NODE_SCHEMA,
}


def to_snapshot(tree: FileTree, index: int = ROOT_INDEX) -> Dict[str, Any]:
    """
    Nested {"type", "name", "children"} dict for the directory at `index`.
    Children are sorted by name so dumps are stable.
    """
    nodes: Dict[int, Dict[str, Any]] = {}
    stack = [index]
    while stack:
        current = stack.pop()
        directory = tree[current]
        children: List[Dict[str, Any]] = [
            {"type": "file", "name": f.name, "size": f.size} for f in directory.files.values()
        ]
        nodes[current] = {"type": "dir", "name": directory.name, "children": children}
        if current != index:
            nodes[directory.parent]["children"].append(nodes[current])
        stack.extend(directory.children.values())
    for node in nodes.values():
        node["children"].sort(key=lambda child: child["name"])
    return nodes[index]


def validate_snapshot(obj: Any) -> Dict[str, Any]:
    try:
        jsonschema.validate(instance=obj, schema=FS_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ParseError(f"invalid filesystem snapshot: {e.message}") from e
    if obj.get("type") != "dir":
        raise ParseError("snapshot root must be a directory")
    return obj


def from_snapshot(obj: Mapping[str, Any]) -> FileTree:
    """
    Rebuild a FileTree from a snapshot produced by to_snapshot (or a
    hand-written fs.json of the same shape).
    """
    validate_snapshot(obj)
    tree = FileTree(obj["name"])
    _fill(tree, ROOT_INDEX, obj)
    logger.debug("loaded snapshot with %d directories", len(tree))
    return tree


def _fill(tree: FileTree, index: int, node: Mapping[str, Any]) -> None:
    stack = [(index, node)]
    while stack:
        parent, current = stack.pop()
        for child in current.get("children", []):
            if child["type"] == "dir":
                stack.append((tree.mkdir(parent, child["name"]), child))
            else:
                tree.add_file(parent, child["name"], child.get("size", 0))


def dumps(tree: FileTree, indent: Optional[int] = 2) -> str:
    return json.dumps(to_snapshot(tree), indent=indent)


def loads(text: str) -> FileTree:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"snapshot is not valid JSON: {e}") from e
    return from_snapshot(obj)


def render_tree(tree: FileTree, sizes: Optional[Mapping[int, int]] = None) -> str:
    """
    Indented listing in the puzzle's own style:

        - / (dir, size=48381165)
          - a (dir, size=94853)
            - f (file, size=29116)
    """
    lines: List[str] = []
    # (depth, name, directory index or None for a file, file size)
    stack: List[Tuple[int, str, Optional[int], int]] = [(0, tree.root.name, ROOT_INDEX, 0)]
    while stack:
        depth, name, index, size = stack.pop()
        pad = "  " * depth
        if index is None:
            lines.append(f"{pad}- {name} (file, size={size})")
            continue
        if sizes is not None:
            lines.append(f"{pad}- {name} (dir, size={sizes[index]})")
        else:
            lines.append(f"{pad}- {name} (dir)")
        directory = tree[index]
        entries = [(depth + 1, n, child, 0) for n, child in directory.children.items()]
        entries += [(depth + 1, n, None, f.size) for n, f in directory.files.items()]
        # popped last-in first, so push in reverse name order
        stack.extend(sorted(entries, key=lambda e: e[1], reverse=True))
    return "\n".join(lines)


def render_text(tree: FileTree) -> str:
    return render_tree(tree, directory_sizes(tree))


class FileSystemSnapshot:
    """
    In-memory snapshot tree with fast lookups by path tuple. The root is ().
    """

    def __init__(self, root: Mapping[str, Any], validate: bool = True):
        self.root: Dict[str, Any] = dict(root)
        if validate:
            validate_snapshot(self.root)
        self._index: Dict[Tuple[str, ...], Dict[str, Any]] = {}
        self._build_index()

    @classmethod
    def from_tree(cls, tree: FileTree) -> "FileSystemSnapshot":
        return cls(to_snapshot(tree), validate=False)

    def _build_index(self) -> None:
        stack: List[Tuple[Tuple[str, ...], Dict[str, Any]]] = [((), self.root)]
        while stack:
            rel_path, node = stack.pop()
            self._index[rel_path] = node
            if node.get("type") == "dir":
                for child in node.get("children", []):
                    stack.append((rel_path + (child["name"],), child))

    def get_node(self, rel_path: Tuple[str, ...]) -> Optional[Dict[str, Any]]:
        return self._index.get(tuple(rel_path))

    def list_dir(self, rel_path: Tuple[str, ...]) -> Optional[List[Dict[str, Any]]]:
        node = self.get_node(rel_path)
        if not node or node.get("type") != "dir":
            return None
        return list(node.get("children", []))

