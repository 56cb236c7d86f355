"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .node import Node


def _put(rows: list[list[str]], level: int, pos: int, char: str) -> None:
    row = rows[level]
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _layout(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, level + 1, rows)
    right = _layout(node.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows, level, offset + left + i, char)
    if level:
        if is_left:
            for i in range(width + right):
                _put(rows, level - 1, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(rows, level - 1, offset - width // 2 + i, "-")
        _put(rows, level - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, each line ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row).ljust(2)
        lines.append(text[:2] + text[2:].rstrip(" ") + "\n")
    return "".join(lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to a file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))