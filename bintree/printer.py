"""Text rendering of binary trees as levelled ASCII diagrams."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.measure import height
from bintree.node import Node


def _put(row: list[str], column: int, char: str) -> None:
    if column < 0:
        return
    if column >= len(row):
        row.extend(" " * (column - len(row) + 1))
    row[column] = char


def _draw(node: Node | None, offset: int, level: int, rows: list[list[str]]) -> int:
    """Place ``node`` and its subtree on the grid; return the width used."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, level + 1, rows)
    right = _draw(node.right, offset + left + width, level + 1, rows)
    for index, char in enumerate(label):
        _put(rows[level], offset + left + index, char)
    if level:
        above = rows[level - 1]
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for column in range(start, start + count):
            _put(above, column, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return a diagram of ``tree``, one text line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the diagram of ``tree`` to ``file``, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))