"""ASCII rendering of a binary tree, one text row per level."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintrees.node import BinaryTreeNode


def _height(tree: BinaryTreeNode) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: List[str], pos: int, char: str) -> None:
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _render(
    tree: Optional[BinaryTreeNode], offset: int, depth: int, rows: List[List[str]]
) -> int:
    """Draw the subtree into rows and return the width it occupies."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    box = f"({tree.value:03d})"
    width = len(box)
    left = _render(tree.left, offset, depth + 1, rows)
    right = _render(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(box):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Optional[BinaryTreeNode]) -> str:
    """Return the tree drawn as text, each row ending in a newline.

    An empty tree gives an empty string.
    """
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(_height(tree) + 1)]
    _render(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[BinaryTreeNode], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_tree(tree))