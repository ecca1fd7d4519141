"""Measurements and shape checks over binary trees."""

from __future__ import annotations

from typing import Optional

from bintrees.node import BinaryTreeNode


def height(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of edges on the longest downward path (0 if empty)."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def depth(node: Optional[BinaryTreeNode]) -> int:
    """Return the number of edges from the node up to its root (0 if None)."""
    count = 0
    if node is None:
        return count
    while node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def nodes(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 1 if tree.left is not None or tree.right is not None else 0
    return own + nodes(tree.left) + nodes(tree.right)


def _levels(tree: Optional[BinaryTreeNode]) -> int:
    """Height counted in nodes: 0 for an empty tree, 1 for a single node."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def balance(tree: Optional[BinaryTreeNode]) -> int:
    """Return the left subtree height minus the right subtree height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _all_leaves_at(tree: Optional[BinaryTreeNode], leaf_depth: int) -> bool:
    if tree is None:
        return True
    if tree.left is None and tree.right is None:
        return depth(tree) == leaf_depth
    if tree.left is None or tree.right is None:
        return False
    return _all_leaves_at(tree.left, leaf_depth) and _all_leaves_at(
        tree.right, leaf_depth
    )


def is_perfect(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if the tree is full and all its leaves share one depth."""
    if tree is None:
        return False
    leftmost = tree
    while leftmost.left is not None:
        leftmost = leftmost.left
    return _all_leaves_at(tree, depth(leftmost))