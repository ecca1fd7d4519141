"""Binary tree node with parent links and structural helpers."""

from __future__ import annotations

from typing import Optional


class BinaryTreeNode:
    """A node of a binary tree holding an integer value.

    The constructor only records the parent; attaching the node as a child
    is up to the caller, as with ``root.left = BinaryTreeNode(12, root)``.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[BinaryTreeNode] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[BinaryTreeNode] = None
        self.right: Optional[BinaryTreeNode] = None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; a previous left child becomes its left child."""
        node = BinaryTreeNode(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; a previous right child becomes its right child."""
        node = BinaryTreeNode(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[BinaryTreeNode]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        return parent.left

    def uncle(self) -> Optional[BinaryTreeNode]:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left


def delete(tree: Optional[BinaryTreeNode]) -> None:
    """Dismantle a whole tree (or subtree), breaking every link it holds.

    If the tree hangs under a parent, it is detached from that parent.
    """
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                stack.append(child)
        node.left = None
        node.right = None
        node.parent = None