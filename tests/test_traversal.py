import pytest

from bintrees.node import BinaryTreeNode
from bintrees.traversal import inorder, postorder, preorder


@pytest.fixture
def tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(56, root.left)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    return root


def test_preorder(tree):
    assert list(preorder(tree)) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder(tree):
    assert list(inorder(tree)) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder(tree):
    assert list(postorder(tree)) == [6, 56, 12, 256, 512, 402, 98]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_single_node(walk):
    assert list(walk(BinaryTreeNode(5))) == [5]


def test_orders_visit_same_values(tree):
    assert sorted(preorder(tree)) == sorted(inorder(tree)) == sorted(postorder(tree))


def test_root_positions(tree):
    assert next(preorder(tree)) == tree.value
    assert list(postorder(tree))[-1] == tree.value


def test_chain_of_left_inserts():
    root = BinaryTreeNode(3)
    root.insert_left(2)
    root.insert_left(1)
    # each insert pushes the previous left child further down
    assert list(inorder(root)) == [2, 1, 3]
    assert list(preorder(root)) == [3, 1, 2]