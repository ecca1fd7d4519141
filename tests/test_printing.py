import io

import pytest

from bintrees.node import BinaryTreeNode
from bintrees.printing import format_tree, print_tree


@pytest.fixture
def full_tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(16, root.left)
    root.right = BinaryTreeNode(402, root)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    return root


def test_worked_example(full_tree):
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert format_tree(full_tree) == expected


def test_single_node():
    assert format_tree(BinaryTreeNode(98)) == "(098)\n"


def test_empty_tree():
    assert format_tree(None) == ""


def test_row_count_matches_levels():
    root = BinaryTreeNode(1)
    node = root
    for value in range(2, 6):
        node = node.insert_left(value)
    lines = format_tree(root).splitlines()
    assert len(lines) == 5


def test_every_value_is_drawn(full_tree):
    text = format_tree(full_tree)
    for value in (98, 12, 6, 16, 402, 256, 512):
        assert f"({value:03d})" in text


def test_no_trailing_spaces(full_tree):
    for line in format_tree(full_tree).splitlines():
        assert line == line.rstrip(" ")


def test_negative_value_padding():
    assert format_tree(BinaryTreeNode(-5)) == "(-05)\n"


def test_left_child_connector_points_at_child():
    root = BinaryTreeNode(98)
    root.insert_left(12)
    first, second = format_tree(root).splitlines()
    assert second.startswith("(012)")
    assert first.index(".") == second.index("(") + 2


def test_print_tree_to_file(full_tree):
    buffer = io.StringIO()
    print_tree(full_tree, buffer)
    assert buffer.getvalue() == format_tree(full_tree)


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(BinaryTreeNode(7))
    assert capsys.readouterr().out == "(007)\n"


def test_print_empty_tree_writes_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""