# bintrees

A small library for binary trees of integers whose nodes know their parent.
It covers building trees node by node, walking them in pre-, in- and
post-order, measuring them (height, depth, size, leaves, inner nodes,
balance, fullness, perfection) and drawing them as ASCII art.

It is a library only: there is no command-line program, and trees are held
in memory, with no saving or loading.

## Installation

```
pip install .
```

## Building a tree

```python
from bintrees.node import BinaryTreeNode

root = BinaryTreeNode(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)
```

`BinaryTreeNode(value, parent=None)` makes a node that records its parent
but is not attached to it; attach it yourself, as in
`root.left = BinaryTreeNode(12, root)`. The attributes are `value`,
`parent`, `left` and `right`.

`insert_left` and `insert_right` add a new child to a node and return it.
If the node already has a child on that side, the old child moves down and
becomes the matching child of the new node.

Nodes can answer questions about where they sit in the tree:

```python
left.is_leaf()      # False
root.is_root()      # True
left.sibling()      # the 402 node
left.right.uncle()  # the 402 node
```

`sibling()` and `uncle()` return `None` when there is no such node.

`bintrees.node.delete(tree)` takes a tree or subtree apart, clearing every
link in it and detaching it from its parent, if it has one. `delete(None)`
does nothing.

## Traversals

```python
from bintrees.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 402, 128]
list(inorder(root))    # [12, 54, 98, 402, 128]
list(postorder(root))  # [54, 12, 128, 402, 98]
```

Each traversal is a generator of node values. An empty tree (`None`) yields
nothing.

## Measures

```python
from bintrees import measures

measures.height(root)       # 2
measures.depth(left.right)  # 2
measures.size(root)         # 5
measures.leaves(root)       # 2
measures.nodes(root)        # 3
measures.balance(root)      # 0
measures.is_full(root)      # False
measures.is_perfect(root)   # False
```

- `height` counts edges on the longest downward path; a single node has
  height 0.
- `depth` counts edges from a node up to its root.
- `size` counts all nodes, `leaves` those without children, `nodes` those
  with at least one child.
- `balance` is the height of the left subtree minus that of the right.
- `is_full` is true when every node has zero or two children; `is_perfect`
  when the tree is full and all leaves lie at the same depth.

Given `None`, the counting functions return 0 and `is_full` and
`is_perfect` return `False`.

## Printing

```python
from bintrees.printing import format_tree, print_tree

print_tree(root)
```

```
  .-------(098)--.
(012)--.       (402)--.
     (054)          (128)
```

Each value is shown zero-padded to three digits in parentheses, one row per
level. `format_tree` returns the same drawing as a string, each row ending
in a newline (an empty string for `None`). `print_tree` writes it to
standard output, or to the text stream given as its `file` argument.