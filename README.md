# bintree

A small library for building and inspecting binary trees. Each node holds an
integer and knows its parent.

## Installation

```
pip install .
```

It has no dependencies outside the standard library. To run the tests, install
the `test` extra (`pip install ".[test]"`) and run `pytest`.

## Building a tree

```python
from bintree.node import create_node, insert_left, insert_right

root = create_node(None, 98)
create_node(root, 12)        # takes root's free left slot
create_node(root, 402)       # takes root's free right slot
insert_right(root.left, 54)  # 54 becomes 12's right child
insert_right(root, 128)      # 128 goes between 98 and 402
```

`Node` is a dataclass with the fields `value`, `parent`, `left` and `right`.
Nodes compare by identity.

`create_node(parent, value)` makes a node. With no parent (`None`) it returns
a new root. With a parent, it starts at that parent. While the current node
has both children, it moves down: left for an even value, right for an odd
one. The new node then goes into the first free slot of the node it reached,
left before right.

`insert_left(parent, value)` and `insert_right(parent, value)` put a new node
in the chosen slot of `parent`. If that slot already holds a child, the old
child moves down beneath the new node on the same side. Both raise
`ValueError` when `parent` is `None`.

`delete(tree)` detaches a subtree from its parent and clears every link inside
it. It does nothing when given `None`.

`is_leaf(node)` is `True` for a node with no children. `is_root(node)` is
`True` for a node with no parent. Both return `False` for `None`.

## Traversals

```python
from bintree.traverse import preorder, inorder, postorder

list(preorder(root))   # node, left subtree, right subtree
list(inorder(root))    # left subtree, node, right subtree
list(postorder(root))  # left subtree, right subtree, node
```

Each one is a generator of node values. For `None` it yields nothing.

## Measurements

These functions are in `bintree.measure`:

- `height(tree)`: the number of edges on the longest downward path. It is 0 for a leaf or `None`.
- `depth(tree)`: the number of ancestors the node has. It is 0 for a root or `None`.
- `size(tree)`: the number of nodes.
- `leaves(tree)`: the number of nodes with no children.
- `internal_nodes(tree)`: the number of nodes with at least one child.
- `balance(tree)`: the height of the left subtree minus the height of the right subtree. A missing subtree counts as height -1, and `None` has balance 0.
- `is_full(tree)`: `False` for `None`. Otherwise it is `True` when the results of `is_full` for the left and right subtrees agree, with a missing subtree counting as not full. A leaf is therefore always full. This is a looser test than the textbook definition of a full tree.
- `is_perfect(tree)`: `False` for `None` and `True` for a leaf. Otherwise it compares the depths of the node's two children, and those match only when both children are present. This is a looser test than the textbook definition of a perfect tree.
- `sibling(node)`: the other child of the node's parent, or `None`.
- `uncle(node)`: the sibling of the node's parent, or `None`.

## Printing

```python
import sys
from bintree.printer import render, print_tree

text = render(root)             # the diagram as a string
print_tree(root)                # written to standard output
print_tree(root, sys.stderr)    # or to any text stream
```

Each node is drawn as a zero-padded `(nnn)` box, with one line per level.
Dashes and dots link every node to its children. Trailing spaces are removed,
and every line ends with a newline. `render(None)` returns an empty string.

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## What it does not do

`bintree` is a library only and has no command-line program. Its trees are
ordinary binary trees, not search trees. It does not sort values, balance
trees or store them anywhere.