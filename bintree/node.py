"""Binary tree nodes and the operations that build and dismantle trees."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its neighbours."""

    value: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)


def create_node(parent: Node | None, value: int) -> Node:
    """Create a node and, if a parent is given, attach it below that parent.

    Starting at ``parent``, while the current node has both children the walk
    descends left for an even value and right for an odd one.  The new node
    takes the first free slot of the node reached, left before right.  Without
    a parent the new node is the root of a tree of its own.
    """
    node = Node(value)
    if parent is None:
        return node

    current = parent
    while current.left is not None and current.right is not None:
        current = current.left if value % 2 == 0 else current.right

    if current.left is None:
        current.left = node
    else:
        current.right = node
    node.parent = current
    return node


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("parent node is required")
    node = Node(value, parent=parent)
    if parent.left is not None:
        node.left = parent.left
        parent.left.parent = node
    parent.left = node
    return node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("parent node is required")
    node = Node(value, parent=parent)
    if parent.right is not None:
        node.right = parent.right
        parent.right.parent = node
    parent.right = node
    return node


def delete(tree: Node | None) -> None:
    """Dismantle the subtree rooted at ``tree``.

    The subtree is detached from its parent and every link inside it is
    cleared.  Passing ``None`` does nothing.
    """
    if tree is None:
        return

    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None

    pending = [tree]
    while pending:
        node = pending.pop()
        pending.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None