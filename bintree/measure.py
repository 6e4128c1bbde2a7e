"""Measurements and relationship queries on binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def _walk(tree: Node | None) -> Iterator[Node]:
    """Yield every node of the subtree rooted at ``tree``."""
    pending = [tree] if tree is not None else []
    while pending:
        node = pending.pop()
        yield node
        pending.extend(child for child in (node.right, node.left) if child is not None)


def _edge_height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path, -1 for no tree."""
    if tree is None:
        return -1
    deepest = 0
    pending = [(tree, 0)]
    while pending:
        node, level = pending.pop()
        deepest = max(deepest, level)
        pending.extend(
            (child, level + 1) for child in (node.left, node.right) if child is not None
        )
    return deepest


def height(tree: Node | None) -> int:
    """Return the height of ``tree`` in edges; 0 for a leaf or no tree."""
    return max(_edge_height(tree), 0)


def depth(tree: Node | None) -> int:
    """Return how many ancestors ``tree`` has; 0 for a root or no tree."""
    count = 0
    if tree is None:
        return count
    node = tree.parent
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in ``tree``."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes in ``tree`` that have no children."""
    return sum(1 for node in _walk(tree) if node.left is None and node.right is None)


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes in ``tree`` that have at least one child."""
    return sum(
        1 for node in _walk(tree) if node.left is not None or node.right is not None
    )


def balance(tree: Node | None) -> int:
    """Return the balance factor: left subtree height minus right subtree height.

    An absent subtree has height -1; no tree at all has balance 0.
    """
    if tree is None:
        return 0
    return _edge_height(tree.left) - _edge_height(tree.right)


def is_full(tree: Node | None) -> bool:
    """Check whether ``tree`` is full.

    No tree is not full.  A node is judged full when the verdicts for its
    left and right subtrees agree, an absent subtree counting as not full;
    a leaf is therefore always full.
    """
    if tree is None:
        return False
    return is_full(tree.left) == is_full(tree.right)


def is_perfect(tree: Node | None) -> bool:
    """Check whether ``tree`` is perfect.

    A leaf is perfect.  Otherwise the node's two children are compared by
    depth, which only matches when both children are present.
    """
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    return depth(tree.left) == depth(tree.right)


def sibling(node: Node | None) -> Node | None:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if node is parent.left else parent.left


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    grandparent = parent.parent
    if grandparent is None:
        return None
    if grandparent.left is not None and grandparent.left is not parent:
        return grandparent.left
    if grandparent.right is not None and grandparent.right is not parent:
        return grandparent.right
    return None