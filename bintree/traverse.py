"""Depth-first traversals of a binary tree, yielding node values."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    pending = [tree] if tree is not None else []
    while pending:
        node = pending.pop()
        yield node.value
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    pending: list[Node] = []
    node = tree
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    if tree is None:
        return
    pending = [(tree, False)]
    while pending:
        node, expanded = pending.pop()
        if expanded:
            yield node.value
            continue
        pending.append((node, True))
        if node.right is not None:
            pending.append((node.right, False))
        if node.left is not None:
            pending.append((node.left, False))