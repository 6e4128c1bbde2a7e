import pytest

from bintree.node import (
    Node,
    create_node,
    delete,
    insert_left,
    insert_right,
    is_leaf,
    is_root,
)


def _sample_tree():
    root = create_node(None, 98)
    create_node(root, 12)
    create_node(root, 402)
    return root


def test_create_root_has_no_links():
    root = create_node(None, 98)
    assert root.value == 98
    assert root.parent is None
    assert root.left is None and root.right is None


def test_create_fills_left_then_right():
    root = create_node(None, 98)
    first = create_node(root, 12)
    second = create_node(root, 402)
    assert root.left is first
    assert root.right is second
    assert first.parent is root and second.parent is root


def test_create_descends_by_parity_when_full():
    root = _sample_tree()
    even = create_node(root, 6)
    odd = create_node(root, 7)
    assert root.left.left is even
    assert even.parent is root.left
    assert root.right.left is odd
    assert odd.parent is root.right


def test_create_with_explicit_subtree_parent():
    root = _sample_tree()
    child = create_node(root.left, 16)
    assert root.left.left is child
    assert child.parent is root.left


def test_create_negative_odd_goes_right():
    root = _sample_tree()
    node = create_node(root, -3)
    assert root.right.left is node


def test_insert_left_into_empty_slot():
    root = create_node(None, 98)
    node = insert_left(root, 54)
    assert root.left is node
    assert node.parent is root
    assert node.left is None


def test_insert_left_pushes_existing_child_down():
    root = _sample_tree()
    old = root.left
    node = insert_left(root, 54)
    assert root.left is node
    assert node.left is old
    assert old.parent is node
    assert node.parent is root


def test_insert_right_pushes_existing_child_down():
    root = _sample_tree()
    old = root.right
    node = insert_right(root, 128)
    assert root.right is node
    assert node.right is old
    assert old.parent is node
    assert node.left is None


def test_insert_right_into_empty_slot():
    root = _sample_tree()
    node = insert_right(root.left, 54)
    assert root.left.right is node
    assert node.parent is root.left


@pytest.mark.parametrize("insert", [insert_left, insert_right])
def test_insert_without_parent_raises(insert):
    with pytest.raises(ValueError):
        insert(None, 1)


def test_delete_detaches_subtree():
    root = _sample_tree()
    left = root.left
    grandchild = create_node(left, 6)
    delete(left)
    assert root.left is None
    assert root.right is not None and root.right.value == 402
    assert left.parent is None and left.left is None
    assert grandchild.parent is None


def test_delete_whole_tree_clears_links():
    root = _sample_tree()
    right = root.right
    delete(root)
    assert root.left is None and root.right is None
    assert right.parent is None


def test_delete_none_is_noop():
    root = _sample_tree()
    delete(None)
    assert root.left.value == 12


def test_is_leaf():
    root = _sample_tree()
    assert is_leaf(root.left) is True
    assert is_leaf(root) is False
    assert is_leaf(None) is False


def test_is_root():
    root = _sample_tree()
    assert is_root(root) is True
    assert is_root(root.right) is False
    assert is_root(None) is False


def test_node_defaults():
    node = Node(5)
    assert node.value == 5
    assert (node.parent, node.left, node.right) == (None, None, None)