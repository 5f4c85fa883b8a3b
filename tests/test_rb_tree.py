import pytest

from algostructs.rb_tree import (
    Color,
    RBNode,
    get_grandparent,
    get_parent,
    get_uncle,
    in_order,
    insert_rb,
)


def build(values):
    root = None
    for value in values:
        root = insert_rb(root, value)
    return root


def black_height(node):
    """Check red-black invariants below ``node`` and return its black height."""
    if node is None:
        return 1
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            if node.color is Color.RED:
                assert child.color is Color.BLACK
    left = black_height(node.left)
    right = black_height(node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def test_first_insert_is_black_root():
    root = insert_rb(None, 10)
    assert root.data == 10
    assert root.color is Color.BLACK
    assert root.parent is None


@pytest.mark.parametrize(
    "values",
    [[10, 20, 30], [30, 20, 10], [30, 10, 20], [10, 30, 20]],
)
def test_three_inserts_rotate_to_middle(values):
    root = build(values)
    assert root.data == 20
    assert root.color is Color.BLACK
    assert root.left.data == 10
    assert root.right.data == 30
    assert root.left.color is Color.RED
    assert root.right.color is Color.RED


def test_red_uncle_recolours():
    root = build([20, 10, 30, 5])
    assert root.data == 20
    assert root.left.color is Color.BLACK
    assert root.right.color is Color.BLACK
    assert root.left.left.color is Color.RED


def test_duplicates_are_ignored():
    root = build([5, 3, 5, 3, 8])
    assert list(in_order(root)) == [3, 5, 8]


@pytest.mark.parametrize(
    "values",
    [
        list(range(50)),
        list(range(50, 0, -1)),
        [41, 38, 31, 12, 19, 8, 45, 2, 60, 55, 1, 99, 70, 33],
    ],
)
def test_invariants_hold(values):
    root = build(values)
    assert list(in_order(root)) == sorted(set(values))
    assert root.color is Color.BLACK
    assert root.parent is None
    assert black_height(root) >= 1


def test_relatives():
    root = build([20, 10, 30, 5])
    leaf = root.left.left
    assert get_parent(leaf) is root.left
    assert get_grandparent(leaf) is root
    assert get_uncle(leaf) is root.right


def test_relatives_of_root_are_missing():
    root = build([1])
    assert get_parent(root) is None
    assert get_grandparent(root) is None
    assert get_uncle(root) is None
    assert get_parent(None) is None


def test_node_defaults_to_black():
    node = RBNode(7)
    assert node.color is Color.BLACK
    assert list(in_order(node)) == [7]