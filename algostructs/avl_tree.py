"""Self-balancing AVL binary search trees built from linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class AVLNode:
    """A tree node that caches the height of the subtree it roots.

    A leaf has height 0; a missing child counts as height -1.
    """

    data: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 0


def _cached_height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


def _cached_balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _cached_height(node.left) - _cached_height(node.right)


def compute_height(node: Optional[AVLNode]) -> None:
    """Refresh ``node.height`` from the cached heights of its children."""
    if node is None:
        return
    node.height = 1 + max(_cached_height(node.left), _cached_height(node.right))


def get_height(node: Optional[AVLNode]) -> int:
    """Return the height of the subtree at ``node`` by walking it; -1 for no node."""
    if node is None:
        return -1
    return 1 + max(get_height(node.left), get_height(node.right))


def get_balance_factor(node: Optional[AVLNode]) -> int:
    """Return the left subtree's height minus the right's; 0 for no node."""
    if node is None:
        return 0
    return get_height(node.left) - get_height(node.right)


def _ll_rotation(node: AVLNode) -> AVLNode:
    new_root = node.left
    node.left = new_root.right
    new_root.right = node
    compute_height(node)
    compute_height(new_root)
    return new_root


def _rr_rotation(node: AVLNode) -> AVLNode:
    new_root = node.right
    node.right = new_root.left
    new_root.left = node
    compute_height(node)
    compute_height(new_root)
    return new_root


def _lr_rotation(node: AVLNode) -> AVLNode:
    left_child = node.left
    new_root = left_child.right
    left_child.right = new_root.left
    node.left = new_root.right
    new_root.right = node
    new_root.left = left_child
    compute_height(node)
    compute_height(left_child)
    compute_height(new_root)
    return new_root


def _rl_rotation(node: AVLNode) -> AVLNode:
    right_child = node.right
    new_root = right_child.left
    right_child.left = new_root.right
    node.right = new_root.left
    new_root.left = node
    new_root.right = right_child
    compute_height(node)
    compute_height(right_child)
    compute_height(new_root)
    return new_root


def _rebalance(node: AVLNode) -> AVLNode:
    balance = _cached_balance(node)
    if balance == 2:
        if _cached_balance(node.left) >= 0:
            return _ll_rotation(node)
        return _lr_rotation(node)
    if balance == -2:
        if _cached_balance(node.right) <= 0:
            return _rr_rotation(node)
        return _rl_rotation(node)
    return node


def insert_avl(root: Optional[AVLNode], value: Any) -> AVLNode:
    """Insert ``value`` into the tree at ``root`` and return the new root.

    The tree is rebalanced with LL, RR, LR or RL rotations on the way back
    up; a value already present is ignored.
    """
    if root is None:
        return AVLNode(value)
    if value < root.data:
        root.left = insert_avl(root.left, value)
    elif value > root.data:
        root.right = insert_avl(root.right, value)
    else:
        return root
    compute_height(root)
    return _rebalance(root)


def in_order(root: Any) -> Iterator[Any]:
    """Yield the values of a binary tree in ascending (in-order) sequence."""
    stack: list[Any] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right