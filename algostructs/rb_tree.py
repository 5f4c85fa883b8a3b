"""Red-black binary search trees with parent links."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = [
    "Color",
    "RBNode",
    "get_parent",
    "get_grandparent",
    "get_uncle",
    "insert_rb",
    "in_order",
]


class Color(enum.Enum):
    """The colour of a red-black tree node."""

    BLACK = "black"
    RED = "red"


@dataclass(eq=False)
class RBNode:
    """A red-black tree node holding a value, a colour and links to its relatives."""

    data: Any
    color: Color = Color.BLACK
    left: Optional[RBNode] = None
    right: Optional[RBNode] = None
    parent: Optional[RBNode] = field(default=None, repr=False)


def get_parent(node: Optional[RBNode]) -> Optional[RBNode]:
    """Return the parent of ``node``, or None."""
    return node.parent if node is not None else None


def get_grandparent(node: Optional[RBNode]) -> Optional[RBNode]:
    """Return the parent of ``node``'s parent, or None."""
    parent = get_parent(node)
    return parent.parent if parent is not None else None


def get_uncle(node: Optional[RBNode]) -> Optional[RBNode]:
    """Return the sibling of ``node``'s parent, or None."""
    grandparent = get_grandparent(node)
    if grandparent is None:
        return None
    if grandparent.left is node.parent:
        return grandparent.right
    return grandparent.left


def in_order(root: Optional[RBNode]) -> list:
    """Return the values of the tree at ``root`` in ascending (in-order) order."""
    values = []
    stack = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.data)
        current = current.right
    return values


def _replace_in_parent(old: RBNode, new: RBNode) -> None:
    parent = old.parent
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        elif parent.right is old:
            parent.right = new


def _rotate_right(node: RBNode) -> RBNode:
    new_root = node.left
    node.left = new_root.right
    if new_root.right is not None:
        new_root.right.parent = node
    _replace_in_parent(node, new_root)
    new_root.right = node
    node.parent = new_root
    return new_root


def _rotate_left(node: RBNode) -> RBNode:
    new_root = node.right
    node.right = new_root.left
    if new_root.left is not None:
        new_root.left.parent = node
    _replace_in_parent(node, new_root)
    new_root.left = node
    node.parent = new_root
    return new_root


def _restore(node: RBNode) -> None:
    while True:
        parent = node.parent
        if parent is None:
            node.color = Color.BLACK
            return
        if parent.color is Color.BLACK:
            return

        grandparent = parent.parent
        uncle = get_uncle(node)
        if uncle is not None and uncle.color is Color.RED:
            uncle.color = Color.BLACK
            parent.color = Color.BLACK
            grandparent.color = Color.RED
            node = grandparent
            continue
        if grandparent is None:
            return

        grandparent.color = Color.RED
        if parent is grandparent.left:
            if node is parent.left:
                parent.color = Color.BLACK
            else:
                node.color = Color.BLACK
                _rotate_left(parent)
            _rotate_right(grandparent)
        else:
            if node is parent.right:
                parent.color = Color.BLACK
            else:
                node.color = Color.BLACK
                _rotate_right(parent)
            _rotate_left(grandparent)
        return


def insert_rb(root: Optional[RBNode], value: Any) -> RBNode:
    """Insert ``value`` into the tree at ``root`` and return the new root.

    Red-black properties are restored by recolouring and rotations; a value
    already present is ignored.
    """
    if root is None:
        return RBNode(value, Color.BLACK)

    parent: Optional[RBNode] = None
    current: Optional[RBNode] = root
    while current is not None:
        parent = current
        if value < current.data:
            current = current.left
        elif value > current.data:
            current = current.right
        else:
            return root

    node = RBNode(value, Color.RED, parent=parent)
    if value < parent.data:
        parent.left = node
    else:
        parent.right = node

    _restore(node)

    while root.parent is not None:
        root = root.parent
    return root