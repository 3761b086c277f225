"""Binary search tree nodes and operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

__all__ = [
    "BLACK",
    "RED",
    "Node",
    "walk_inorder",
    "walk_preorder",
    "walk_postorder",
    "bst_search",
    "bst_insert",
    "minimum",
    "in_order_successor",
    "bst_delete",
]

BLACK = 0
RED = 1


@dataclass(eq=False)
class Node:
    """A tree node; ``color`` is used by red-black trees (0 black, 1 red)."""

    data: int
    color: int = BLACK
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    parent: Optional["Node"] = field(default=None, repr=False)


def walk_inorder(root: Optional[Node]) -> Iterator[int]:
    """Yield the data of the tree in left, node, right order."""
    if root is None:
        return
    yield from walk_inorder(root.left)
    yield root.data
    yield from walk_inorder(root.right)


def walk_preorder(root: Optional[Node]) -> Iterator[int]:
    """Yield the data of the tree in node, left, right order."""
    if root is None:
        return
    yield root.data
    yield from walk_preorder(root.left)
    yield from walk_preorder(root.right)


def walk_postorder(root: Optional[Node]) -> Iterator[int]:
    """Yield the data of the tree in left, right, node order."""
    if root is None:
        return
    yield from walk_postorder(root.left)
    yield from walk_postorder(root.right)
    yield root.data


def bst_search(root: Optional[Node], data: int) -> Optional[Node]:
    """Return the node holding ``data``, or ``None``."""
    node = root
    while node is not None and node.data != data:
        node = node.left if data < node.data else node.right
    return node


def bst_insert(root: Optional[Node], node: Node) -> Node:
    """Insert ``node`` below ``root`` and return the tree's root.

    Equal keys go to the right subtree.
    """
    if root is None:
        node.parent = None
        return node
    current: Optional[Node] = root
    parent = root
    while current is not None:
        parent = current
        current = current.left if current.data > node.data else current.right
    node.parent = parent
    if parent.data > node.data:
        parent.left = node
    else:
        parent.right = node
    return root


def minimum(node: Optional[Node]) -> Optional[Node]:
    """Return the leftmost node of the subtree rooted at ``node``."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def in_order_successor(root: Optional[Node], node: Node) -> Optional[Node]:
    """Return the node following ``node`` in order, or ``None`` if it is last."""
    if root is None:
        return None
    if node.right is not None:
        return minimum(node.right)
    successor: Optional[Node] = None
    current: Optional[Node] = root
    while current is not None and current is not node:
        if node.data < current.data:
            successor = current
            current = current.left
        else:
            current = current.right
    return successor


def _replace_child(parent: Optional[Node], old: Node, new: Optional[Node]) -> None:
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new
    if new is not None:
        new.parent = parent


def bst_delete(root: Optional[Node], node: Node) -> Optional[Node]:
    """Remove the node whose data equals ``node.data`` and return the new root.

    A node with two children takes its in-order successor's data and the
    successor is unlinked instead. A missing key leaves the tree unchanged.
    """
    parent: Optional[Node] = None
    current = root
    while current is not None and current.data != node.data:
        parent = current
        current = current.left if node.data < current.data else current.right

    if current is None:
        return root

    if current.left is None or current.right is None:
        child = current.left if current.left is not None else current.right
        _replace_child(parent, current, child)
        current.parent = current.left = current.right = None
        return child if parent is None else root

    successor = current.right
    successor_parent = current
    while successor.left is not None:
        successor_parent = successor
        successor = successor.left
    _replace_child(successor_parent, successor, successor.right)
    current.data = successor.data
    successor.parent = successor.left = successor.right = None
    return root