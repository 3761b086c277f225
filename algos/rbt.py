"""Red-black tree operations built on the binary search tree nodes."""

from __future__ import annotations

from typing import Optional

from .bst import BLACK, RED, Node, minimum

__all__ = ["rbt_search", "rbt_insert", "rbt_delete"]


def _color(node: Optional[Node]) -> int:
    return BLACK if node is None else node.color


def _rotate_left(root: Node, x: Node) -> Node:
    y = x.right
    assert y is not None
    x.right = y.left
    if y.left is not None:
        y.left.parent = x
    y.parent = x.parent
    if x.parent is None:
        root = y
    elif x is x.parent.left:
        x.parent.left = y
    else:
        x.parent.right = y
    y.left = x
    x.parent = y
    return root


def _rotate_right(root: Node, x: Node) -> Node:
    y = x.left
    assert y is not None
    x.left = y.right
    if y.right is not None:
        y.right.parent = x
    y.parent = x.parent
    if x.parent is None:
        root = y
    elif x is x.parent.right:
        x.parent.right = y
    else:
        x.parent.left = y
    y.right = x
    x.parent = y
    return root


def rbt_search(root: Optional[Node], data: int) -> Optional[Node]:
    """Return the node holding ``data``, or ``None``."""
    node = root
    while node is not None and node.data != data:
        node = node.left if data < node.data else node.right
    return node


def _balance_insert(root: Node, node: Node) -> Node:
    while node.parent is not None and node.parent.color == RED:
        parent = node.parent
        grand = parent.parent
        assert grand is not None
        if parent is grand.left:
            uncle = grand.right
            if _color(uncle) == RED:
                parent.color = BLACK
                uncle.color = BLACK
                grand.color = RED
                node = grand
                continue
            if node is parent.right:
                node = parent
                root = _rotate_left(root, node)
                parent = node.parent
            parent.color = BLACK
            grand.color = RED
            root = _rotate_right(root, grand)
        else:
            uncle = grand.left
            if _color(uncle) == RED:
                parent.color = BLACK
                uncle.color = BLACK
                grand.color = RED
                node = grand
                continue
            if node is parent.left:
                node = parent
                root = _rotate_right(root, node)
                parent = node.parent
            parent.color = BLACK
            grand.color = RED
            root = _rotate_left(root, grand)
    root.color = BLACK
    return root


def rbt_insert(root: Optional[Node], node: Node) -> Node:
    """Insert ``node`` into the tree, rebalance, and return the new root.

    Equal keys go to the right subtree.
    """
    node.left = node.right = None
    parent: Optional[Node] = None
    current = root
    while current is not None:
        parent = current
        current = current.left if current.data > node.data else current.right

    node.parent = parent
    if parent is None:
        node.color = BLACK
        return node
    if node.data < parent.data:
        parent.left = node
    else:
        parent.right = node
    node.color = RED
    assert root is not None
    return _balance_insert(root, node)


def _transplant(root: Optional[Node], old: Node, new: Optional[Node]) -> Optional[Node]:
    if old.parent is None:
        root = new
    elif old is old.parent.left:
        old.parent.left = new
    else:
        old.parent.right = new
    if new is not None:
        new.parent = old.parent
    return root


def _balance_delete(
    root: Optional[Node], x: Optional[Node], parent: Optional[Node]
) -> Optional[Node]:
    while x is not root and _color(x) == BLACK:
        assert parent is not None and root is not None
        if x is parent.left:
            sibling = parent.right
            assert sibling is not None
            if sibling.color == RED:
                sibling.color = BLACK
                parent.color = RED
                root = _rotate_left(root, parent)
                sibling = parent.right
            if _color(sibling.left) == BLACK and _color(sibling.right) == BLACK:
                sibling.color = RED
                x = parent
                parent = x.parent
            else:
                if _color(sibling.right) == BLACK:
                    sibling.left.color = BLACK
                    sibling.color = RED
                    root = _rotate_right(root, sibling)
                    sibling = parent.right
                sibling.color = parent.color
                parent.color = BLACK
                sibling.right.color = BLACK
                root = _rotate_left(root, parent)
                x = root
                parent = None
        else:
            sibling = parent.left
            assert sibling is not None
            if sibling.color == RED:
                sibling.color = BLACK
                parent.color = RED
                root = _rotate_right(root, parent)
                sibling = parent.left
            if _color(sibling.right) == BLACK and _color(sibling.left) == BLACK:
                sibling.color = RED
                x = parent
                parent = x.parent
            else:
                if _color(sibling.left) == BLACK:
                    sibling.right.color = BLACK
                    sibling.color = RED
                    root = _rotate_left(root, sibling)
                    sibling = parent.left
                sibling.color = parent.color
                parent.color = BLACK
                sibling.left.color = BLACK
                root = _rotate_right(root, parent)
                x = root
                parent = None
    if x is not None:
        x.color = BLACK
    return root


def rbt_delete(root: Optional[Node], node: Node) -> Optional[Node]:
    """Unlink ``node`` from the tree, rebalance, and return the new root.

    Raises ``ValueError`` if ``node`` does not belong to the tree at ``root``.
    """
    top = node
    while top.parent is not None:
        top = top.parent
    if top is not root:
        raise ValueError("node is not part of this tree")

    removed_color = node.color
    if node.left is None:
        x = node.right
        x_parent = node.parent
        root = _transplant(root, node, node.right)
    elif node.right is None:
        x = node.left
        x_parent = node.parent
        root = _transplant(root, node, node.left)
    else:
        successor = minimum(node.right)
        assert successor is not None
        removed_color = successor.color
        x = successor.right
        if successor.parent is node:
            x_parent = successor
        else:
            x_parent = successor.parent
            root = _transplant(root, successor, successor.right)
            successor.right = node.right
            successor.right.parent = successor
        root = _transplant(root, node, successor)
        successor.left = node.left
        successor.left.parent = successor
        successor.color = node.color

    node.parent = node.left = node.right = None
    if removed_color == BLACK:
        root = _balance_delete(root, x, x_parent)
    return root