"""Left and right rotations of a binary tree."""

from __future__ import annotations

from typing import Optional

from .node import Node


def _replace_in_parent(parent: Optional[Node], old: Node, new: Node) -> None:
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Left-rotate around a node and return the new subtree root.

    Raises ValueError when the node is None or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    moved = pivot.left
    pivot.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    parent = tree.parent
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Right-rotate around a node and return the new subtree root.

    Raises ValueError when the node is None or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    moved = pivot.right
    pivot.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    parent = tree.parent
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot