"""AVL trees: validation and self-balancing insertion."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .bst import is_bst
from .node import Node
from .rotation import rotate_left, rotate_right


def is_avl(tree: Optional[Node]) -> bool:
    """True when the tree is a binary search tree whose every node is balanced.

    A node is balanced when the level counts of its two subtrees differ by at
    most one. An empty tree is not a valid AVL tree.
    """
    if tree is None or not is_bst(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        if abs(node.balance()) > 1:
            return False
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return True


class AVLTree:
    """A height-balanced binary search tree of distinct integers."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    @classmethod
    def from_values(cls, values: Iterable[int]) -> AVLTree:
        """Build a tree by inserting the values in order, skipping repeats."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def _place(self, value: int) -> Optional[Node]:
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                return None

    def insert(self, value: int) -> Optional[Node]:
        """Insert a value, rebalancing on the way up.

        Returns the new node, or None if the value is already present.
        """
        new = self._place(value)
        if new is None:
            return None
        node = new.parent
        while node is not None:
            factor = node.balance()
            if factor > 1:
                if value > node.left.value:
                    rotate_left(node.left)
                top = rotate_right(node)
            elif factor < -1:
                if value < node.right.value:
                    rotate_right(node.right)
                top = rotate_left(node)
            else:
                top = node
            if top.parent is None:
                self.root = top
            node = top.parent
        return new

    def __iter__(self) -> Iterator[int]:
        if self.root is not None:
            yield from self.root.inorder()