"""Binary search trees: validation, insertion, lookup and removal."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .node import Node


def is_bst(tree: Optional[Node]) -> bool:
    """True when every value lies strictly between the bounds set by its ancestors.

    An empty tree is not a valid binary search tree. Duplicate values make the
    tree invalid.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


class BinarySearchTree:
    """A binary search tree of distinct integers built from linked nodes."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    @classmethod
    def from_values(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build a tree by inserting the values in order, skipping repeats."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def insert(self, value: int) -> Optional[Node]:
        """Insert a value and return its new node, or None if it is already present."""
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

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding the value, or None when it is absent."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if node.value > value else node.right
        return None

    def remove(self, value: int) -> None:
        """Remove a value from the tree.

        A node with two children takes the value of its in-order successor,
        which is removed in its place. Raises KeyError when the value is absent.
        """
        node = self.search(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def __iter__(self) -> Iterator[int]:
        if self.root is not None:
            yield from self.root.inorder()

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None