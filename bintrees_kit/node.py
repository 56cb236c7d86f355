"""Binary tree nodes and the basic measurements and traversals over them."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any previous left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any previous right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def detach(self) -> Node:
        """Cut this subtree off its parent and return it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None
        return self

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        return self.parent is None

    def _nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order."""
        for node in self._nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order."""
        stack: list[Node] = []
        node: Optional[Node] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        best = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            best = max(best, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return best

    def depth(self) -> int:
        """Number of edges up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        return sum(1 for _ in self._nodes())

    def leaves(self) -> int:
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Count the nodes that have at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Levels in the left subtree minus levels in the right subtree."""

        def levels(child: Optional[Node]) -> int:
            return child.height() + 1 if child is not None else 0

        return levels(self.left) - levels(self.right)

    def is_full(self) -> bool:
        """True when every node has either zero or two children."""
        return all((node.left is None) == (node.right is None) for node in self._nodes())

    def is_perfect(self) -> bool:
        """True when every inner node has two children and all leaves share a level."""
        leaf_level = 0
        node = self
        while not node.is_leaf():
            node = node.left if node.left is not None else node.right
            leaf_level += 1
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_leaf():
                if level != leaf_level:
                    return False
                continue
            if node.left is None or node.right is None:
                return False
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
        return True

    def sibling(self) -> Optional[Node]:
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        if self.parent is None:
            return None
        return self.parent.sibling()