"""Breadth-first traversal and the completeness check built on it."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .node import Node


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def is_complete(tree: Optional[Node]) -> bool:
    """True when every level is full except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    seen_gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                seen_gap = True
            elif seen_gap:
                return False
            else:
                queue.append(child)
    return True