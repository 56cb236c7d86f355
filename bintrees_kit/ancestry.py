"""Lowest common ancestor of two nodes."""

from __future__ import annotations

from typing import Optional

from .node import Node


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that has both nodes in its subtree.

    A node counts as its own ancestor. Returns None when either node is
    None or when the two nodes do not belong to the same tree.
    """
    if first is None or second is None:
        return None
    first_depth = first.depth()
    second_depth = second.depth()
    a: Optional[Node] = first
    b: Optional[Node] = second
    while first_depth > second_depth:
        a = a.parent
        first_depth -= 1
    while second_depth > first_depth:
        b = b.parent
        second_depth -= 1
    while a is not None and b is not None:
        if a is b:
            return a
        a = a.parent
        b = b.parent
    return None