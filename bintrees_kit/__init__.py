"""Binary trees with parent links, traversals, rotations, search and AVL trees, and text rendering."""

__version__ = "0.1.0"
__all__ = ["ancestry", "avl", "bst", "node", "render", "rotation", "traversal"]