# bintrees_kit

Binary trees whose nodes know their parent, with the usual toolbox around them:
measurements, traversals, structural checks, rotations, binary search trees,
AVL trees, and a compact text rendering. Pure Python, no dependencies.

## Installation

```
pip install bintrees_kit
```

## Building trees by hand

```python
from bintrees_kit.node import Node
from bintrees_kit.render import print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes its right child

print_tree(root)
print(root.height(), root.size(), root.leaves())
print(list(root.preorder()), list(root.inorder()), list(root.postorder()))
print(root.right.right.depth(), root.left.sibling().value)
```

A `Node` holds `value`, `parent`, `left` and `right`. Besides the methods
above it offers:

- `is_leaf()` and `is_root()`
- `internal_nodes()`: the number of nodes with at least one child
- `balance()`: levels in the left subtree minus levels in the right subtree
- `is_full()`: every node has zero or two children
- `is_perfect()`: every inner node has two children and all leaves share a level
- `sibling()` and `uncle()`, or `None` when there is none
- `detach()`: cuts the subtree off its parent and returns it

`height()` and `depth()` count edges, so a lone node has height 0 and the
root has depth 0. The traversal methods are generators of values.

## Rendering

`render(tree)` returns the drawing as a single string, one line per level,
each line ending in a newline; every node is shown as a zero-padded value in
parentheses such as `(098)`, with dashes and dots linking it to its children.
`render(None)` returns an empty string. `print_tree(tree, file=None)` writes
the drawing to the given stream, standard output by default.

## Traversal and structure

```python
from bintrees_kit.traversal import levelorder, is_complete
from bintrees_kit.ancestry import lowest_common_ancestor
from bintrees_kit.rotation import rotate_left, rotate_right

print(list(levelorder(root)))
print(is_complete(root))
print(lowest_common_ancestor(root.left.right, root.right).value)
root = rotate_left(root)
```

- `levelorder(tree)` yields values level by level, left to right.
- `is_complete(tree)` is `False` for `None`.
- `lowest_common_ancestor(first, second)` counts a node as its own ancestor
  and returns `None` if either node is `None` or they are in different trees.
- `rotate_left` and `rotate_right` return the new subtree root and relink its
  parent; they raise `ValueError` when the node is `None` or lacks the child
  the rotation needs.

## Search trees

```python
from bintrees_kit.bst import BinarySearchTree, is_bst
from bintrees_kit.avl import AVLTree, is_avl

values = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]

bst = BinarySearchTree.from_values(values)
bst.insert(50)
print(32 in bst, bst.search(32).value)
bst.remove(79)
print(list(bst))
print(is_bst(bst.root))

avl = AVLTree.from_values(values)
avl.insert(50)
print(list(avl), is_avl(avl.root))
```

Both tree types keep their top node in `root` and iterate their values in
sorted order. `insert` returns the new node, or `None` when the value is
already present, so repeats are skipped. `BinarySearchTree.search` returns the
node holding a value or `None`; `remove` raises `KeyError` for an absent value
and, for a node with two children, moves the in-order successor's value into
it. `AVLTree.insert` rebalances with rotations on the way back up.

`is_bst` and `is_avl` return `False` for an empty tree and for duplicate
values; `is_avl` also requires every node's `balance()` to lie within one.

## What is not included

`AVLTree` supports insertion and iteration only: it has no search, no
membership test and no removal. There is no heap type.

## Running the tests

```
pip install "bintrees_kit[test]"
pytest
```