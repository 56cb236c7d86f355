import pytest

from bintrees_kit.avl import AVLTree, is_avl
from bintrees_kit.node import Node

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _parents_consistent(node):
    for child in (node.left, node.right):
        if child is not None:
            if child.parent is not node or not _parents_consistent(child):
                return False
    return True


def _basic_tree():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(128)
    left.insert_right(54)
    right.insert_right(402)
    left.insert_left(10)
    return root


def test_is_avl_source_cases():
    root = _basic_tree()
    assert is_avl(root) is True
    assert is_avl(root.left) is True
    root.right.insert_left(97)
    assert is_avl(root) is False

    root = _basic_tree()
    deep = root.right.right.insert_right(430)
    assert is_avl(root) is False
    deep.insert_left(420)
    assert is_avl(root) is False


def test_is_avl_empty_is_false():
    assert is_avl(None) is False


def test_is_avl_rejects_chain():
    root = Node(1)
    root.insert_right(2).insert_right(3)
    assert is_avl(root) is False


@pytest.mark.parametrize(
    "count, expected",
    [
        (1, [98]),
        (2, [98, 402]),
        (3, [98, 12, 402]),
        (4, [98, 12, 46, 402]),
        (5, [98, 12, 46, 402, 128]),
        (6, [98, 12, 46, 256, 128, 402]),
        (7, [98, 12, 46, 256, 128, 402, 512]),
        (8, [98, 46, 12, 50, 256, 128, 402, 512]),
    ],
)
def test_insert_source_case(count, expected):
    values = [98, 402, 12, 46, 128, 256, 512, 50][:count]
    tree = AVLTree()
    for value in values:
        assert tree.insert(value).value == value
    assert list(tree.root.preorder()) == expected
    assert tree.root.parent is None
    assert _parents_consistent(tree.root)
    assert is_avl(tree.root)


def test_insert_duplicate_returns_none():
    tree = AVLTree.from_values([5, 3, 8])
    assert tree.insert(3) is None
    assert list(tree) == [3, 5, 8]


def test_from_values_source_case():
    tree = AVLTree.from_values(ARRAY)
    assert list(tree.root.preorder()) == [
        47, 21, 2, 1, 20, 32, 22, 34, 84, 68, 62, 79, 91, 87, 98, 95,
    ]
    assert list(tree) == sorted(ARRAY)
    assert is_avl(tree.root)
    assert _parents_consistent(tree.root)


def test_from_values_sorted_input_stays_balanced():
    tree = AVLTree.from_values(range(1, 32))
    assert list(tree) == list(range(1, 32))
    assert tree.root.height() == 4
    assert is_avl(tree.root)


def test_existing_root_is_kept():
    root = Node(10)
    tree = AVLTree(root)
    tree.insert(5)
    tree.insert(1)
    assert tree.root.value == 5
    assert list(tree.root.preorder()) == [5, 1, 10]


def test_empty_tree_iterates_nothing():
    assert list(AVLTree()) == []