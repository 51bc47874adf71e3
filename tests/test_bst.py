from bisect import bisect_left, bisect_right

import pytest

from algokit.binary_tree import Node, height, inorder, level_order
from algokit.bst import balance_bst, convert_to_bst, inorder_neighbours
from algokit.tree_checks import is_balanced

VALUES = [50, 30, 70, 20, 40, 60, 80]


def _insert(root, value):
    if root is None:
        return Node(value)
    if value < root.data:
        root.left = _insert(root.left, value)
    else:
        root.right = _insert(root.right, value)
    return root


def _build(values):
    root = None
    for value in values:
        root = _insert(root, value)
    return root


def _shape(root):
    if root is None:
        return None
    return (_shape(root.left), _shape(root.right))


def _data(node):
    return None if node is None else node.data


@pytest.mark.parametrize("value", VALUES + [10, 45, 65, 90])
def test_inorder_neighbours_match_sorted_order(value):
    ordered = sorted(VALUES)
    root = _build(VALUES)
    predecessor, successor = inorder_neighbours(root, value)
    before = bisect_left(ordered, value)
    after = bisect_right(ordered, value)
    expected_pre = ordered[before - 1] if before > 0 else None
    expected_succ = ordered[after] if after < len(ordered) else None
    assert _data(predecessor) == expected_pre
    assert _data(successor) == expected_succ


def test_inorder_neighbours_of_middle_value():
    root = _build(VALUES)
    predecessor, successor = inorder_neighbours(root, 40)
    assert (predecessor.data, successor.data) == (30, 50)


def test_inorder_neighbours_of_empty_tree():
    assert inorder_neighbours(None, 5) == (None, None)


def test_convert_to_bst_sorts_inorder_and_keeps_shape():
    root = Node(10, Node(2, Node(8), Node(4)), Node(7))
    shape = _shape(root)
    values = sorted(inorder(root))
    result = convert_to_bst(root)
    assert result is root
    assert inorder(root) == values
    assert _shape(root) == shape


def test_convert_to_bst_of_empty_tree():
    assert convert_to_bst(None) is None


def test_balance_bst_of_chain():
    root = _build(range(1, 8))
    assert height(root) == 7
    balanced = balance_bst(root)
    assert inorder(balanced) == list(range(1, 8))
    assert is_balanced(balanced)
    assert height(balanced) == 3
    assert level_order(balanced)[0] == 4


def test_balance_bst_keeps_nodes_and_values():
    root = _build([5, 4, 3, 2, 1, 6, 7, 8])
    originals = {id(node) for node in [root]}
    balanced = balance_bst(root)
    assert inorder(balanced) == sorted([5, 4, 3, 2, 1, 6, 7, 8])
    assert is_balanced(balanced)
    assert originals <= {id(balanced), id(balanced.left), id(balanced.right)} | {
        id(root)
    }


def test_balance_bst_of_empty_tree():
    assert balance_bst(None) is None