"""Structural checks and sums over binary trees."""

from __future__ import annotations

from collections import Counter
from typing import Any

from .binary_tree import Node

__all__ = [
    "is_balanced",
    "to_sum_tree",
    "is_sum_tree",
    "has_duplicate_subtree",
    "leaves_at_same_level",
    "largest_subtree_sum",
    "max_non_adjacent_sum",
    "is_mirror",
    "is_isomorphic",
    "lowest_common_ancestor",
    "node_distance",
]


def _balanced_height(node: Node | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Node | None) -> bool:
    """Return whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def to_sum_tree(root: Node | None) -> None:
    """Replace each value in place with the sum of the values below it.

    Leaves become 0.
    """

    def convert(node: Node | None) -> Any:
        if node is None:
            return 0
        original = node.data
        node.data = convert(node.left) + convert(node.right)
        return node.data + original

    convert(root)


def is_sum_tree(root: Node | None) -> bool:
    """Return whether every inner node equals the sum of the values below it."""

    def subtree_sum(node: Node | None) -> Any | None:
        if node is None:
            return 0
        if node.is_leaf:
            return node.data
        left = subtree_sum(node.left)
        if left is None:
            return None
        right = subtree_sum(node.right)
        if right is None or node.data != left + right:
            return None
        return node.data + left + right

    return subtree_sum(root) is not None


def has_duplicate_subtree(root: Node | None) -> bool:
    """Return whether two identical subtrees of two or more nodes exist."""
    seen: Counter[str] = Counter()

    def serialise(node: Node | None) -> str:
        if node is None:
            return "$"
        text = f"({node.data!r},{serialise(node.left)},{serialise(node.right)})"
        if not node.is_leaf:
            seen[text] += 1
        return text

    serialise(root)
    return any(count > 1 for count in seen.values())


def leaves_at_same_level(root: Node | None) -> bool:
    """Return whether all leaves lie at the same depth."""
    depths: set[int] = set()

    def visit(node: Node | None, depth: int) -> None:
        if node is None:
            return
        if node.is_leaf:
            depths.add(depth)
            return
        visit(node.left, depth + 1)
        visit(node.right, depth + 1)

    visit(root, 0)
    return len(depths) <= 1


def largest_subtree_sum(root: Node | None) -> Any:
    """Return the largest sum of the values of any subtree."""
    if root is None:
        raise ValueError("an empty tree has no subtrees")
    sums: list = []

    def total(node: Node | None) -> Any:
        if node is None:
            return 0
        value = node.data + total(node.left) + total(node.right)
        sums.append(value)
        return value

    total(root)
    return max(sums)


def _with_and_without(node: Node | None) -> tuple[Any, Any]:
    if node is None:
        return 0, 0
    left_with, left_without = _with_and_without(node.left)
    right_with, right_without = _with_and_without(node.right)
    return (
        node.data + left_without + right_without,
        max(left_with, left_without) + max(right_with, right_without),
    )


def max_non_adjacent_sum(root: Node | None) -> Any:
    """Return the best sum of nodes no two of which are parent and child."""
    return max(_with_and_without(root))


def is_mirror(first: Node | None, second: Node | None) -> bool:
    """Return whether ``second`` is the mirror image of ``first``."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and is_mirror(first.left, second.right)
        and is_mirror(first.right, second.left)
    )


def is_isomorphic(first: Node | None, second: Node | None) -> bool:
    """Return whether one tree turns into the other by swapping children."""
    if first is None or second is None:
        return first is second
    if first.data != second.data:
        return False
    return (
        is_isomorphic(first.left, second.left) and is_isomorphic(first.right, second.right)
    ) or (
        is_isomorphic(first.left, second.right) and is_isomorphic(first.right, second.left)
    )


def _contains(node: Node | None, value) -> bool:
    if node is None:
        return False
    return node.data == value or _contains(node.left, value) or _contains(node.right, value)


def _ancestor(node: Node | None, first, second) -> Node | None:
    if node is None:
        return None
    if node.data == first or node.data == second:
        return node
    left = _ancestor(node.left, first, second)
    right = _ancestor(node.right, first, second)
    if left is not None and right is not None:
        return node
    return left if left is not None else right


def lowest_common_ancestor(root: Node | None, first, second) -> Node | None:
    """Return the deepest node above both values, or None if either is absent.

    A node counts as its own ancestor.
    """
    if not (_contains(root, first) and _contains(root, second)):
        return None
    return _ancestor(root, first, second)


def _depth(node: Node | None, value) -> int | None:
    if node is None:
        return None
    if node.data == value:
        return 0
    for child in (node.left, node.right):
        below = _depth(child, value)
        if below is not None:
            return below + 1
    return None


def node_distance(root: Node | None, first, second) -> int:
    """Return the number of edges between the nodes holding two values."""
    ancestor = lowest_common_ancestor(root, first, second)
    if ancestor is None:
        raise ValueError("both values must be in the tree")
    return _depth(ancestor, first) + _depth(ancestor, second)