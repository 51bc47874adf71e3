"""Binary tree nodes, traversals, views and path problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import accumulate
from typing import Any

__all__ = [
    "Node",
    "inorder",
    "level_order",
    "reverse_level_order",
    "zigzag_order",
    "diagonal_order",
    "boundary_order",
    "left_view",
    "right_view",
    "top_view",
    "bottom_view",
    "height",
    "diameter",
    "mirror",
    "to_doubly_linked_list",
    "root_to_leaf_paths",
    "max_root_to_leaf_sum",
    "longest_path_sum",
    "k_sum_paths",
]


@dataclass
class Node:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: Node | None = None
    right: Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _levels(root: Node | None) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _inorder_nodes(root: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder(root: Node | None) -> list:
    """Return the values in left, node, right order."""
    return [node.data for node in _inorder_nodes(root)]


def level_order(root: Node | None) -> list:
    """Return the values level by level, each level from left to right."""
    return [node.data for level in _levels(root) for node in level]


def reverse_level_order(root: Node | None) -> list:
    """Return the values from the deepest level up, each level from left to right."""
    return [node.data for level in reversed(list(_levels(root))) for node in level]


def zigzag_order(root: Node | None) -> list:
    """Return the values level by level, alternating direction.

    The second level is read from left to right, the third from right to
    left, and so on.
    """
    result = []
    for depth, level in enumerate(_levels(root)):
        ordered = reversed(level) if depth % 2 == 0 else level
        result.extend(node.data for node in ordered)
    return result


def diagonal_order(root: Node | None) -> list:
    """Return the values diagonal by diagonal, following right links first."""
    result = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        while node is not None:
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            node = node.right
    return result


def _leaves(root: Node | None) -> Iterator[Node]:
    return (node for node in _inorder_nodes(root) if node.is_leaf)


def boundary_order(root: Node | None) -> list:
    """Return the boundary anticlockwise from the root.

    That is the root, the left edge down to (not including) its leaf, every
    leaf from left to right, then the right edge upwards.
    """
    if root is None:
        return []
    result = [root.data]
    if root.is_leaf:
        return result
    node = root.left
    while node is not None and not node.is_leaf:
        result.append(node.data)
        node = node.left if node.left is not None else node.right
    result.extend(leaf.data for leaf in _leaves(root))
    right_edge = []
    node = root.right
    while node is not None and not node.is_leaf:
        right_edge.append(node.data)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def left_view(root: Node | None) -> list:
    """Return the leftmost value of every level."""
    return [level[0].data for level in _levels(root)]


def right_view(root: Node | None) -> list:
    """Return the rightmost value of every level."""
    return [level[-1].data for level in _levels(root)]


def _by_column(root: Node | None, keep_first: bool) -> list:
    columns: dict[int, Any] = {}
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, column = queue.popleft()
        if keep_first:
            columns.setdefault(column, node.data)
        else:
            columns[column] = node.data
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))
    return [columns[column] for column in sorted(columns)]


def top_view(root: Node | None) -> list:
    """Return the value seen from above in each column, left to right."""
    return _by_column(root, keep_first=True)


def bottom_view(root: Node | None) -> list:
    """Return the value seen from below in each column, left to right.

    Where nodes share the lowest place of a column, the later one in level
    order is seen.
    """
    return _by_column(root, keep_first=False)


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest path from the root down."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _height_and_diameter(node: Node | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(node.left)
    right_height, right_diameter = _height_and_diameter(node.right)
    return (
        1 + max(left_height, right_height),
        max(left_diameter, right_diameter, left_height + right_height + 1),
    )


def diameter(root: Node | None) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def mirror(root: Node | None) -> Node | None:
    """Return a new tree that is the mirror image of ``root``."""
    if root is None:
        return None
    return Node(root.data, mirror(root.right), mirror(root.left))


def to_doubly_linked_list(root: Node | None) -> Node | None:
    """Relink the tree in place into a doubly linked list in inorder.

    ``left`` then points to the previous node and ``right`` to the next.
    The head of the list is returned.
    """
    nodes = list(_inorder_nodes(root))
    if not nodes:
        return None
    for previous, current in zip(nodes, nodes[1:]):
        previous.right = current
        current.left = previous
    nodes[0].left = None
    nodes[-1].right = None
    return nodes[0]


def root_to_leaf_paths(root: Node | None) -> list[list]:
    """Return the values on every path from the root to a leaf, left first."""
    paths: list[list] = []
    path: list = []

    def visit(node: Node) -> None:
        path.append(node.data)
        if node.is_leaf:
            paths.append(list(path))
        for child in (node.left, node.right):
            if child is not None:
                visit(child)
        path.pop()

    if root is not None:
        visit(root)
    return paths


def max_root_to_leaf_sum(root: Node | None) -> int:
    """Return the largest sum along a root-to-leaf path; 0 for an empty tree."""
    return max((sum(path) for path in root_to_leaf_paths(root)), default=0)


def _length_and_sum(node: Node | None) -> tuple[int, Any]:
    if node is None:
        return 0, 0
    length, total = max(_length_and_sum(node.left), _length_and_sum(node.right))
    return length + 1, total + node.data


def longest_path_sum(root: Node | None) -> Any:
    """Return the sum along the longest root-to-leaf path.

    Among paths of equal length the largest sum wins.
    """
    return _length_and_sum(root)[1]


def k_sum_paths(root: Node | None, k) -> list[list]:
    """Return every downward path whose values sum to ``k``.

    Paths are listed by their lowest node in postorder; paths ending at the
    same node come shortest first.
    """
    found: list[list] = []
    path: list = []

    def visit(node: Node) -> None:
        path.append(node.data)
        for child in (node.left, node.right):
            if child is not None:
                visit(child)
        for length, total in enumerate(accumulate(reversed(path)), 1):
            if total == k:
                found.append(path[-length:])
        path.pop()

    if root is not None:
        visit(root)
    return found