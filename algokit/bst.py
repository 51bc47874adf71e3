"""Binary search tree queries and conversions."""

from __future__ import annotations

from collections.abc import Iterator

from .binary_tree import Node, inorder

__all__ = ["inorder_neighbours", "convert_to_bst", "balance_bst"]


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


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def inorder_neighbours(root: Node | None, value) -> tuple[Node | None, Node | None]:
    """Return the inorder predecessor and successor of ``value`` in a BST.

    The value need not be in the tree: the nodes holding the nearest smaller
    and larger values are returned. Either is None where no such node exists.
    """
    predecessor: Node | None = None
    successor: Node | None = None
    node = root
    while node is not None:
        if value == node.data:
            if node.left is not None:
                predecessor = _rightmost(node.left)
            if node.right is not None:
                successor = _leftmost(node.right)
            break
        if value < node.data:
            successor = node
            node = node.left
        else:
            predecessor = node
            node = node.right
    return predecessor, successor


def convert_to_bst(root: Node | None) -> Node | None:
    """Rearrange the values of a binary tree in place so it becomes a BST.

    The shape of the tree is kept; the root is returned.
    """
    ordered = sorted(inorder(root))
    for node, value in zip(_inorder_nodes(root), ordered):
        node.data = value
    return root


def balance_bst(root: Node | None) -> Node | None:
    """Relink the nodes of a BST into a height-balanced BST and return its root."""
    nodes = list(_inorder_nodes(root))

    def build(low: int, high: int) -> Node | None:
        if low > high:
            return None
        middle = (low + high) // 2
        node = nodes[middle]
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        return node

    return build(0, len(nodes) - 1)