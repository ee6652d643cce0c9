"""Measurements and shape checks over binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def height(tree: Optional[Node]) -> int:
    """Return the height in edges; 0 for an empty tree or a leaf."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return max(height(tree.left), height(tree.right)) + 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.left is None and node.right is None)


def nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if node.left is not None or node.right is not None)


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return max(_levels(tree.left), _levels(tree.right)) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: left subtree height minus right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has zero or two children."""
    if tree is None:
        return False
    for node in _walk(tree):
        if (node.left is None) != (node.right is None):
            return False
    return True


def _leftmost_depth(tree: Optional[Node]) -> int:
    depth = 0
    while tree is not None:
        depth += 1
        tree = tree.left
    return depth


def _is_perfect(tree: Optional[Node], depth: int, level: int) -> bool:
    if tree is None:
        return True
    if tree.left is None and tree.right is None:
        return depth == level + 1
    if tree.left is None or tree.right is None:
        return False
    return _is_perfect(tree.left, depth, level + 1) and _is_perfect(
        tree.right, depth, level + 1
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all inner nodes have two children and all leaves share a level."""
    if tree is None:
        return False
    return _is_perfect(tree, _leftmost_depth(tree), 0)