"""Text drawing of binary trees, one row per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node


def _edges_height(tree: Node) -> int:
    left = 1 + _edges_height(tree.left) if tree.left is not None else 0
    right = 1 + _edges_height(tree.right) if tree.right is not None else 0
    return max(left, right)


class _Canvas:
    """Rows of characters that grow to the right on demand."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def lines(self) -> list[str]:
        result = []
        for line in self._rows:
            text = "".join(line).ljust(2)
            # The first two columns are always kept, as in the classic layout.
            result.append(text[:2] + text[2:].rstrip(" "))
        return result


def _draw(tree: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, canvas)
    right = _draw(tree.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth and is_left:
        for i in range(width + right):
            canvas.put(depth - 1, offset + left + width // 2 + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    elif depth:
        for i in range(left + width):
            canvas.put(depth - 1, offset - width // 2 + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, each row ending in a newline."""
    if tree is None:
        return ""
    canvas = _Canvas(_edges_height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))