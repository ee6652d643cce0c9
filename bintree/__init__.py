"""Linked binary tree nodes with metrics, traversals, an ASCII renderer and demos."""

__version__ = "0.1.0"
__all__ = ["node", "metrics", "traversal", "render", "demo"]