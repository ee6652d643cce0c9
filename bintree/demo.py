"""Numbered demonstrations of the tree operations."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from typing import Any, Callable, Iterable, Optional, TextIO

from bintree import metrics
from bintree.node import Node
from bintree.render import print_tree
from bintree.traversal import inorder, postorder, preorder

Demo = Callable[[TextIO], None]

# Trees are written as nested tuples: (value, left, right), children optional.
_FIRST = (98, (12, (6,), (16,)), (402, (256,), (512,)))
_SEVEN = (98, (12, (6,), (56,)), (402, (256,), (512,)))
_FIVE = (98, (12, None, (54,)), (128, None, (402,)))
_UNBALANCED = (98, (45, (12, (10, (8,)), (54,)), (50,)), (128, None, (402,)))
_NEARLY_FULL = (98, (12, (10,), (54,)), (128, None, (402,)))
_NEARLY_PERFECT = (98, (12, (10,), (54,)), (128, (10,), (402,)))
_FAMILY = (98, (12, (10,), (54,)), (128, (110,), (402, (200,), (512,))))


def _say(out: TextIO, text: str = "") -> None:
    out.write(f"{text}\n")


def _pointer(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


def _tree(spec: Optional[tuple], parent: Optional[Node] = None) -> Optional[Node]:
    if spec is None:
        return None
    value, *children = spec
    node = Node(value, parent)
    left, right = (list(children) + [None, None])[:2]
    node.left = _tree(left, node)
    node.right = _tree(right, node)
    return node


def _at(root: Node, path: str) -> Node:
    """Follow a path of "l" and "r" steps down from ``root``."""
    node = root
    for step in path:
        node = node.left if step == "l" else node.right
    return node


def _show(spec: tuple) -> Demo:
    def demo(out: TextIO) -> None:
        print_tree(_tree(spec), out)

    return demo


def _insertion_demo(side: str, child_path: str, child_value: int, root_value: int) -> Demo:
    def demo(out: TextIO) -> None:
        root = _tree((98, (12,), (402,)))
        print_tree(root, out)
        _say(out)
        getattr(_at(root, child_path), f"insert_{side}")(child_value)
        getattr(root, f"insert_{side}")(root_value)
        print_tree(root, out)

    return demo


def _demo_3(out: TextIO) -> None:
    root = _tree(_FIVE)
    print_tree(root, out)
    root.delete()


def _traversal_demo(walk: Callable[[Optional[Node]], Iterable[int]]) -> Demo:
    def demo(out: TextIO) -> None:
        root = _tree(_SEVEN)
        print_tree(root, out)
        for value in walk(root):
            _say(out, str(value))

    return demo


def _measure_demo(
    spec: tuple, template: str, measure: Callable[[Node], Any], paths: Iterable[str]
) -> Demo:
    def demo(out: TextIO) -> None:
        root = _tree(spec)
        print_tree(root, out)
        for path in paths:
            node = _at(root, path)
            _say(out, template.format(node.value, measure(node)))

    return demo


def _demo_16(out: TextIO) -> None:
    root = _tree(_NEARLY_PERFECT)
    target = root.right.right
    for step, side in enumerate((None, "left", "right")):
        if side is not None:
            setattr(target, side, Node(10, target))
        if step:
            _say(out)
        print_tree(root, out)
        _say(out, f"Perfect: {int(metrics.is_perfect(root))}")


_NEAR = ("", "r", "rr")
_SPREAD = ("", "r", "lr")

_DEMOS: dict[int, Demo] = {
    0: _show(_FIRST),
    1: _insertion_demo("left", "r", 128, 54),
    2: _insertion_demo("right", "l", 54, 128),
    3: _demo_3,
    4: _measure_demo(_FIVE, "Is {} a leaf: {}", lambda n: int(n.is_leaf()), _NEAR),
    5: _measure_demo(_FIVE, "Is {} a root: {}", lambda n: int(n.is_root()), _NEAR),
    6: _traversal_demo(preorder),
    7: _traversal_demo(inorder),
    8: _traversal_demo(postorder),
    9: _measure_demo(_FIVE, "Height from {}: {}", metrics.height, _SPREAD),
    10: _measure_demo(_FIVE, "Depth of {}: {}", Node.depth, _SPREAD),
    11: _measure_demo(_FIVE, "Size of {}: {}", metrics.size, _SPREAD),
    12: _measure_demo(_FIVE, "Leaves in {}: {}", metrics.leaves, _SPREAD),
    13: _measure_demo(_FIVE, "Nodes in {}: {}", metrics.nodes, _SPREAD),
    14: _measure_demo(
        _UNBALANCED,
        "Balance of {}: {}",
        lambda n: f"{metrics.balance(n):+d}",
        ("", "r", "llr"),
    ),
    15: _measure_demo(
        _NEARLY_FULL, "Is {} full: {}", lambda n: int(metrics.is_full(n)), ("", "l", "r")
    ),
    16: _demo_16,
    17: _measure_demo(
        _FAMILY,
        "Sibling of {}: {}",
        lambda n: _pointer(n.sibling()),
        ("l", "rl", "lr", ""),
    ),
    18: _measure_demo(
        _FAMILY, "Uncle of {}: {}", lambda n: _pointer(n.uncle()), ("rl", "lr", "l")
    ),
}


def run_demo(number: int, out: Optional[TextIO] = None) -> None:
    """Run demonstration ``number`` (0 to 18), writing to ``out``."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demonstration numbered {number}") from None
    demo(out if out is not None else sys.stdout)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the demonstrations named on the command line, or all of them."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Show the binary tree operations at work."
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        metavar="N",
        help=f"demonstration to run, {min(_DEMOS)} to {max(_DEMOS)} (default: all)",
    )
    args = parser.parse_args(argv)
    unknown = [n for n in args.numbers if n not in _DEMOS]
    if unknown:
        parser.error(f"no demonstration numbered {unknown[0]}")
    for number in args.numbers or sorted(_DEMOS):
        run_demo(number, sys.stdout)
    return 0