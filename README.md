# bintree

A small library of linked binary tree nodes. Each node knows its parent and
its two children. The library answers common questions about a tree, walks
it in the usual orders, and draws it as ASCII art.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 goes in between root and 402
```

`Node(value, parent)` only records the parent; it does not link the new
node as one of the parent's children. Set `parent.left` or `parent.right`
yourself, or use the insert methods.

`insert_left` and `insert_right` add a new child on that side and return
it. If the side already has a child, the new node takes its place and the
old child moves down under the new node, on the same side.

A node can also tell you about where it sits in the tree:

- `is_leaf()`: `True` if it has no children
- `is_root()`: `True` if it has no parent
- `depth()`: the number of edges up to the root
- `sibling()`: the parent's other child, or `None`
- `uncle()`: the parent's sibling, or `None`

`delete()` detaches a node from its parent and unlinks every node in its
subtree.

## Metrics

```python
from bintree.metrics import height, size, leaves, nodes, balance, is_full, is_perfect

height(root)      # edges on the longest path down; 0 for a single node or None
size(root)        # number of nodes
leaves(root)      # number of nodes with no children
nodes(root)       # number of nodes with at least one child
balance(root)     # height of the left subtree minus height of the right subtree
is_full(root)     # every node has either 0 or 2 children
is_perfect(root)  # inner nodes all have 2 children and all leaves share a level
```

For an empty tree (`None`) the counts and `balance` are 0, and `is_full`
and `is_perfect` return `False`.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))    # [98, 12, 54, 128, 402]
list(inorder(root))     # [12, 54, 98, 128, 402]
list(postorder(root))   # [54, 12, 402, 128, 98]
```

Each traversal is a generator that yields the node values.

## Drawing

```python
from bintree.render import render, print_tree

text = render(root)      # the drawing as a string, each row ending in "\n"
print_tree(root)         # writes the drawing to standard output
print_tree(root, file)   # or to any text stream
```

For the tree built above, the drawing is:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

Each value is written as three digits in parentheses, like `(098)`. The
lines that join a parent to its children are drawn with `-` and `.`.
`render(None)` returns an empty string.

## Demo

The package installs a command that runs numbered example scenarios, 0 to
18. Each one builds a tree, prints it, and then prints what one operation
reports. Name one or more numbers, or none to run them all:

```
bintree-demo 14
bintree-demo
```

The same scenarios can be run from Python with
`bintree.demo.run_demo(number, out)`, which writes to the given text stream
(standard output by default) and raises `ValueError` for an unknown number.