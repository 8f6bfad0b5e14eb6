# binarysearchtree

Plain binary trees and binary search trees whose nodes keep a weak link to
their parent, with a writer that turns a tree into a Graphviz DOT graph.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Binary search trees

```python
from binarysearchtree.bst import BstNode
from binarysearchtree.dot import dot_source, write_dotfile

root = BstNode(15)
for key in [6, 18, 3, 7, 17, 20, 2, 4, 13, 9]:
    root.insert(key)

node = root.search(9)           # None when the key is absent
print(node.key)                 # 9
print(root.minimum().key)       # 2
print(root.maximum().key)       # 20

root.delete(7)                  # True if the key was present, False otherwise

print(dot_source(root))         # "graph tree{\n\t15--6;\n ... }"
write_dotfile(root, "bst.dot")
```

An empty tree is `BstNode()`, a single node whose `key` is `None`; the first
`insert` fills it in. Inserting a key that is already in the tree leaves the
tree as it is. The root node keeps its identity through `delete` and
`transplant`: when the root itself is replaced, the replacement's key and
children are moved into it.

`search`, `minimum` and `maximum` return shallow copies of the found node
that share its parent and children. Other members:

- `add_left_child(key)` / `add_right_child(key)` replace a child with a new
  node and return it.
- `copy()` makes such a shallow copy.
- `root()` follows parent links to the top.
- `successor()` returns the node with the next larger key, or `None`.
- `successor_simpler()` is an alternative successor lookup that treats any
  node lacking a parent or a child as NIL, so its answers differ from
  `successor()` on many trees; it raises `ValueError` when it needs a parent
  that does not exist.
- `transplant(u, v)` puts subtree `v` in the place of `u`, with the node it is
  called on as the tree's root, and returns the node now standing there.

The tree is not rebalanced.

## Plain binary trees

`binarysearchtree.tree.Node` is an unordered binary tree holding integer
`value`s, with `add_left_child`, `add_right_child`, `copy`, `find_by_value`,
`find_by_full_property`, `discard_by_value`, `count_nodes`, `depth` (edges on
the longest downward path) and `sibling`. The two `find_` methods walk down
the left child whenever there is one and take the right child only when there
is no left child.

## DOT output

`binarysearchtree.dot.dot_source(root)` returns an undirected graph named
`tree` with one `parent--child;` line per edge; `write_dotfile(root, path)`
writes it to a file and returns the path. Both accept `Node` and `BstNode`
trees. Drawing a search tree that has a NIL node with children raises
`ValueError`.

## Command line

    binarysearchtree [-o DIR] [--binary-tree]

builds a sample search tree, prints search, minimum, maximum, root and
successor results, then runs a series of inserts, a transplant and deletions
on a second tree, printing each result and writing the intermediate trees as
`.dot` files into `DIR` (default: the current directory). `--binary-tree`
also runs a demonstration of the plain binary tree. The command only writes
DOT source; render a file with Graphviz, for example
`dot -Tpng bst_final.dot -o bst_final.png`.