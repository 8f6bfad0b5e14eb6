"""Graphviz dot output for binary trees."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

from binarysearchtree.bst import BstNode
from binarysearchtree.tree import Node

TreeNode = Union[Node, BstNode]


def _label(node: TreeNode) -> str:
    if isinstance(node, BstNode):
        if node.key is None:
            raise ValueError("a NIL node has no key to draw")
        return str(node.key)
    return str(node.value)


def _edges(root: TreeNode) -> Iterator[str]:
    """Yield one edge line per child, a node's own edges before its subtrees."""
    stack = [root]
    while stack:
        node = stack.pop()
        children = [child for child in (node.left, node.right) if child is not None]
        for child in children:
            yield f"\t{_label(node)}--{_label(child)};\n"
        stack.extend(reversed(children))


def dot_source(root: TreeNode) -> str:
    """Return the tree below root as an undirected graphviz graph."""
    return "graph tree{\n" + "".join(_edges(root)) + "}"


def write_dotfile(root: TreeNode, path: Union[str, Path]) -> Path:
    """Write the graphviz source of the tree to path and return the path."""
    target = Path(path)
    target.write_text(dot_source(root), encoding="utf-8")
    return target