"""A plain binary tree whose nodes know their parent."""

from __future__ import annotations

import weakref
from typing import Optional


class Node:
    """A binary tree node holding an integer value.

    The parent link is weak: a node does not keep its parent alive.
    """

    __slots__ = ("value", "left", "right", "_parent", "__weakref__")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None
        self._parent: Optional[weakref.ref[Node]] = None
        self.parent = parent

    @property
    def parent(self) -> Optional[Node]:
        """The parent node, or None for a root or a detached node."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Optional[Node]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def __repr__(self) -> str:
        parent = self.parent
        return (
            f"Node(value={self.value!r}, "
            f"parent={parent.value if parent is not None else None!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> Node:
        """Replace the left child with a new node holding value."""
        self.left = Node(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> Node:
        """Replace the right child with a new node holding value."""
        self.right = Node(value, parent=self)
        return self.right

    def copy(self) -> Node:
        """Return a shallow copy sharing this node's parent and children."""
        clone = Node(self.value)
        clone._parent = self._parent
        clone.left = self.left
        clone.right = self.right
        return clone

    def find_by_value(self, value: int) -> Optional[Node]:
        """Return a copy of the first node holding value, or None.

        The walk descends into the left child whenever there is one and
        into the right child only when there is no left child.
        """
        node: Optional[Node] = self
        while node is not None:
            if node.value == value:
                return node.copy()
            node = node.left if node.left is not None else node.right
        return None

    def find_by_full_property(self, node: Node) -> Optional[Node]:
        """Return a copy of the node matching node's value, parent and children.

        Neighbours are compared by value; the walk follows the same
        left-first path as find_by_value.
        """
        current: Optional[Node] = self
        while current is not None:
            if (
                current.value == node.value
                and _same_value(node.parent, current.parent)
                and _same_value(node.left, current.left)
                and _same_value(node.right, current.right)
            ):
                return current.copy()
            current = current.left if current.left is not None else current.right
        return None

    def discard_by_value(self, value: int) -> bool:
        """Cut the node holding value, with its subtree, out of the tree.

        Every link followed on the way down is severed; the matching node
        loses its parent. Returns whether a matching node was reached.
        """
        node = self
        while True:
            if node.value == value:
                node.parent = None
                return True
            if node.left is not None:
                child = node.left
                node.left = None
            elif node.right is not None:
                child = node.right
                node.right = None
            else:
                return False
            node = child

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this one included."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return count

    def depth(self) -> int:
        """Longest number of edges from this node down to a leaf."""
        return max(
            (child.depth() + 1 for child in (self.left, self.right) if child is not None),
            default=0,
        )

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left


def _same_value(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None:
        return second is None
    return second is not None and second.value == first.value