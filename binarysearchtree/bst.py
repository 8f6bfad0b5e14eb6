"""A binary search tree whose nodes know their parent.

An empty tree is a single node whose key is None. The root node keeps its
identity through every operation: when the root itself has to be replaced,
the replacement's contents are moved into it.
"""

from __future__ import annotations

import weakref
from typing import Optional


class BstNode:
    """A binary search tree node holding an integer key, or None when NIL.

    The parent link is weak: a node does not keep its parent alive.
    """

    __slots__ = ("key", "left", "right", "_parent", "__weakref__")

    def __init__(self, key: Optional[int] = None, parent: Optional[BstNode] = None) -> None:
        self.key = key
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None
        self._parent: Optional[weakref.ref[BstNode]] = None
        self.parent = parent

    @property
    def parent(self) -> Optional[BstNode]:
        """The parent node, or None for a root or a detached node."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Optional[BstNode]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def __repr__(self) -> str:
        parent = self.parent
        return (
            f"BstNode(key={self.key!r}, "
            f"parent={parent.key if parent is not None else None!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, key: int) -> BstNode:
        """Replace the left child with a new node holding key."""
        self.left = BstNode(key, parent=self)
        return self.left

    def add_right_child(self, key: int) -> BstNode:
        """Replace the right child with a new node holding key."""
        self.right = BstNode(key, parent=self)
        return self.right

    def copy(self) -> BstNode:
        """Return a shallow copy sharing this node's parent and children."""
        clone = BstNode(self.key)
        clone._parent = self._parent
        clone.left = self.left
        clone.right = self.right
        return clone

    def _find(self, key: int) -> Optional[BstNode]:
        node: Optional[BstNode] = self
        while node is not None and node.key is not None:
            if node.key == key:
                return node
            if key < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def search(self, key: int) -> Optional[BstNode]:
        """Return a copy of the node holding key, or None if absent."""
        found = self._find(key)
        return found.copy() if found is not None else None

    def _min_node(self) -> BstNode:
        node = self
        while node.key is not None and node.left is not None:
            node = node.left
        return node

    def _max_node(self) -> BstNode:
        node = self
        while node.key is not None and node.right is not None:
            node = node.right
        return node

    def minimum(self) -> BstNode:
        """Return a copy of the node with the smallest key in this subtree."""
        return self._min_node().copy()

    def maximum(self) -> BstNode:
        """Return a copy of the node with the largest key in this subtree."""
        return self._max_node().copy()

    def root(self) -> BstNode:
        """Follow parent links up to the root; a node without parent is its own root."""
        node = self
        while (parent := node.parent) is not None:
            node = parent
        return node

    def successor(self) -> Optional[BstNode]:
        """The node holding the next larger key, or None for the largest key."""
        if self.right is not None:
            return self.right.minimum()
        x: BstNode = self
        y = x.parent
        while y is not None:
            if y.left is not None and y.left.key == x.key:
                return y
            x, y = y, y.parent
        return None

    def successor_simpler(self) -> Optional[BstNode]:
        """Successor lookup relying on the NIL test of nodes.

        A node counts as NIL when it lacks a parent or either child, which
        makes this lookup differ from successor on many trees. Raises
        ValueError when the walk needs a parent that does not exist.
        """
        if not _is_nil(self.right):
            return self.right.minimum()  # type: ignore[union-attr]
        y = self.parent
        if y is None:
            raise ValueError("node has no parent to look for a successor in")
        y_right = y.right
        x: BstNode = self
        while _is_nil(y) and y_right is not None and y_right.key == x.key:
            parent = y.parent
            if parent is None:
                raise ValueError("successor walk reached a node without parent")
            x, y = y, parent
        if y.key == x.root().key:
            return None
        return y

    def insert(self, key: int) -> None:
        """Insert key below this node; an existing key is left alone."""
        if self.key is None:
            self.key = key
            return
        node = self
        while True:
            if key < node.key:
                if node.left is None:
                    node.add_left_child(key)
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.add_right_child(key)
                    return
                node = node.right
            else:
                return

    def transplant(self, u: BstNode, v: Optional[BstNode]) -> BstNode:
        """Put subtree v where u stands, with this node as the tree's root.

        When u has no parent its place is the root, whose contents are then
        taken from v (or cleared to NIL when v is None). Returns the node
        that now stands in u's place.
        """
        parent = u.parent
        if parent is None:
            if v is None:
                self.key = None
                self.left = None
                self.right = None
            else:
                self.key = v.key
                self.left = v.left
                self.right = v.right
                for child in (self.left, self.right):
                    if child is not None:
                        child.parent = self
            return self
        if parent.left is not None and parent.left.key == u.key:
            parent.left = v
        else:
            parent.right = v
        if v is not None:
            v.parent = parent
        return v  # type: ignore[return-value]

    def delete(self, key: int) -> bool:
        """Remove the node holding key from the tree rooted here.

        Returns whether the key was found.
        """
        z = self._find(key)
        if z is None:
            return False
        z_left, z_right = z.left, z.right
        if z_left is None:
            self.transplant(z, z_right)
        elif z_right is None:
            self.transplant(z, z_left)
        else:
            y = z_right._min_node()
            if y is not z_right:
                self.transplant(y, y.right)
                y.right = z_right
                z_right.parent = y
            placed = self.transplant(z, y)
            placed.left = z_left
            z_left.parent = placed
        return True


def _is_nil(node: Optional[BstNode]) -> bool:
    return node is None or node.parent is None or node.left is None or node.right is None