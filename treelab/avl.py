"""An AVL tree mapping unique, ordered keys to data."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

from treelab.avl_checks import format_in_order, format_vertical, run_checks
from treelab.avl_node import AVLNode, ensure_balance


class AVLTree:
    """A self-balancing binary search tree without duplicate keys.

    When ``debug_checks`` is true, the whole tree is verified after every
    insertion and removal. This is slow, but it catches mistakes early.
    """

    debug_checks: bool = True

    def __init__(self) -> None:
        self._root: Optional[AVLNode] = None

    @property
    def root(self) -> Optional[AVLNode]:
        """The node at the top of the tree, or None when the tree is empty."""
        return self._root

    def _find_node(self, key: Any) -> Optional[AVLNode]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def find(self, key: Any) -> Any:
        """Return the data stored under key; raise KeyError if it is absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(f"error in find(): key not found: {key!r}")
        return node.data

    def contains(self, key: Any) -> bool:
        """Return True if key is in the tree."""
        return self._find_node(key) is not None

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def insert(self, key: Any, data: Any) -> None:
        """Insert key with its data; raise ValueError if the key already exists."""
        self._root = self._insert(self._root, key, data)
        self.run_debugging_checks()

    def _insert(self, node: Optional[AVLNode], key: Any, data: Any) -> AVLNode:
        if node is None:
            return AVLNode(key, data)
        if key == node.key:
            raise ValueError(f"error in insert(): key already exists: {key!r}")
        if key < node.key:
            node.left = self._insert(node.left, key, data)
        else:
            node.right = self._insert(node.right, key, data)
        balanced = ensure_balance(node)
        assert balanced is not None
        return balanced

    def remove(self, key: Any) -> Any:
        """Remove key and return its data; raise KeyError if it is absent."""
        self._root, data = self._remove(self._root, key)
        self.run_debugging_checks()
        return data

    def _remove(self, node: Optional[AVLNode], key: Any) -> tuple[Optional[AVLNode], Any]:
        if node is None:
            raise KeyError(f"error in remove(): key not found: {key!r}")
        if key == node.key:
            return self._remove_node(node), node.data
        if key < node.key:
            node.left, data = self._remove(node.left, key)
        else:
            node.right, data = self._remove(node.right, key)
        return ensure_balance(node), data

    def _remove_node(self, node: AVLNode) -> Optional[AVLNode]:
        """Return what takes the place of node once node is removed."""
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        # Two children: the in-order predecessor takes the node's place.
        new_left, predecessor = self._detach_max(node.left)
        predecessor.left = new_left
        predecessor.right = node.right
        predecessor.height = node.height
        return ensure_balance(predecessor)

    def _detach_max(self, node: AVLNode) -> tuple[Optional[AVLNode], AVLNode]:
        """Unlink the rightmost node of the subtree, rebalancing on the way up."""
        if node.right is None:
            return ensure_balance(node.left), node
        node.right, largest = self._detach_max(node.right)
        return ensure_balance(node), largest

    def empty(self) -> bool:
        """Return True if the tree holds no keys."""
        return self._root is None

    def clear(self) -> None:
        """Remove every key from the tree."""
        self._root = None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, data) pairs in increasing key order."""
        stack: list[AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.data
            node = node.right

    def format_in_order(self) -> str:
        """Render the tree contents in key order."""
        return format_in_order(self._root)

    def format_vertical(self) -> str:
        """Render the tree one node per line, children indented under parents."""
        return format_vertical(self._root)

    def print_in_order(self, out: TextIO | None = None) -> None:
        """Write the in-order rendering to out, standard output by default."""
        (sys.stdout if out is None else out).write(self.format_in_order())

    def print_vertical(self, out: TextIO | None = None) -> None:
        """Write the vertical rendering to out, standard output by default."""
        (sys.stdout if out is None else out).write(self.format_vertical())

    def run_debugging_checks(self) -> bool:
        """Verify heights, balance and ordering when checks are enabled."""
        if self.debug_checks:
            run_checks(self._root)
        return True