"""A binary tree holding value copies, built level by level."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """A node storing one value and links to its two children."""

    data: T
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None


class ValueBinaryTree(Generic[T]):
    """A binary tree whose root is exposed for direct manipulation."""

    def __init__(self, contents: Iterable[T] | None = None) -> None:
        self.root: Optional[TreeNode[T]] = None
        if contents is not None:
            self.create_complete_tree(contents)

    def create_complete_tree(self, contents: Iterable[T]) -> None:
        """Replace the tree with a complete tree filled level by level, left to right."""
        self.clear()
        items = iter(contents)
        try:
            first = next(items)
        except StopIteration:
            return
        self.root = TreeNode(first)
        # Each entry is a parent awaiting a child and the side to attach it on.
        slots: deque[tuple[TreeNode[T], str]] = deque(
            [(self.root, "left"), (self.root, "right")]
        )
        for value in items:
            parent, side = slots.popleft()
            child = TreeNode(value)
            setattr(parent, side, child)
            slots.append((child, "left"))
            slots.append((child, "right"))

    def clear(self) -> None:
        """Remove every node from the tree."""
        self.root = None

    def pre_order(self, node: Optional[TreeNode[T]]) -> Iterator[T]:
        """Yield values of the subtree at node: node, left, right."""
        if node is not None:
            yield node.data
            yield from self.pre_order(node.left)
            yield from self.pre_order(node.right)

    def in_order(self, node: Optional[TreeNode[T]]) -> Iterator[T]:
        """Yield values of the subtree at node: left, node, right."""
        if node is not None:
            yield from self.in_order(node.left)
            yield node.data
            yield from self.in_order(node.right)

    def post_order(self, node: Optional[TreeNode[T]]) -> Iterator[T]:
        """Yield values of the subtree at node: left, right, node."""
        if node is not None:
            yield from self.post_order(node.left)
            yield from self.post_order(node.right)
            yield node.data

    def shout(self, node: Optional[TreeNode[T]], out: TextIO | None = None) -> None:
        """Write the node's value followed by a space; only the space for no node."""
        stream = sys.stdout if out is None else out
        if node is not None:
            stream.write(str(node.data))
        stream.write(" ")