"""Consistency checks and text renderings for AVL subtrees.

The checks are deliberately brute-force: they walk the whole subtree and
are meant for catching implementation mistakes, not for fast paths.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional

from treelab.avl_node import AVLNode, balance_factor, height


class DebugCheckError(RuntimeError):
    """Raised when an AVL subtree fails one of the consistency checks."""


def check_heights(node: Optional[AVLNode]) -> bool:
    """Return True if every recorded height is one more than its tallest child's."""
    if node is None:
        return True
    if not check_heights(node.left) or not check_heights(node.right):
        return False
    here = height(node)
    left = height(node.left)
    right = height(node.right)
    ok = here - max(left, right) == 1
    if not ok:
        print(
            f"height check internals:\nhere: {here}\nleft: {left}\nright: {right}",
            file=sys.stderr,
        )
    return ok


def check_balance(node: Optional[AVLNode]) -> bool:
    """Return True if every node has a balance factor between -1 and 1."""
    if node is None:
        return True
    if not check_balance(node.left) or not check_balance(node.right):
        return False
    return -1 <= height(node.right) - height(node.left) <= 1


def _in_order_nodes(node: Optional[AVLNode]) -> Iterator[AVLNode]:
    """Yield the nodes of the subtree in order without recursion."""
    stack: list[AVLNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def check_order(node: Optional[AVLNode]) -> bool:
    """Return True if the in-order keys are strictly increasing."""
    previous: Any = None
    first = True
    for current in _in_order_nodes(node):
        if not first and previous >= current.key:
            print(
                "These keys should be in strictly increasing order:\n"
                f"{previous} followed by {current.key}",
                file=sys.stderr,
            )
            return False
        previous = current.key
        first = False
    return True


def run_checks(node: Optional[AVLNode]) -> bool:
    """Run every check on the subtree, raising DebugCheckError on the first failure."""
    if not check_heights(node):
        raise DebugCheckError("height check failed")
    if not check_balance(node):
        raise DebugCheckError("balance check failed")
    if not check_order(node):
        raise DebugCheckError("order check failed")
    return True


def format_in_order(node: Optional[AVLNode]) -> str:
    """Render the subtree in order; every missing child shows as a single space."""
    if node is None:
        return " "
    return (
        format_in_order(node.left)
        + f"[{node.key} : {node.data}]"
        + format_in_order(node.right)
    )


def format_vertical(node: Optional[AVLNode]) -> str:
    """Render the subtree one node per line, children indented under parents.

    Leaves list no children; a node with one child shows the missing one as [].
    """
    lines: list[str] = []
    stack: list[tuple[Optional[AVLNode], int]] = [(node, 0)]
    while stack:
        current, margin = stack.pop()
        prefix = " " * margin + ("|- " if margin > 0 else ". ")
        if current is None:
            lines.append(prefix + "[]\n")
            continue
        if current.left is not None or current.right is not None:
            stack.append((current.right, margin + 1))
            stack.append((current.left, margin + 1))
        lines.append(
            f'{prefix}[{current.key}: "{current.data}"] '
            f"Bal: {balance_factor(current)} Ht: {height(current)}\n"
        )
    return "".join(lines)