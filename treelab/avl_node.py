"""AVL tree nodes and the height, balance and rotation operations on them.

Every operation that may change which node roots a subtree returns the new
subtree root; callers store it back into the parent's link.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AVLNode:
    """A node holding a key, its data, two child links and a cached height."""

    key: Any
    data: Any
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 0


def height(node: Optional[AVLNode]) -> int:
    """Return the recorded height of node, or -1 when there is no node."""
    return -1 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return right height minus left height, or 0 when there is no node."""
    if node is None:
        return 0
    return height(node.right) - height(node.left)


def update_height(node: Optional[AVLNode]) -> None:
    """Recompute node's height from its children's recorded heights."""
    if node is None:
        return
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_left(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the subtree at node to the left and return its new root."""
    if node is None:
        raise RuntimeError("rotate_left called on an empty subtree")
    pivot = node.right
    if pivot is None:
        raise RuntimeError("rotate_left: right child is missing")
    node.right = pivot.left
    pivot.left = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the subtree at node to the right and return its new root."""
    if node is None:
        raise RuntimeError("rotate_right called on an empty subtree")
    pivot = node.left
    if pivot is None:
        raise RuntimeError("rotate_right: left child is missing")
    node.left = pivot.right
    pivot.right = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right_left(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the right child right, then node left; return the new root."""
    if node is None:
        raise RuntimeError("rotate_right_left called on an empty subtree")
    node.right = rotate_right(node.right)
    return rotate_left(node)


def rotate_left_right(node: Optional[AVLNode]) -> AVLNode:
    """Rotate the left child left, then node right; return the new root."""
    if node is None:
        raise RuntimeError("rotate_left_right called on an empty subtree")
    node.left = rotate_left(node.left)
    return rotate_right(node)


def ensure_balance(node: Optional[AVLNode]) -> Optional[AVLNode]:
    """Rebalance the subtree at node, update its height and return its root.

    The children's heights are assumed to be correct already.
    """
    if node is None:
        return None

    initial = balance_factor(node)
    if initial < -2 or initial > 2:
        raise RuntimeError(
            f"invalid initial balance factor: {initial}; this should never happen"
        )

    if initial == -2:
        left_balance = balance_factor(node.left)
        if left_balance in (-1, 0):
            node = rotate_right(node)
        elif left_balance == 1:
            node = rotate_left_right(node)
        else:
            raise RuntimeError(
                f"left balance has unexpected value: {left_balance}"
            )
    elif initial == 2:
        right_balance = balance_factor(node.right)
        if right_balance in (1, 0):
            node = rotate_left(node)
        elif right_balance == -1:
            node = rotate_right_left(node)
        else:
            raise RuntimeError(
                f"right balance has unexpected value: {right_balance}"
            )

    update_height(node)

    final = balance_factor(node)
    if final < -1 or final > 1:
        raise RuntimeError(f"invalid balance factor after rebalancing: {final}")
    return node