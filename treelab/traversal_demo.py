"""Command that shows pre-, in- and post-order traversals of two example trees."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

from treelab.binary_tree import TreeNode, ValueBinaryTree


def format_traversal(values: Iterable[Any]) -> str:
    """Render traversal output: each value followed by a single space."""
    return "".join(f"{value} " for value in values)


def build_algebra_tree() -> ValueBinaryTree[str]:
    """Build the syntax tree of the expression a - b / c + d * e."""
    tree: ValueBinaryTree[str] = ValueBinaryTree(["+", "-", "*", "a", "/", "d", "e"])
    assert tree.root is not None and tree.root.left is not None
    slash = tree.root.left.right
    assert slash is not None
    slash.left = TreeNode("b")
    slash.right = TreeNode("c")
    return tree


def _show(title: str, values: Iterable[Any], note: str | None = None) -> None:
    print(title)
    if note is not None:
        print(note)
    print(format_traversal(values))
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the traversals of a complete tree and of an algebraic syntax tree."""
    parser = argparse.ArgumentParser(
        prog="traversal-demo",
        description="Show pre-order, in-order and post-order tree traversals.",
    )
    parser.parse_args(argv)

    seven_tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
    root = seven_tree.root
    _show(
        "Example of pre-order traversal with a complete tree: ",
        seven_tree.pre_order(root),
    )
    _show(
        "Example of in-order traversal with a complete tree: ",
        seven_tree.in_order(root),
    )
    _show(
        "Example of post-order traversal with a complete tree: ",
        seven_tree.post_order(root),
    )

    algebra_tree = build_algebra_tree()
    root_s = algebra_tree.root
    _show(
        "Pre-order traversal of algebraic syntax tree:",
        algebra_tree.pre_order(root_s),
        " (This output won't make sense...)",
    )
    _show(
        "In-order traversal of algebraic syntax tree:",
        algebra_tree.in_order(root_s),
        " (This one should make sense.)",
    )
    _show(
        "Post-order traversal of algebraic syntax tree:",
        algebra_tree.post_order(root_s),
        " (This output won't make sense...)",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())