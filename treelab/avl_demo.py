"""Command that exercises an AVL tree with insertions, lookups and removals."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from treelab.avl import AVLTree

_FIRST_KEYS = (37, 19, 51, 55, 4, 11, 20, 2, 3, 5, 6, 7)
_LOW = 10
_HIGH = 900


def run_extended_tests(tree: AVLTree) -> None:
    """Clear the tree, then run a long series of mixed insertions and removals."""
    tree.clear()

    for i in range(_LOW, _HIGH + 1):
        tree.insert(i, str(i))

    for i in range(_LOW, _HIGH + 1, 7):
        tree.remove(i)
    for i in range(_HIGH, _LOW - 1, -3):
        if i in tree:
            tree.remove(i)

    for i in range(_LOW, _HIGH, 2):
        mirrored = _HIGH - i + _LOW
        for key in (i, i + 1, mirrored):
            if key not in tree:
                tree.insert(key, str(key))

    for i in range(_LOW, _HIGH + 1, 7):
        mirrored = _HIGH - i + _LOW
        for key in (i, mirrored):
            if key in tree:
                tree.remove(key)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the AVL tree walkthrough and the extended tests, printing progress."""
    parser = argparse.ArgumentParser(
        prog="avl-demo",
        description="Exercise an AVL tree and print what happens.",
    )
    parser.parse_args(argv)

    print("\nCreating AVL tree now...")
    tree = AVLTree()

    empty_at_beginning = tree.empty()
    print(f"AVL tree empty at the beginning? {str(empty_at_beginning).lower()}")
    if not empty_at_beginning:
        raise RuntimeError("empty() should have been true at the beginning")

    print("Inserting items...")
    for key in _FIRST_KEYS:
        tree.insert(key, str(key))

    empty_after_insertions = tree.empty()
    print(f"AVL tree empty after insertions? {str(empty_after_insertions).lower()}")
    if empty_after_insertions:
        raise RuntimeError("empty() should have been false after insertions")

    print("\nCurrent tree contents in order:")
    tree.print_in_order()
    print()

    print("\nUsing find to show that 51 has been inserted:")
    print(f"t.find(51): {tree.find(51)}")

    print("\nTrying to remove some items:")
    for key in (11, 51, 19, 6):
        print(f"t.remove({key}): {tree.remove(key)}")

    print("\nCurrent tree contents in order:")
    tree.print_in_order()
    print()

    print("\nVertical printout of the tree:")
    tree.print_vertical()

    print()
    print("Attempting to find a non-existent item, 51: ")
    try:
        print(f"t.find(51): {tree.find(51)}")
    except KeyError as error:
        print("(OK) Caught example exception with the following message:")
        print(f'"{error.args[0]}"')

    print()
    print("Attempting to remove a non-existent item, 99: ")
    try:
        print(f"t.remove(99): {tree.remove(99)}")
    except KeyError as error:
        print("(OK) Caught example exception with the following message:")
        print(f'"{error.args[0]}"')

    print("\n --- Beginning extended tests ---\n"
          "  (Many items will be inserted and removed silently...)")
    run_extended_tests(tree)
    print("\nExtended insert and remove tests OK")
    print("\n --- End of extended tests ---")

    print("\nAVL tree will go out of scope and be destroyed now."
          "\n(All nodes will be removed...)")
    tree.clear()

    print("\nSUCCESS - The program is exiting normally.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())