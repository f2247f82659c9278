# treelab

Small, readable data structures for studying trees:

- `treelab.cube.Cube` is a cube with an edge `length`, `volume()`,
  `surface_area()` and equality by length.
- `treelab.binary_tree.ValueBinaryTree` is a binary tree built level by level
  as a complete tree from a list of values. It has generator traversals
  `pre_order`, `in_order` and `post_order`, and `shout` to write one node's
  value. Its `root` is a plain `TreeNode` that you may edit by hand.
- `treelab.avl.AVLTree` is a key/data AVL tree. It rebalances on insert and
  remove. After every change it checks its own heights, balance and ordering,
  as long as `AVLTree.debug_checks` is true, which is the default.

The AVL building blocks live in `treelab.avl_node`: the `AVLNode` type,
`height`, `balance_factor`, `update_height`, the rotations and
`ensure_balance`. The consistency checks (`check_heights`, `check_balance`,
`check_order`, `run_checks`, which raises `DebugCheckError`) and the text
renderings (`format_in_order`, `format_vertical`) live in `treelab.avl_checks`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from treelab.avl import AVLTree

tree = AVLTree()
for key in (37, 19, 51, 55, 4):
    tree.insert(key, str(key))

tree.find(51)        # "51"
51 in tree           # True
tree.remove(19)      # "19"
list(tree.items())   # [(4, "4"), (37, "37"), (51, "51"), (55, "55")]
print(tree.format_in_order())
print(tree.format_vertical())
```

`find` and `remove` raise `KeyError` for a missing key. `insert` raises
`ValueError` for a key that is already present. Keys must be mutually
comparable with `<` and `==`.

```python
from treelab.binary_tree import ValueBinaryTree

tree = ValueBinaryTree([1, 2, 3, 4, 5, 6, 7])
list(tree.pre_order(tree.root))   # [1, 2, 4, 5, 3, 6, 7]
list(tree.in_order(tree.root))    # [4, 2, 5, 1, 6, 3, 7]
list(tree.post_order(tree.root))  # [4, 5, 2, 6, 7, 3, 1]
```

## Command-line demos

Two commands walk through the structures and print what happens.

```
treelab-traversals
```

This prints the three traversals of a complete seven-node tree. It then prints
the traversals of the expression tree for `a - b / c + d * e`.

```
treelab-avl
```

This builds an AVL tree and prints it in order and as a vertical diagram. It
shows the errors for missing keys. It then runs an extended insert/remove
sequence over keys 10 to 900, and the tree checks itself throughout.

Neither command takes options beyond `--help`.

## What it does not do

The trees live in memory only. They have no persistence, no thread safety and
no duplicate keys. With checks enabled, every AVL insert and remove walks the
whole tree, so set `AVLTree.debug_checks = False` when speed matters.