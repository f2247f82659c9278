"""Teaching data structures: a cube, a complete binary tree and an AVL tree."""

__version__ = "0.1.0"
__all__ = [
    "avl",
    "avl_checks",
    "avl_demo",
    "avl_node",
    "binary_tree",
    "cube",
    "traversal_demo",
]