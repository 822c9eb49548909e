from .avl_tree import AVLTree
from .tree_printer import TreeLine, TreePrinter

__all__ = ["AVLTree", "TreeLine", "TreePrinter"]
