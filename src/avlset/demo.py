"""
AVL Tree Demo -- builds a small tree, prints it, probes membership, removes
the root and prints again.
"""

import sys

from .avl_tree import AVLTree

DEMO_VALUES = (10, 20, 30, 40, 50, 25)
PRESENT = 30
ABSENT = 35


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def main() -> int:
    tree: AVLTree[int] = AVLTree()
    for value in DEMO_VALUES:
        tree.insert(value)

    tree.print()

    print(f"Contains {PRESENT}: {_yes_no(tree.contains(PRESENT))}")
    print(f"Contains {ABSENT}: {_yes_no(tree.contains(ABSENT))}")

    tree.remove(PRESENT)
    print(f"\nAfter removing {PRESENT}:")
    tree.print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
