import sys
from typing import TypeVar, Generic, List, Callable, Optional, TextIO

from .tree_printer import TreePrinter

T = TypeVar('T')


class AVLTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 1

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    @staticmethod
    def _get_height(node: Optional[Node]) -> int:
        if node is None:
            return 0
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def balance_factor(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _right_rotate(self, y: Node) -> Node:
        x = y.left
        assert x is not None
        b = x.right

        x.right = y
        y.left = b

        self._update_height(y)
        self._update_height(x)

        return x

    def _left_rotate(self, x: Node) -> Node:
        y = x.right
        assert y is not None
        b = y.left

        y.left = x
        x.right = b

        self._update_height(x)
        self._update_height(y)

        return y

    def _rebalance(self, node: Node) -> Node:
        self._update_height(node)
        balance = self.balance_factor(node)

        if balance > 1:
            if self.balance_factor(node.left) < 0:
                assert node.left is not None
                node.left = self._left_rotate(node.left)
            return self._right_rotate(node)

        if balance < -1:
            if self.balance_factor(node.right) > 0:
                assert node.right is not None
                node.right = self._right_rotate(node.right)
            return self._left_rotate(node)

        return node

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return AVLTree.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        return self._rebalance(node)

    def insert(self, value: T) -> None:
        self._root = self._insert(self._root, value)

    @staticmethod
    def _find_min_node(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        else:
            if node.left is None:
                self._size -= 1
                return node.right
            elif node.right is None:
                self._size -= 1
                return node.left
            else:
                successor = self._find_min_node(node.right)
                node.value = successor.value
                node.right = self._remove(node.right, successor.value)

        return self._rebalance(node)

    def remove(self, value: T) -> None:
        self._root = self._remove(self._root, value)

    def _search(self, value: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def contains(self, value: T) -> bool:
        return self._search(value) is not None

    def get(self, value: T) -> Optional[T]:
        """Return the stored element equal to ``value``, or None.

        Equality is decided by the ordering alone, so the returned element
        may carry different satellite data than ``value``.
        """
        node = self._search(value)
        if node is None:
            return None
        return node.value

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min_node(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        return self._get_height(self._root)

    def _inorder(self, node: Optional[Node], visit: Callable[[T], None]) -> None:
        if node is None:
            return
        self._inorder(node.left, visit)
        visit(node.value)
        self._inorder(node.right, visit)

    def inorder(self, visit: Callable[[T], None]) -> None:
        """Call ``visit`` on every element in ascending order.

        ``visit`` must not mutate the tree.
        """
        self._inorder(self._root, visit)

    def in_order(self) -> List[T]:
        result: List[T] = []
        self.inorder(result.append)
        return result

    def _clone(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None
        clone = AVLTree.Node(node.value)
        clone.left = self._clone(node.left)
        clone.right = self._clone(node.right)
        clone.height = node.height
        return clone

    def copy(self) -> 'AVLTree[T]':
        other: AVLTree[T] = AVLTree()
        other._root = self._clone(self._root)
        other._size = self._size
        return other

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        balance = self.balance_factor(node)
        if abs(balance) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def _label(self, node: Node) -> str:
        return f"{node.value}[{self.balance_factor(node)}]"

    def print(self, out: Optional[TextIO] = None) -> None:
        if out is None:
            out = sys.stdout
        out.write("Tree structure:\n")

        printer: TreePrinter[AVLTree.Node] = TreePrinter(
            self._label,
            lambda node: node.left,
            lambda node: node.right,
            out,
        )
        printer.set_square_branches(True)
        printer.set_hspace(3)
        printer.print_tree(self._root)

        out.write("\nInorder traversal: ")
        self.inorder(lambda value: out.write(f"{value} "))
        out.write("\n")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
