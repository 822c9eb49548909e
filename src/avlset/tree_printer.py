"""
Tree printer -- ASCII rendering of arbitrary binary trees.

The printer never looks inside a node: three accessors supplied by the caller
give it a node's label and its two children. Each subtree is laid out bottom-up
as a list of TreeLines whose offsets are signed columns relative to that
subtree's center line. A parent places its two children far enough apart that
their rows never collide, draws the branch row(s) between them, and shifts the
child rows by a fixed adjustment while merging them. Only the final print step
turns relative offsets into left and right padding, so every emitted row has
the same width.

Branches are drawn either sloped::

      20
     / \\
    10  30

or squared::

      20
    +-+-+
    10  30
"""

import sys
from typing import Callable, Dict, Generic, List, Optional, TextIO, Tuple, TypeVar

N = TypeVar('N')


class TreeLine:
    """One rendered row plus the columns of its first and last character."""

    def __init__(self, text: str, left_offset: int, right_offset: int) -> None:
        self.text: str = text
        self.left_offset: int = left_offset
        self.right_offset: int = right_offset

    def shifted(self, delta: int) -> 'TreeLine':
        return TreeLine(self.text, self.left_offset + delta, self.right_offset + delta)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeLine):
            return NotImplemented
        return (self.text, self.left_offset, self.right_offset) == \
            (other.text, other.left_offset, other.right_offset)

    def __repr__(self) -> str:
        return f"TreeLine({self.text!r}, {self.left_offset}, {self.right_offset})"


class TreePrinter(Generic[N]):
    """Renders a binary tree described by label/left/right accessors.

    Args:
        get_label: node -> text drawn for that node
        get_left: node -> left child or None
        get_right: node -> right child or None
        out: text sink; defaults to sys.stdout at print time
        square_branches: draw ``+--+`` corners instead of ``/`` and ``\\``
        lr_agnostic: with square branches, draw a single-child branch as a
            centered ``|``
        hspace: minimum gap between sibling subtrees on their tightest row
    """

    def __init__(
        self,
        get_label: Callable[[N], str],
        get_left: Callable[[N], Optional[N]],
        get_right: Callable[[N], Optional[N]],
        out: Optional[TextIO] = None,
        *,
        square_branches: bool = False,
        lr_agnostic: bool = False,
        hspace: int = 2,
    ) -> None:
        self._get_label = get_label
        self._get_left = get_left
        self._get_right = get_right
        self._out = out
        self._square_branches = square_branches
        self._lr_agnostic = lr_agnostic
        self.set_hspace(hspace)

    def set_square_branches(self, value: bool) -> None:
        self._square_branches = value

    def set_lr_agnostic(self, value: bool) -> None:
        self._lr_agnostic = value

    def set_hspace(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"hspace must be >= 1, got {value}")
        self._hspace = value

    @staticmethod
    def _spaces(n: int) -> str:
        return " " * max(0, n)

    def _build_tree_lines(self, root: Optional[N]) -> List[TreeLine]:
        if root is None:
            return []

        # post-order walk; finished subtrees are keyed by node identity and
        # each parent entry keeps its children alive until they are merged
        done: Dict[int, List[TreeLine]] = {}
        stack: List[Tuple[N, bool, Optional[N], Optional[N]]] = [(root, False, None, None)]
        while stack:
            node, expanded, left, right = stack.pop()
            if not expanded:
                left = self._get_left(node)
                right = self._get_right(node)
                stack.append((node, True, left, right))
                if right is not None:
                    stack.append((right, False, None, None))
                if left is not None:
                    stack.append((left, False, None, None))
                continue
            left_lines = done.pop(id(left)) if left is not None else []
            right_lines = done.pop(id(right)) if right is not None else []
            done[id(node)] = self._layout(self._get_label(node), left_lines, right_lines)

        return done[id(root)]

    def _layout(self, label: str, left_lines: List[TreeLine],
                right_lines: List[TreeLine]) -> List[TreeLine]:
        max_root_spacing = 0
        for left_line, right_line in zip(left_lines, right_lines):
            spacing = left_line.right_offset - right_line.left_offset
            max_root_spacing = max(max_root_spacing, spacing)

        # odd spacing keeps a single center column for the parent
        root_spacing = max_root_spacing + self._hspace
        if root_spacing % 2 == 0:
            root_spacing += 1

        lines = [TreeLine(label, -((len(label) - 1) // 2), len(label) // 2)]

        left_adjust = 0
        right_adjust = 0

        if not left_lines:
            if right_lines:
                if self._square_branches:
                    if self._lr_agnostic:
                        lines.append(TreeLine("|", 0, 0))
                    else:
                        lines.append(TreeLine("+--+", 0, 3))
                        right_adjust = 3
                else:
                    lines.append(TreeLine("\\", 1, 1))
                    right_adjust = 2
        elif not right_lines:
            if self._square_branches:
                if self._lr_agnostic:
                    lines.append(TreeLine("|", 0, 0))
                else:
                    lines.append(TreeLine("+--+", -3, 0))
                    left_adjust = -3
            else:
                lines.append(TreeLine("/", -1, -1))
                left_adjust = -2
        elif self._square_branches:
            adjust = root_spacing // 2 + 1
            horizontal = "-" * (root_spacing // 2)
            lines.append(TreeLine("+" + horizontal + "+" + horizontal + "+", -adjust, adjust))
            left_adjust = -adjust
            right_adjust = adjust
        elif root_spacing == 1:
            lines.append(TreeLine("/ \\", -1, 1))
            left_adjust = -2
            right_adjust = 2
        else:
            for i in range(1, root_spacing, 2):
                reach = (i + 1) // 2
                lines.append(TreeLine("/" + self._spaces(i) + "\\", -reach, reach))
            left_adjust = -(root_spacing // 2 + 1)
            right_adjust = root_spacing // 2 + 1

        if root_spacing == 1:
            merge_spacing = 1 if self._square_branches else 3
        else:
            merge_spacing = root_spacing

        for i in range(max(len(left_lines), len(right_lines))):
            if i >= len(left_lines):
                lines.append(right_lines[i].shifted(right_adjust))
            elif i >= len(right_lines):
                lines.append(left_lines[i].shifted(left_adjust))
            else:
                left_line = left_lines[i]
                right_line = right_lines[i]
                gap = merge_spacing - left_line.right_offset + right_line.left_offset
                lines.append(TreeLine(
                    left_line.text + self._spaces(gap) + right_line.text,
                    left_line.left_offset + left_adjust,
                    right_line.right_offset + right_adjust,
                ))

        return lines

    def render(self, root: Optional[N]) -> List[str]:
        tree_lines = self._build_tree_lines(root)
        if not tree_lines:
            return []

        min_left = min(line.left_offset for line in tree_lines)
        max_right = max(line.right_offset for line in tree_lines)
        return [
            self._spaces(line.left_offset - min_left)
            + line.text
            + self._spaces(max_right - line.right_offset)
            for line in tree_lines
        ]

    def print_tree(self, root: Optional[N]) -> None:
        out = self._out if self._out is not None else sys.stdout
        for row in self.render(root):
            out.write(row + "\n")
