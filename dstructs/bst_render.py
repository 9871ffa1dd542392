"""ASCII drawing of a binary tree with slanted branches."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Optional

from dstructs.bst import TreeNode


def _levels(root: TreeNode) -> tuple[int, list[TreeNode]]:
    order: list[TreeNode] = []
    height = -1
    level = [root]
    while level:
        height += 1
        order.extend(level)
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return height, order


def _rows_for(level: int) -> int:
    return 2 if level == 0 else 3 * 2 ** (level - 1)


def _place(text: list[str], center: int, word: str) -> None:
    start = center - len(word) // 2
    for offset, char in enumerate(word):
        index = start + offset
        if 0 <= index < len(text):
            text[index] = char


def render_tree(root: Optional[TreeNode], label: Optional[Callable[[Any], Any]] = None) -> str:
    """Draw the tree under ``root`` and return the picture, one line per row."""
    if root is None:
        return ""
    show = (lambda item: str(item)) if label is None else (lambda item: str(label(item)))

    height, order = _levels(root)
    queue = deque(order)
    pending_children = deque(order)
    width = 3 * 2 ** height - 1
    steps = [_rows_for(height - 1 - i) for i in range(height)]

    marks = [" "] * width
    marks[width // 2] = "*"
    lines: list[str] = []

    def set_mark(index: int, value: str) -> None:
        if 0 <= index < width:
            marks[index] = value

    for rows in steps:
        for _ in range(rows):
            text = [" "] * width
            for k in range(width):
                if marks[k] == "L":
                    text[k] = "/"
                if marks[k] == "R":
                    text[k] = "\\"
                if marks[k] == "*" and queue:
                    _place(text, k, show(queue.popleft().item))
            lines.append("".join(text))

            for m in range(width):
                if text[m] == "/":
                    marks[m] = " "
                    set_mark(m - 1, "L")
                if text[m] == "\\":
                    marks[m] = " "
                    set_mark(m + 1, "R")
                if marks[m] == "*":
                    if pending_children:
                        node = pending_children.popleft()
                        if node.left is not None:
                            set_mark(m - 1, "L")
                        if node.right is not None:
                            set_mark(m + 1, "R")
                    marks[m] = " "

        marks = ["*" if mark in ("L", "R") else mark for mark in marks]

    text = [" "] * width
    for k in range(width):
        if marks[k] == "*" and queue:
            _place(text, k, show(queue.popleft().item))
    lines.append("".join(text))
    return "\n".join(lines) + "\n"