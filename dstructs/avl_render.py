"""ASCII drawing of an AVL tree with labels hugging their branches."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Optional

from dstructs.avl import AVLNode


def _levels(root: AVLNode) -> tuple[int, list[AVLNode]]:
    order: list[AVLNode] = []
    height = -1
    level = [root]
    while level:
        height += 1
        order.extend(level)
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return height, order


def _rows_for(level: int) -> int:
    if level == 0:
        return 0
    if level == 1:
        return 3
    return 2**level


def _place(text: list[str], start: int, word: str) -> None:
    for offset, char in enumerate(word):
        index = start + offset
        if 0 <= index < len(text):
            text[index] = char


def render_avl_tree(root: Optional[AVLNode], label: Optional[Callable[[Any], Any]] = None) -> str:
    """Draw the tree under ``root`` and return the picture, one line per row."""
    if root is None:
        return ""
    show = (lambda item: str(item)) if label is None else (lambda item: str(label(item)))

    height, order = _levels(root)
    queue = deque(order)
    pending_children = deque(order)
    width = 2 ** (height + 2) - 1
    steps = [_rows_for(level) for level in range(height, 0, -1)]

    marks = [" "] * width
    marks[width // 2] = "*"
    lines: list[str] = []

    def mark_at(index: int) -> str:
        return marks[index] if 0 <= index < width else " "

    def set_mark(index: int, value: str) -> None:
        if 0 <= index < width:
            marks[index] = value

    def draw_words(text: list[str], root_row: bool) -> None:
        for k in range(width):
            if marks[k] != "*":
                continue
            if not queue:
                continue
            word = show(queue.popleft().item)
            if root_row:
                _place(text, k - len(word) // 2, word)
            if mark_at(k + 1) == "<":
                _place(text, k, word)
                set_mark(k + 1, " ")
            if mark_at(k - 1) == ">":
                _place(text, k - len(word) + 1, word)
                set_mark(k - 1, " ")

    for depth, rows in enumerate(steps):
        for _ in range(rows):
            text = [" "] * width
            for k in range(width):
                if marks[k] == "L":
                    text[k] = "/"
                if marks[k] == "R":
                    text[k] = "\\"
            draw_words(text, root_row=depth == 0)
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

        for i in range(width):
            if marks[i] == "L":
                marks[i] = "*"
                set_mark(i + 1, "<")
            if marks[i] == "R":
                marks[i] = "*"
                set_mark(i - 1, ">")

    text = [" "] * width
    draw_words(text, root_row=height == 0)
    lines.append("".join(text))
    return "\n".join(lines) + "\n"