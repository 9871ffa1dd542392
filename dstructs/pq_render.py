"""ASCII drawing of a heap laid out in array order."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional


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


def render_heap(items: Iterable[Any], label: Optional[Callable[[Any], Any]] = None) -> str:
    """Draw the heap stored in ``items`` and return the picture, one line per row."""
    heap = list(items)
    if not heap:
        return ""
    show: Callable[[Any], str] = str if label is None else (lambda item: str(label(item)))

    size = len(heap)
    height = size.bit_length() - 1
    width = 2 ** (height + 2) - 1
    steps = [_rows_for(level) for level in range(height, 0, -1)]
    words = (show(item) for item in heap)

    marks = [" "] * width
    marks[width // 2] = "*"
    lines: list[str] = []
    next_parent = 1

    def set_mark(index: int, value: str) -> None:
        if 0 <= index < width:
            marks[index] = value

    def draw_words(text: list[str], root_row: bool) -> None:
        side = 0
        for k in range(width):
            if marks[k] != "*":
                continue
            word = next(words, None)
            if word is None:
                continue
            side += 1
            if side % 2 == 1:
                start = k - len(word) // 2 if root_row else k
            else:
                start = k - len(word) + 1
            _place(text, start, word)

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
                    if 2 * next_parent <= size:
                        set_mark(m - 1, "L")
                    if 2 * next_parent + 1 <= size:
                        set_mark(m + 1, "R")
                    marks[m] = " "
                    next_parent += 1

        marks = ["*" if mark in ("L", "R") else mark for mark in marks]

    text = [" "] * width
    draw_words(text, root_row=False)
    lines.append("".join(text))
    return "\n".join(lines) + "\n"