"""Walk-through of the priority queue as a minimum and as a maximum heap."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from operator import attrgetter
from typing import Optional, Sequence

from dstructs.pq_render import render_heap
from dstructs.priority_queue import HeapKind, PriorityQueue

_RULE = "-" * 41


@dataclass(frozen=True)
class Student:
    """A student record with two scores."""

    id: str
    math: int
    eng: int


_ROSTER = (
    ("A", 70, 100),
    ("B", 60, 90),
    ("C", 80, 95),
    ("D", 65, 90),
    ("E", 10, 70),
    ("F", 90, 90),
    ("G", 20, 60),
    ("H", 30, 50),
    ("I", 40, 40),
    ("J", 50, 30),
)


def _picture(queue: PriorityQueue) -> list[str]:
    drawing = render_heap(queue.items(), label=attrgetter("math"))
    if not drawing:
        return []
    return [""] + drawing.rstrip("\n").split("\n")


def _run(kind: HeapKind, title: str, report: bool) -> list[str]:
    students = [Student(*row) for row in _ROSTER]
    lines = ["", _RULE, title]
    if report:
        lines.append(_RULE)
    queue = PriorityQueue(kind, len(students), key=attrgetter("math"))
    if report:
        lines.append(f"is queue empty? {queue.is_empty()}")

    for student in students:
        queue.enqueue(student)
        lines.extend(_picture(queue))

    lines.append("")
    if report:
        lines.append(f"the tree level is : {queue.level()}")
        lines.append("")
        lines.append(f"is queue full? {queue.is_full()}")
        lines.append("")

    lines.append(_RULE)
    lines.append("DELETE")
    while not queue.is_empty():
        lines.append(_RULE)
        lines.append(f"get : {queue.dequeue().math}")
        lines.extend(_picture(queue))
    return lines


def pq_demo() -> str:
    """Run the minimum- and maximum-heap walk-throughs and return the transcript."""
    lines = _run(HeapKind.MIN, "MINIMUM HEAP", report=True)
    lines += _run(HeapKind.MAX, "MAXIMUM HEAP", report=False)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the priority queue walk-through."""
    parser = argparse.ArgumentParser(description="Priority queue walk-through.")
    parser.parse_args(argv)
    print(pq_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())