"""Walk-through of the singly and doubly linked lists, step by step."""

from __future__ import annotations

import argparse
from typing import Iterable, Optional, Sequence

from dstructs.doubly_linked_list import DoublyLinkedList
from dstructs.linked_list import LinkedList


def _show(values: Iterable[object]) -> str:
    return ">>> " + "".join(f"{value} " for value in values) + "end"


def _count_line(total: int) -> str:
    return f">>> There are totally {total} nodes"


def linked_list_demo() -> str:
    """Run the singly linked list walk-through and return its transcript."""
    out: list[str] = []
    emit = out.append

    emit("Test program begin")
    emit("")

    emit("1.Apply a empty list")
    list_one = LinkedList()
    emit("")

    emit("2.Test list is empty?")
    if list_one.is_empty():
        emit(">>> next is empty")
    emit("")

    emit("3.Create nodes z a b c d e f")
    emit("")

    emit("4.Test tail when list_one is empty")
    if list_one.tail() is None:
        emit(">>> This is an empty list")
    emit("")

    emit("5.Use add_first insert z as first node of list_one")
    z = list_one.add_first("z")
    emit(_show(list_one))
    emit("")

    emit("6.Use insert_after insert a after z")
    a = list_one.insert_after(z, "a")
    emit(_show(list_one))
    emit("")

    emit("7.Use insert_after insert b after a")
    b = list_one.insert_after(a, "b")
    emit(_show(list_one))
    emit("")

    emit("8.Use insert_after insert c after a")
    c = list_one.insert_after(a, "c")
    emit(_show(list_one))
    emit("")

    emit("9.Use insert_after insert d after b")
    list_one.insert_after(b, "d")
    emit(_show(list_one))
    emit("")

    emit("11.Use add_first insert e as first of list_one")
    list_one.add_first("e")
    emit(_show(list_one))
    emit("")

    emit("12.Test tail when list_one not empty")
    tail = list_one.tail()
    emit(f">>> The tail is {tail.value if tail is not None else ''}")
    emit(_show(list_one))
    emit("")

    emit("13.Using add_tail insert f as tail of list_one")
    list_one.add_tail("f")
    emit(_show(list_one))
    emit("")

    emit("14.Print data for each node in list_one")
    emit(_show(list_one))
    emit("")

    emit("15.Calculate how many nodes are in list_one")
    emit(_count_line(len(list_one)))
    emit("")

    emit("17.Get the next node of c")
    following = c.next
    emit(f">>> The next node of c is {following.value if following is not None else ''}")
    emit(_show(list_one))
    emit("")

    emit("20.Create list_two")
    list_two = LinkedList()
    emit("")

    emit("21.Create nodes g h i j k l m")
    for letter in "ghijklm":
        list_two.add_tail(letter)
    emit(_show(list_two))
    emit("")

    emit("22.Use concat Concatenate list_two after list_one")
    list_one.concat(list_two)
    emit(_show(list_one))
    emit("")

    emit("23.Calculate how many nodes there are now in list_one")
    emit(_count_line(len(list_one)))
    emit("")

    while not list_one.is_empty():
        list_one.pop_first()
        emit(_show(list_one))
    return "\n".join(out)


def doubly_linked_list_demo() -> str:
    """Run the doubly linked list walk-through and return its transcript."""
    out: list[str] = []
    emit = out.append

    emit("Test program begin")
    emit("")

    emit("1.Apply a empty list")
    list_one = DoublyLinkedList()
    emit("")

    emit("2.Test list is empty?")
    if list_one.is_empty():
        emit(">>> The list is empty")
    else:
        emit(">>> The list is not empty")
    emit("")

    emit("3.Create nodes z a b c d e f")
    emit("")

    emit("4.Test tail when list_one is empty")
    if list_one.tail() is None:
        emit(">>> This is an empty list")
    emit("")

    emit("5.Use add_first insert z as first node of list_one")
    z = list_one.add_first("z")
    emit(_show(list_one))
    emit("")

    emit("6.Use insert_after insert a after z")
    a = list_one.insert_after(z, "a")
    emit(_show(list_one))
    emit("")

    emit("7.Use insert_after insert b after a")
    b = list_one.insert_after(a, "b")
    emit(_show(list_one))
    emit("")

    emit("8.Use insert_after insert c after a")
    c = list_one.insert_after(a, "c")
    emit(_show(list_one))
    emit("")

    emit("9.Use insert_before insert d before b")
    list_one.insert_before(b, "d")
    emit(_show(list_one))
    emit("")

    emit("10.Try to insert d before the head of list_one")
    emit(">>> Here is the head, which cannot be inserted in prev")
    emit(_show(list_one))
    emit("")

    emit("11.Use add_first insert e as first of list_one")
    list_one.add_first("e")
    emit(_show(list_one))
    emit("")

    emit("12.Test tail when list_one not empty")
    tail = list_one.tail()
    emit(f">>> The tail is {tail.value if tail is not None else ''}")
    emit(_show(list_one))
    emit("")

    emit("13.Using add_tail insert f as tail of list_one")
    f = list_one.add_tail("f")
    emit(_show(list_one))
    emit("")

    emit("14.Print data for each node in list_one")
    emit(_show(list_one))
    emit("")

    emit("15.Calculate how many nodes are in list_one")
    emit(_count_line(len(list_one)))
    emit("")

    emit("16.Get the previous node of c")
    preceding = c.prev
    emit(f">>> The previous node of c is {preceding.value if preceding is not None else ''}")
    emit(_show(list_one))
    emit("")

    emit("17.Get the next node of c")
    following = c.next
    emit(f">>> The next node of c is {following.value if following is not None else ''}")
    emit(_show(list_one))
    emit("")

    emit("18.Use remove to take c out of list_one")
    list_one.remove(c)
    emit(_show(list_one))
    emit("")

    emit("19.Use remove to take f out of list_one")
    list_one.remove(f)
    emit(_show(list_one))
    emit("")

    emit("20.Create list_two")
    list_two = DoublyLinkedList()
    emit("")

    emit("21.Create nodes g h i j k l m")
    for letter in "ghijklm":
        list_two.add_tail(letter)
    emit(_show(list_two))
    emit("")

    emit("22.Use concat Concatenate list_two after list_one")
    list_one.concat(list_two)
    emit(_show(list_one))
    emit("")

    emit("23.Calculate how many nodes there are now in list_one")
    emit(_count_line(len(list_one)))
    return "\n".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the transcript of one or both list walk-throughs."""
    parser = argparse.ArgumentParser(description="Linked list walk-through.")
    parser.add_argument(
        "which",
        nargs="?",
        choices=("singly", "doubly", "both"),
        default="both",
        help="which list to demonstrate",
    )
    args = parser.parse_args(argv)
    if args.which in ("singly", "both"):
        print(linked_list_demo())
    if args.which in ("doubly", "both"):
        print(doubly_linked_list_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())