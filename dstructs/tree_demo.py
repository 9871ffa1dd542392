"""Walk-through of the binary search tree and the AVL tree, step by step."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Iterable, Optional, Sequence

from dstructs.avl import AVLTree
from dstructs.avl_render import render_avl_tree
from dstructs.bst import BinarySearchTree
from dstructs.bst_render import render_tree

_RULE = "-" * 38
_SHORT_RULE = "-" * 32


@dataclass(frozen=True)
class _Person:
    data: int
    name: str


@dataclass(frozen=True)
class _Entry:
    name: str
    value: int


def _picture(drawing: str) -> list[str]:
    if not drawing:
        return []
    return [""] + drawing.rstrip("\n").split("\n")


def _bst_picture(tree: BinarySearchTree) -> list[str]:
    return _picture(render_tree(tree.root, attrgetter("data")))


def _avl_picture(tree: AVLTree, label: Callable[[Any], Any]) -> list[str]:
    return _picture(render_avl_tree(tree.root, label))


def _joined(values: Iterable[object]) -> str:
    return " ".join(str(value) for value in values)


def bst_demo() -> str:
    """Run the binary search tree walk-through and return its transcript."""
    out: list[str] = []
    emit = out.append
    by_data = attrgetter("data")

    root = _Person(7, "David")
    a = _Person(3, "Kent")
    b = _Person(2, "John")
    c = _Person(8, "Alice")
    d = _Person(4, "Alisa")
    people = {"root": root, "a": a, "b": b, "c": c, "d": d}

    for person in people.values():
        emit(f"create node : {person.name} {person.data}")
    emit("")

    tree_one = BinarySearchTree(key=by_data)
    for label, person in people.items():
        emit(f"insert {label} to tree_one")
        tree_one.insert(person)
    emit("")

    emit("print tree_one : ")
    out.extend(_bst_picture(tree_one))
    emit("")
    emit(f"print tree_one inorder : {_joined(p.data for p in tree_one.inorder())}")
    emit("")

    emit("copy tree_one to tree_two")
    tree_two = tree_one.copy()
    emit("print tree_two : ")
    out.extend(_bst_picture(tree_two))
    emit("")
    emit(f"print tree_two inorder : {_joined(p.data for p in tree_two.inorder())}")
    emit("")
    emit(f"is tree_one and tree_two equal? : {tree_one == tree_two}")
    emit("")

    for key in (2, 7, 3, 8):
        found = tree_one.find(key)
        emit(f"find who's ID is {key} : {found.name if found is not None else ''}")
    emit("")

    emit(f"find minimum node in tree_one : {tree_one.minimum().data}")
    emit("")
    emit(f"find maximum node in tree_one : {tree_one.maximum().data}")
    emit("")

    emit(f"print level order of tree_two : {_joined(p.data for p in tree_two.level_order())}")
    emit("")

    emit("print tree_one : ")
    out.extend(_bst_picture(tree_one))
    emit("")
    for label, person in (("a", a), ("root", root), ("c", c)):
        emit(f"delete {label}({person.data}) in tree_one : ")
        tree_one.delete(person)
        out.extend(_bst_picture(tree_one))
        emit("")

    emit(f"print tree_one inorder : {_joined(p.data for p in tree_one.inorder())}")
    emit("")
    emit(f"is tree_one and tree_two equal? : {tree_one == tree_two}")

    tests = {
        letter: _Person(value, " ")
        for letter, value in zip(
            "abcdefghijklmno", (10, 7, 16, 13, 15, 17, 11, 20, 2, 9, 6, 5, 0, 8, 1)
        )
    }
    tree_three = BinarySearchTree(key=by_data)
    emit("")
    for letter, person in tests.items():
        emit(f"insert {letter}_test to tree_three")
        tree_three.insert(person)
    emit("")

    emit(f"print tree_three inorder : {_joined(p.data for p in tree_three.inorder())}")
    emit("")
    emit(f"print tree_three level : {tree_three.height()}")
    emit("print tree_three : ")
    out.extend(_bst_picture(tree_three))
    emit("")

    def delete_three(person: _Person) -> None:
        emit("")
        emit(f"delete {person.data} in tree_three : ")
        tree_three.delete(person)
        out.extend(_bst_picture(tree_three))
        emit("")

    delete_three(tests["a"])
    delete_three(tests["b"])
    delete_three(tests["i"])

    emit("")
    emit(f"insert {tests['f'].data} in tree_three : ")
    try:
        tree_three.insert(tests["f"])
    except ValueError:
        emit("node already exists")
    out.extend(_bst_picture(tree_three))
    emit("")

    delete_three(tests["c"])
    return "\n".join(out)


_AVL_VALUES = {
    "A": 20,
    "B": 4,
    "C": 26,
    "D": 3,
    "E": 9,
    "F": 21,
    "G": 30,
    "H": 2,
    "I": 7,
    "J": 11,
    "K": 15,
    "L": 8,
}


def _avl_from(names: str, values: dict[str, int]) -> AVLTree:
    tree = AVLTree(key=attrgetter("value"))
    for name in names:
        tree.insert(_Entry(name, values[name]))
    return tree


def avl_demo() -> str:
    """Run the AVL tree walk-through and return its transcript."""
    out: list[str] = []
    emit = out.append
    by_value = attrgetter("value")
    by_name = attrgetter("name")

    cases = (("a", "AB"), ("b", "ABCDE"), ("c", "ABCDEFGHIJ"))
    tree = AVLTree(key=by_value)
    for case, names in cases:
        emit("")
        emit(_RULE)
        emit(f"case {case}")
        emit(_RULE)
        out.extend(_avl_picture(_avl_from(names, _AVL_VALUES), by_value))
        for extra in "KL":
            emit("")
            emit(f"----- case {case} insert {_AVL_VALUES[extra]} -----")
            tree = _avl_from(names + extra, _AVL_VALUES)
            out.extend(_avl_picture(tree, by_value))

    emit("")
    out.extend(_avl_picture(tree, by_name))
    emit("")

    found = tree.find(8)
    emit(f"who's value is 8 ? : {found.name if found is not None else ''}")
    emit(f"who's value is minimum ? : {tree.minimum().name}")
    emit(f"who's value is maximum ? : {tree.maximum().name}")
    emit("")
    emit(_SHORT_RULE)

    for key in (8, 7, 11, 26, 21, 30, 2, 20):
        found = tree.find(key)
        if found is None:
            continue
        emit(f"delete {found.value}")
        tree.delete(found)
        out.extend(_avl_picture(tree, by_value))
        emit("")
        emit(_SHORT_RULE)

    emit("home work example")
    emit("90 80 70 60 65 67")
    emit(_SHORT_RULE)
    homework = {"A": 90, "B": 80, "C": 70, "D": 60, "E": 65, "F": 67}
    out.extend(_avl_picture(_avl_from("ABCDEF", homework), by_value))
    return "\n".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the transcript of one or both tree walk-throughs."""
    parser = argparse.ArgumentParser(description="Search tree walk-through.")
    parser.add_argument(
        "which",
        nargs="?",
        choices=("bst", "avl", "both"),
        default="both",
        help="which tree to demonstrate",
    )
    args = parser.parse_args(argv)
    if args.which in ("bst", "both"):
        print(bst_demo())
    if args.which in ("avl", "both"):
        print(avl_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())