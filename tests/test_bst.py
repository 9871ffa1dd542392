from dataclasses import dataclass

import pytest

from dstructs.bst import BinarySearchTree


@dataclass
class Person:
    data: int
    name: str


def _data(person):
    return person.data


@pytest.fixture
def people():
    return {
        "root": Person(7, "David"),
        "a": Person(3, "Kent"),
        "b": Person(2, "John"),
        "c": Person(8, "Alice"),
        "d": Person(4, "Alisa"),
    }


@pytest.fixture
def tree_one(people):
    tree = BinarySearchTree(key=_data)
    for name in ("root", "a", "b", "c", "d"):
        tree.insert(people[name])
    return tree


def test_inorder_is_sorted(tree_one, people):
    assert [p.data for p in tree_one.inorder()] == sorted(p.data for p in people.values())
    assert list(tree_one) == list(tree_one.inorder())
    assert len(tree_one) == 5


def test_level_order(tree_one):
    assert [p.data for p in tree_one.level_order()] == [7, 3, 8, 2, 4]


def test_find_by_key(tree_one):
    assert tree_one.find(2).name == "John"
    assert tree_one.find(7).name == "David"
    assert tree_one.find(3).name == "Kent"
    assert tree_one.find(8).name == "Alice"
    assert tree_one.find(99) is None


def test_min_and_max(tree_one, people):
    assert tree_one.minimum().data == min(p.data for p in people.values())
    assert tree_one.maximum().data == max(p.data for p in people.values())


def test_copy_is_equal_and_independent(tree_one, people):
    tree_two = tree_one.copy()
    assert tree_two == tree_one
    assert tree_two.level_order() == tree_one.level_order()
    tree_one.delete(people["a"])
    assert tree_two != tree_one
    assert len(tree_two) == 5


def test_delete_sequence(tree_one, people):
    tree_one.delete(people["a"])
    assert [p.data for p in tree_one.level_order()] == [7, 4, 8, 2]
    tree_one.delete(people["root"])
    assert tree_one.root.item == people["c"]
    tree_one.delete(people["c"])
    assert [p.name for p in tree_one] == ["John", "Alisa"]
    assert len(tree_one) == 2


def test_successor_replaces_deleted_inner_node():
    values = [10, 5, 15, 12, 20, 13]
    tree = BinarySearchTree()
    for v in values:
        tree.insert(v)
    tree.delete(10)
    assert tree.root.item == min(v for v in values if v > 10)
    assert list(tree) == sorted(v for v in values if v != 10)


def test_tree_three_height_and_deletes():
    values = [10, 7, 16, 13, 15, 17, 11, 20, 2, 9, 6, 5, 0, 8, 1]
    tree = BinarySearchTree()
    for v in values:
        tree.insert(v)
    assert list(tree) == sorted(values)
    assert tree.height() == 4
    remaining = set(values)
    for v in (10, 7, 2):
        tree.delete(v)
        remaining.discard(v)
        assert list(tree) == sorted(remaining)
    with pytest.raises(ValueError):
        tree.insert(17)
    tree.delete(16)
    remaining.discard(16)
    assert list(tree) == sorted(remaining)
    assert len(tree) == len(remaining)


def test_duplicate_insert_raises(tree_one, people):
    with pytest.raises(ValueError):
        tree_one.insert(Person(3, "Other"))
    assert tree_one.find(3).name == "Kent"
    assert len(tree_one) == 5


def test_delete_missing_raises(tree_one):
    with pytest.raises(KeyError):
        tree_one.delete(Person(42, "Nobody"))
    assert len(tree_one) == 5


def test_empty_tree_errors():
    tree = BinarySearchTree()
    with pytest.raises(KeyError):
        tree.delete(1)
    with pytest.raises(ValueError):
        tree.minimum()
    with pytest.raises(ValueError):
        tree.maximum()
    with pytest.raises(ValueError):
        tree.height()
    assert tree.level_order() == []
    assert list(tree) == []


def test_equality_depends_on_shape():
    left = BinarySearchTree()
    right = BinarySearchTree()
    for v in (1, 2):
        left.insert(v)
    for v in (2, 1):
        right.insert(v)
    assert list(left) == list(right)
    assert left != right


def test_delete_until_empty():
    values = [50, 30, 70, 20, 40, 60, 80]
    tree = BinarySearchTree()
    for v in values:
        tree.insert(v)
    for v in values:
        tree.delete(v)
        assert tree.find(v) is None
    assert len(tree) == 0
    assert tree.root is None