import pytest

from dstructs.doubly_linked_list import DoublyLinkedList


def _build_demo():
    lst = DoublyLinkedList()
    z = lst.add_first("z")
    a = lst.insert_after(z, "a")
    b = lst.insert_after(a, "b")
    c = lst.insert_after(a, "c")
    d = lst.insert_before(b, "d")
    return lst, {"z": z, "a": a, "b": b, "c": c, "d": d}


def _assert_links_consistent(lst):
    nodes = list(lst.nodes())
    assert len(nodes) == len(lst)
    for left, right in zip(nodes, nodes[1:]):
        assert left.next is right
        assert right.prev is left
    if nodes:
        assert nodes[0].prev is None
        assert nodes[-1].next is None
        assert lst.first() is nodes[0]
        assert lst.tail() is nodes[-1]


def test_new_list_is_empty():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert lst.tail() is None
    assert list(reversed(lst)) == []


def test_insert_sequence_from_demo():
    lst, nodes = _build_demo()
    assert list(lst) == ["z", "a", "c", "d", "b"]
    lst.add_first("e")
    lst.add_tail("f")
    assert list(lst) == ["e", "z", "a", "c", "d", "b", "f"]
    assert len(lst) == 7
    assert nodes["c"].prev is nodes["a"]
    assert nodes["c"].next is nodes["d"]
    _assert_links_consistent(lst)


def test_insert_before_first_becomes_first():
    lst = DoublyLinkedList([2, 3])
    node = lst.insert_before(lst.first(), 1)
    assert lst.first() is node
    assert list(lst) == [1, 2, 3]
    _assert_links_consistent(lst)


def test_reversed_matches_forward():
    lst = DoublyLinkedList(range(6))
    assert list(reversed(lst)) == list(lst)[::-1]


def test_remove_middle_and_tail():
    lst, nodes = _build_demo()
    assert lst.remove(nodes["c"]) == "c"
    assert nodes["c"].prev is None and nodes["c"].next is None
    assert lst.remove(nodes["b"]) == "b"
    assert lst.tail() is nodes["d"]
    assert list(lst) == ["z", "a", "d"]
    _assert_links_consistent(lst)


def test_remove_all_empties_list():
    lst = DoublyLinkedList([1, 2, 3])
    removed = [lst.remove(node) for node in lst.nodes()]
    assert removed == [1, 2, 3]
    assert lst.is_empty()
    assert lst.first() is None and lst.tail() is None


def test_removed_node_cannot_be_reused():
    lst = DoublyLinkedList([1])
    node = lst.first()
    lst.remove(node)
    with pytest.raises(ValueError):
        lst.remove(node)
    with pytest.raises(ValueError):
        lst.insert_before(node, 0)


def test_concat_moves_nodes_and_empties_source():
    dst = DoublyLinkedList("ab")
    src = DoublyLinkedList("ghijklm")
    moved = list(src.nodes())
    dst.concat(src)
    assert list(dst) == list("abghijklm")
    assert len(dst) == 9
    assert src.is_empty()
    assert moved[0].prev is not None and moved[0].prev.value == "b"
    _assert_links_consistent(dst)
    assert dst.remove(moved[0]) == "g"


def test_concat_empty_source_is_noop():
    dst = DoublyLinkedList([1, 2])
    dst.concat(DoublyLinkedList())
    assert list(dst) == [1, 2]


def test_concat_with_self_is_rejected():
    lst = DoublyLinkedList([1])
    with pytest.raises(ValueError):
        lst.concat(lst)


def test_foreign_node_is_rejected():
    one = DoublyLinkedList([1])
    two = DoublyLinkedList([2])
    with pytest.raises(ValueError):
        one.insert_after(two.first(), 3)