import random
from collections import namedtuple

import pytest

from dstructs.priority_queue import (
    HeapKind,
    PriorityQueue,
    QueueEmptyError,
    QueueFullError,
)

Student = namedtuple("Student", "id math eng")

STUDENTS = [
    Student("A", 70, 100),
    Student("B", 60, 90),
    Student("C", 80, 95),
    Student("D", 65, 90),
    Student("E", 10, 70),
    Student("F", 90, 90),
    Student("G", 20, 60),
    Student("H", 30, 50),
    Student("I", 40, 40),
    Student("J", 50, 30),
]


def _by_math(student):
    return student.math


def _filled(kind):
    pq = PriorityQueue(kind, 10, _by_math)
    for student in STUDENTS:
        pq.enqueue(student)
    return pq


def _assert_heap(pq):
    items = pq.items()
    for index in range(1, len(items)):
        parent = _by_math(items[(index - 1) // 2])
        child = _by_math(items[index])
        if pq.kind is HeapKind.MIN:
            assert parent <= child
        else:
            assert parent >= child


def test_new_queue_is_empty_and_not_full():
    pq = PriorityQueue(HeapKind.MIN, 10, _by_math)
    assert pq.is_empty() is True
    assert pq.is_full() is False
    assert len(pq) == 0


def test_filled_queue_is_full():
    pq = _filled(HeapKind.MIN)
    assert pq.is_full() is True
    assert pq.is_empty() is False
    assert len(pq) == 10


def test_level_of_ten_items():
    pq = _filled(HeapKind.MIN)
    assert pq.level() == 3


def test_level_of_single_item_is_zero():
    pq = PriorityQueue(HeapKind.MAX, 2)
    pq.enqueue(5)
    assert pq.level() == 0


def test_min_heap_dequeues_ascending():
    pq = _filled(HeapKind.MIN)
    got = [pq.dequeue().math for _ in range(10)]
    assert got == [10, 20, 30, 40, 50, 60, 65, 70, 80, 90]
    assert pq.is_empty()


def test_max_heap_dequeues_descending():
    pq = _filled(HeapKind.MAX)
    got = [pq.dequeue().math for _ in range(10)]
    assert got == [90, 80, 70, 65, 60, 50, 40, 30, 20, 10]


@pytest.mark.parametrize("kind", [HeapKind.MIN, HeapKind.MAX])
def test_heap_property_holds_after_each_operation(kind):
    pq = PriorityQueue(kind, 10, _by_math)
    for student in STUDENTS:
        pq.enqueue(student)
        _assert_heap(pq)
    while not pq.is_empty():
        pq.dequeue()
        _assert_heap(pq)


def test_first_item_is_the_extreme():
    pq = _filled(HeapKind.MIN)
    assert pq.items()[0].id == "E"
    pq_max = _filled(HeapKind.MAX)
    assert pq_max.items()[0].id == "F"


def test_enqueue_into_full_queue_raises():
    pq = _filled(HeapKind.MIN)
    with pytest.raises(QueueFullError):
        pq.enqueue(Student("K", 1, 1))
    assert len(pq) == 10


def test_dequeue_from_empty_queue_raises():
    pq = PriorityQueue(HeapKind.MAX, 3)
    with pytest.raises(QueueEmptyError):
        pq.dequeue()


def test_zero_capacity_is_full_at_once():
    pq = PriorityQueue(HeapKind.MIN, 0)
    assert pq.is_full() is True
    with pytest.raises(QueueFullError):
        pq.enqueue(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        PriorityQueue(HeapKind.MIN, -1)


def test_kind_accepts_plain_integers():
    assert PriorityQueue(1, 3).kind is HeapKind.MAX
    assert PriorityQueue(0, 3).kind is HeapKind.MIN


def test_duplicates_are_all_returned():
    pq = PriorityQueue(HeapKind.MIN, 6)
    for value in [5, 5, 1, 5, 3, 1]:
        pq.enqueue(value)
    assert [pq.dequeue() for _ in range(6)] == sorted([5, 5, 1, 5, 3, 1])


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("kind", [HeapKind.MIN, HeapKind.MAX])
def test_random_values_come_out_sorted(seed, kind):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(40)]
    pq = PriorityQueue(kind, len(values))
    for value in values:
        pq.enqueue(value)
    out = [pq.dequeue() for _ in values]
    assert out == sorted(values, reverse=kind is HeapKind.MAX)


def test_interleaved_operations_keep_order():
    pq = PriorityQueue(HeapKind.MIN, 5)
    pq.enqueue(4)
    pq.enqueue(2)
    assert pq.dequeue() == 2
    pq.enqueue(1)
    pq.enqueue(3)
    assert [pq.dequeue() for _ in range(3)] == [1, 3, 4]