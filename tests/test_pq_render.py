from dstructs.pq_render import render_heap
from dstructs.priority_queue import HeapKind, PriorityQueue

MATH = [70, 60, 80, 65, 10, 90, 20, 30, 40, 50]


def _tokens(picture):
    return [token for token in picture.split() if token not in ("/", "\\")]


def test_empty_heap_renders_nothing():
    assert render_heap([]) == ""


def test_single_item():
    assert render_heap([5]) == " 5 \n"


def test_two_items_worked_example():
    assert render_heap([10, 60]).splitlines() == [
        "  10   ",
        "  /    ",
        " /     ",
        "60     ",
    ]


def test_three_items_worked_example():
    assert render_heap([1, 2, 3]).splitlines() == [
        "   1   ",
        "  / \\  ",
        " /   \\ ",
        "2     3",
    ]


def test_every_line_has_the_same_width():
    pq = PriorityQueue(HeapKind.MIN, 10)
    for value in MATH:
        pq.enqueue(value)
    lines = render_heap(pq.items()).splitlines()
    assert len({len(line) for line in lines}) == 1


def test_every_item_is_drawn_once():
    for kind in HeapKind:
        pq = PriorityQueue(kind, 10)
        for value in MATH:
            pq.enqueue(value)
        picture = render_heap(pq.items())
        assert sorted(_tokens(picture)) == sorted(str(value) for value in MATH)


def test_root_is_on_the_first_line():
    pq = PriorityQueue(HeapKind.MAX, 10)
    for value in MATH:
        pq.enqueue(value)
    first_line = render_heap(pq.items()).splitlines()[0]
    assert first_line.split() == [str(pq.items()[0])]


def test_label_callable_is_used():
    picture = render_heap(["a", "b", "c"], label=str.upper)
    assert sorted(_tokens(picture)) == ["A", "B", "C"]


def test_picture_ends_with_newline_and_grows_with_items():
    small = render_heap([1, 2, 3])
    large = render_heap(list(range(7)))
    assert small.endswith("\n")
    assert len(large.splitlines()) > len(small.splitlines())