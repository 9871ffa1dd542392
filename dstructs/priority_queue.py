"""Bounded binary-heap priority queue, either minimum- or maximum-first."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional


class HeapKind(IntEnum):
    """Which end of the ordering a :class:`PriorityQueue` hands out first."""

    MIN = 0
    MAX = 1


class QueueFullError(OverflowError):
    """Raised when enqueueing into a queue that has reached its maximum size."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


class PriorityQueue:
    """A fixed-capacity priority queue stored as an implicit binary heap."""

    def __init__(
        self,
        kind: HeapKind | int,
        max_size: int,
        key: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._kind = HeapKind(kind)
        self._max_size = max_size
        self._key = key
        self._heap: list[Any] = []

    @property
    def kind(self) -> HeapKind:
        """Whether the smallest or the largest key comes out first."""
        return self._kind

    @property
    def max_size(self) -> int:
        """The number of items the queue can hold."""
        return self._max_size

    def _key_of(self, item: Any) -> Any:
        """Return the ordering key of an item; the item itself without a key function."""
        return item if self._key is None else self._key(item)

    def _before(self, a: Any, b: Any) -> bool:
        """Return True when ``a`` must sit strictly above ``b`` in the heap."""
        ka, kb = self._key_of(a), self._key_of(b)
        return ka < kb if self._kind is HeapKind.MIN else ka > kb

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return not self._heap

    def is_full(self) -> bool:
        """Return True when the queue holds ``max_size`` items."""
        return len(self._heap) == self._max_size

    def enqueue(self, item: Any) -> None:
        """Add an item; raise QueueFullError when there is no room."""
        if self.is_full():
            raise QueueFullError("priority queue is full")
        heap = self._heap
        heap.append(item)
        index = len(heap) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not self._before(heap[index], heap[parent]):
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def dequeue(self) -> Any:
        """Remove and return the first item; raise QueueEmptyError when empty."""
        heap = self._heap
        if not heap:
            raise QueueEmptyError("priority queue is empty")
        top = heap[0]
        last = heap.pop()
        if not heap:
            return top
        heap[0] = last
        size = len(heap)
        index = 0
        while True:
            left = 2 * index + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self._before(heap[right], heap[left]):
                child = right
            if not self._before(heap[child], heap[index]):
                break
            heap[index], heap[child] = heap[child], heap[index]
            index = child
        return top

    def level(self) -> int:
        """Return the depth of the deepest heap level, -1 when empty."""
        return len(self._heap).bit_length() - 1

    def items(self) -> list[Any]:
        """Return the items in heap array order, the first to come out leading."""
        return list(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kind.name}, {self._max_size}, {self._heap!r})"