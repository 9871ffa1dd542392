"""Doubly linked list with node handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class DListNode:
    """A node of a :class:`DoublyLinkedList`, holding one value."""

    value: Any
    prev: Optional[DListNode] = field(default=None, repr=False)
    next: Optional[DListNode] = field(default=None, repr=False)
    _owner: Optional[DoublyLinkedList] = field(default=None, init=False, repr=False)


class DoublyLinkedList:
    """A doubly linked list whose nodes can be used as insertion points."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: Optional[DListNode] = None
        self._last: Optional[DListNode] = None
        self._size = 0
        for value in values:
            self.add_tail(value)

    def _check(self, node: DListNode) -> None:
        if node._owner is not self:
            raise ValueError("node does not belong to this list")

    def _adopt(self, value: Any) -> DListNode:
        node = DListNode(value)
        node._owner = self
        self._size += 1
        return node

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self._first is None

    def first(self) -> Optional[DListNode]:
        """Return the first node, or None for an empty list."""
        return self._first

    def tail(self) -> Optional[DListNode]:
        """Return the last node, or None for an empty list."""
        return self._last

    def add_first(self, value: Any) -> DListNode:
        """Put a value at the front and return its node."""
        if self._first is not None:
            return self.insert_before(self._first, value)
        node = self._adopt(value)
        self._first = self._last = node
        return node

    def add_tail(self, value: Any) -> DListNode:
        """Put a value at the end and return its node."""
        if self._last is None:
            return self.add_first(value)
        return self.insert_after(self._last, value)

    def insert_after(self, node: DListNode, value: Any) -> DListNode:
        """Insert a value right after ``node`` and return the new node."""
        self._check(node)
        new_node = self._adopt(value)
        new_node.prev = node
        new_node.next = node.next
        if node.next is None:
            self._last = new_node
        else:
            node.next.prev = new_node
        node.next = new_node
        return new_node

    def insert_before(self, node: DListNode, value: Any) -> DListNode:
        """Insert a value right before ``node`` and return the new node."""
        self._check(node)
        new_node = self._adopt(value)
        new_node.next = node
        new_node.prev = node.prev
        if node.prev is None:
            self._first = new_node
        else:
            node.prev.next = new_node
        node.prev = new_node
        return new_node

    def remove(self, node: DListNode) -> Any:
        """Unlink ``node`` from the list and return its value."""
        self._check(node)
        if node.prev is None:
            self._first = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._last = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        node._owner = None
        self._size -= 1
        return node.value

    def concat(self, other: DoublyLinkedList) -> None:
        """Move every node of ``other`` to the end of this list, emptying ``other``."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._first is None:
            return
        for node in other.nodes():
            node._owner = self
        if self._last is None:
            self._first = other._first
        else:
            self._last.next = other._first
            other._first.prev = self._last
        self._last = other._last
        self._size += other._size
        other._first = other._last = None
        other._size = 0

    def nodes(self) -> Iterator[DListNode]:
        """Yield the nodes from first to last."""
        current = self._first
        while current is not None:
            following = current.next
            yield current
            current = following

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        current = self._last
        while current is not None:
            preceding = current.prev
            yield current.value
            current = preceding

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"