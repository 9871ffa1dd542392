"""Singly linked list with node handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a :class:`LinkedList`, holding one value."""

    value: Any
    next: Optional[ListNode] = field(default=None, repr=False)
    _owner: Optional[LinkedList] = field(default=None, init=False, repr=False)


class LinkedList:
    """A singly linked list whose nodes can be used as insertion points."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: Optional[ListNode] = None
        self._last: Optional[ListNode] = None
        self._size = 0
        for value in values:
            self.add_tail(value)

    def _check(self, node: ListNode) -> None:
        if node._owner is not self:
            raise ValueError("node does not belong to this list")

    def _adopt(self, value: Any) -> ListNode:
        node = ListNode(value)
        node._owner = self
        self._size += 1
        return node

    def _detach(self, node: ListNode) -> Any:
        node.next = None
        node._owner = None
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self._first is None

    def first(self) -> Optional[ListNode]:
        """Return the first node, or None for an empty list."""
        return self._first

    def tail(self) -> Optional[ListNode]:
        """Return the last node, or None for an empty list."""
        return self._last

    def add_first(self, value: Any) -> ListNode:
        """Put a value at the front and return its node."""
        node = self._adopt(value)
        node.next = self._first
        self._first = node
        if self._last is None:
            self._last = node
        return node

    def add_tail(self, value: Any) -> ListNode:
        """Put a value at the end and return its node."""
        if self._last is None:
            return self.add_first(value)
        return self.insert_after(self._last, value)

    def insert_after(self, node: ListNode, value: Any) -> ListNode:
        """Insert a value right after ``node`` and return the new node."""
        self._check(node)
        new_node = self._adopt(value)
        new_node.next = node.next
        node.next = new_node
        if node is self._last:
            self._last = new_node
        return new_node

    def delete_next(self, node: ListNode) -> Any:
        """Remove the node after ``node`` and return its value."""
        self._check(node)
        victim = node.next
        if victim is None:
            raise IndexError("node has no next node")
        node.next = victim.next
        if victim is self._last:
            self._last = node
        return self._detach(victim)

    def pop_first(self) -> Any:
        """Remove the first node and return its value."""
        victim = self._first
        if victim is None:
            raise IndexError("pop from empty list")
        self._first = victim.next
        if self._first is None:
            self._last = None
        return self._detach(victim)

    def concat(self, other: LinkedList) -> None:
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
        self._last = other._last
        self._size += other._size
        other._first = other._last = None
        other._size = 0

    def nodes(self) -> Iterator[ListNode]:
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

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"