"""Self-balancing AVL tree keyed by a user-supplied key function."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree: one item, two children and the subtree height."""

    item: Any
    left: Optional[AVLNode] = field(default=None, repr=False)
    right: Optional[AVLNode] = field(default=None, repr=False)
    height: int = 0


def _height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left_left(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    return pivot


def _rotate_right_right(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    diff = _height(node.left) - _height(node.right)
    if diff == 2:
        left = node.left
        assert left is not None
        if _height(left.left) < _height(left.right):
            node.left = _rotate_right_right(left)
        node = _rotate_left_left(node)
    elif diff == -2:
        right = node.right
        assert right is not None
        if _height(right.left) > _height(right.right):
            node.right = _rotate_left_left(right)
        node = _rotate_right_right(node)
    _update(node)
    return node


class AVLTree:
    """An AVL tree with unique keys; duplicate inserts are ignored."""

    def __init__(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        self._key = key
        self._root: Optional[AVLNode] = None
        self._size = 0

    @property
    def root(self) -> Optional[AVLNode]:
        """The root node, or None for an empty tree."""
        return self._root

    def _key_of(self, item: Any) -> Any:
        """Return the ordering key of an item; the item itself without a key function."""
        return item if self._key is None else self._key(item)

    def insert(self, item: Any) -> bool:
        """Insert an item; return False if its key was already present."""
        self._root, inserted = self._insert(self._root, item, self._key_of(item))
        if inserted:
            self._size += 1
        return inserted

    def _insert(self, node: Optional[AVLNode], item: Any, k: Any) -> tuple[AVLNode, bool]:
        if node is None:
            return AVLNode(item), True
        node_key = self._key_of(node.item)
        if k < node_key:
            node.left, inserted = self._insert(node.left, item, k)
        elif k > node_key:
            node.right, inserted = self._insert(node.right, item, k)
        else:
            return node, False
        return _rebalance(node), inserted

    def delete(self, item: Any) -> bool:
        """Remove the node whose key matches ``item``'s; return False if absent."""
        self._root, removed = self._delete(self._root, self._key_of(item))
        if removed:
            self._size -= 1
        return removed

    def _delete(self, node: Optional[AVLNode], k: Any) -> tuple[Optional[AVLNode], bool]:
        if node is None:
            return None, False
        node_key = self._key_of(node.item)
        if k == node_key:
            if node.left is not None and node.right is not None:
                succ = node.right
                while succ.left is not None:
                    succ = succ.left
                node.right, _ = self._delete(node.right, self._key_of(succ.item))
                succ.left = node.left
                succ.right = node.right
                self._reset(node)
                return _rebalance(succ), True
            child = node.left if node.left is not None else node.right
            self._reset(node)
            return child, True
        if k < node_key:
            node.left, removed = self._delete(node.left, k)
        else:
            node.right, removed = self._delete(node.right, k)
        return _rebalance(node), removed

    @staticmethod
    def _reset(node: AVLNode) -> None:
        node.left = node.right = None
        node.height = 0

    def find(self, key: Any) -> Any:
        """Return the item with the given key, or None if there is none."""
        node = self._root
        while node is not None:
            node_key = self._key_of(node.item)
            if key == node_key:
                return node.item
            node = node.left if key < node_key else node.right
        return None

    def minimum(self) -> Any:
        """Return the item with the smallest key, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.item

    def maximum(self) -> Any:
        """Return the item with the largest key, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.item

    def inorder(self) -> Iterator[Any]:
        """Yield the items in ascending key order."""
        stack: list[AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def level_order(self) -> list[Any]:
        """Return the items level by level, left to right."""
        if self._root is None:
            return []
        result = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.item)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Return the edges on the longest root-to-leaf path, -1 when empty."""
        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"