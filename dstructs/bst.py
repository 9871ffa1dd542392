"""Unbalanced binary search tree keyed by a user-supplied key function."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree, holding one item."""

    item: Any
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)


class BinarySearchTree:
    """A binary search tree with unique keys; successors replace deleted inner nodes."""

    def __init__(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        self._key = key
        self._root: Optional[TreeNode] = None
        self._size = 0

    @property
    def root(self) -> Optional[TreeNode]:
        """The root node, or None for an empty tree."""
        return self._root

    def _key_of(self, item: Any) -> Any:
        """Return the ordering key of an item; the item itself without a key function."""
        return item if self._key is None else self._key(item)

    def insert(self, item: Any) -> None:
        """Insert an item; raise ValueError if its key is already present."""
        new_node = TreeNode(item)
        if self._root is None:
            self._root = new_node
            self._size = 1
            return
        k = self._key_of(item)
        node = self._root
        while True:
            node_key = self._key_of(node.item)
            if k < node_key:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            elif k > node_key:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
            else:
                raise ValueError(f"node already exists: {k!r}")
        self._size += 1

    def delete(self, item: Any) -> None:
        """Remove the node whose key matches ``item``'s; raise KeyError if absent."""
        k = self._key_of(item)
        parent: Optional[TreeNode] = None
        node = self._root
        while node is not None:
            node_key = self._key_of(node.item)
            if k == node_key:
                break
            parent = node
            node = node.left if k < node_key else node.right
        if node is None:
            raise KeyError(k)

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            if succ_parent is node:
                node.right = succ.right
            else:
                succ_parent.left = succ.right
            succ.left = node.left
            succ.right = node.right
            replacement: Optional[TreeNode] = succ
        elif node.left is not None:
            replacement = node.left
        else:
            replacement = node.right

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        node.left = node.right = None
        self._size -= 1

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
        """Return the item with the smallest key."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.item

    def maximum(self) -> Any:
        """Return the item with the largest key."""
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.item

    def inorder(self) -> Iterator[Any]:
        """Yield the items in ascending key order."""
        stack: list[TreeNode] = []
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
        """Return the number of edges on the longest root-to-leaf path."""
        root = self._require_root()
        depth = -1
        level = [root]
        while level:
            depth += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return depth

    def copy(self) -> BinarySearchTree:
        """Return a tree of the same shape holding the same items."""
        clone = BinarySearchTree(self._key)
        clone._size = self._size
        if self._root is None:
            return clone
        clone._root = TreeNode(self._root.item)
        pending = [(self._root, clone._root)]
        while pending:
            src, dst = pending.pop()
            if src.left is not None:
                dst.left = TreeNode(src.left.item)
                pending.append((src.left, dst.left))
            if src.right is not None:
                dst.right = TreeNode(src.right.item)
                pending.append((src.right, dst.right))
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        pending = [(self._root, other._root)]
        while pending:
            a, b = pending.pop()
            if a is None and b is None:
                continue
            if a is None or b is None or a.item != b.item:
                return False
            pending.append((a.left, b.left))
            pending.append((a.right, b.right))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _require_root(self) -> TreeNode:
        if self._root is None:
            raise ValueError("empty tree")
        return self._root