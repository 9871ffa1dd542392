# dstructs

Classic data structures written in plain Python, together with small
console drawings of the tree-shaped ones:

- `dstructs.linked_list`: a singly linked list (`LinkedList`, `ListNode`)
- `dstructs.doubly_linked_list`: a doubly linked list (`DoublyLinkedList`, `DListNode`)
- `dstructs.bst`: an unbalanced binary search tree (`BinarySearchTree`, `TreeNode`)
- `dstructs.avl`: a self-balancing AVL tree (`AVLTree`, `AVLNode`)
- `dstructs.priority_queue`: a bounded binary heap (`PriorityQueue`, `HeapKind`,
  `QueueFullError`, `QueueEmptyError`)
- `dstructs.bst_render`, `dstructs.avl_render`, `dstructs.pq_render`:
  functions that draw a tree or a heap as lines of ASCII art

No third-party packages are needed.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Linked lists

```python
from dstructs.linked_list import LinkedList

items = LinkedList(["a", "b"])
items.add_first("z")
items.add_tail("c")
print(list(items), len(items))   # ['z', 'a', 'b', 'c'] 4
```

`add_first`, `add_tail` and `insert_after` return the new node, which can
then be used as an insertion point. `insert_after` places a value behind a
given node, `delete_next` unlinks the node that follows one and returns its
value (`IndexError` if there is none), `pop_first` takes the head off
(`IndexError` on an empty list), and `concat` moves every node of another
list onto the end of this one, leaving the other list empty. `first()` and
`tail()` return the end nodes, or `None` for an empty list; `nodes()`
yields the nodes themselves. Passing a node that belongs to a different
list raises `ValueError`.

`DoublyLinkedList` has the same interface apart from `delete_next` and
`pop_first`, and adds `insert_before`, `remove(node)` and `reversed()`.

## Trees

`BinarySearchTree` and `AVLTree` keep items ordered by a key function
given to the constructor (the item itself when none is given). Both offer
`insert`, `delete`, `find`, `minimum`, `maximum`, `inorder`,
`level_order` and `height`, and a `root` property; iterating over a tree
yields its items in key order.

```python
from dstructs.avl import AVLTree
from dstructs.avl_render import render_avl_tree

tree = AVLTree()
for value in (90, 80, 70, 60, 65, 67):
    tree.insert(value)
print(list(tree), tree.height())
print(render_avl_tree(tree.root))
```

The two trees differ in how they report trouble:

- `BinarySearchTree.insert` raises `ValueError` for a key already present,
  `delete` raises `KeyError` for a missing key, and `minimum`, `maximum`
  and `height` raise `ValueError` on an empty tree. A deleted node with two
  children is replaced by its in-order successor. The tree can be copied
  with `copy()` and compared with `==`, which checks that two trees have
  the same shape and equal items.
- `AVLTree.insert` and `delete` return `False` instead of raising when the
  key is already present or absent; `minimum` and `maximum` return `None`
  and `height` returns `-1` for an empty tree. The tree rebalances itself
  with single and double rotations after every insertion and deletion.

`find(key)` returns the matching item or `None` on both trees.

`render_tree(root, label)` (from `dstructs.bst_render`) and
`render_avl_tree(root, label)` (from `dstructs.avl_render`) draw a tree
with `/` and `\` branches, the root centred at the top. `label` is an
optional function that turns an item into the text shown for it. Both
return the picture as a string, or an empty string for `None`.

## Priority queue

`PriorityQueue(kind, max_size, key=None)` is a fixed-capacity binary heap,
ordered either as a min-heap or a max-heap according to `HeapKind.MIN` or
`HeapKind.MAX`. `enqueue` raises `QueueFullError` once the capacity is
reached and `dequeue` raises `QueueEmptyError` on an empty queue.
`is_empty`, `is_full`, `level()` (depth of the deepest level, `-1` when
empty) and `items()` (the heap in array order) describe its state.
`render_heap(items, label)` (from `dstructs.pq_render`) draws a heap given
in array order as a tree.

## Demonstrations

Three commands walk through the structures step by step and print what
happens along the way:

```
dstructs-lists [singly|doubly|both]   # singly and doubly linked lists
dstructs-pq                           # min-heap and max-heap of student records
dstructs-trees [bst|avl|both]         # binary search tree and AVL tree, drawn after each change
```

The same transcripts are returned as strings by `linked_list_demo()` and
`doubly_linked_list_demo()` in `dstructs.list_demo`, `pq_demo()` in
`dstructs.pq_demo`, and `bst_demo()` and `avl_demo()` in
`dstructs.tree_demo`.

## What it does not do

The structures live in memory only: nothing is saved to or loaded from
disk, and none of them is safe to share between threads without your own
locking. The drawings are meant for small trees; labels longer than a
few characters can overlap.