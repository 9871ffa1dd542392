"""Linked lists, binary search trees, AVL trees and priority queues, with ASCII drawings and demo commands."""

__version__ = "0.1.0"

__all__ = [
    "linked_list",
    "doubly_linked_list",
    "bst",
    "bst_render",
    "avl",
    "avl_render",
    "priority_queue",
    "pq_render",
    "list_demo",
    "pq_demo",
    "tree_demo",
]