"""
Insertion-only red-black tree.

This package provides an ordered, self-balancing binary search tree with:
- insert(keys) - O(log N) per key, top-down blackness push-down
- in_order() / pre_order() - (key, color) traversals for inspection
- validate() - red-black invariant checking for debugging and tests

A small co-star graph built from tab-separated data lives in
``rbtree.graph``.
"""

from rbtree.models.sortedcontainers import Color, Node, RedBlackTree

__all__ = ["Color", "Node", "RedBlackTree"]
