"""
Sorted container implementations.
"""

from rbtree.models.sortedcontainers.node import Color, Node
from rbtree.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["Color", "Node", "RedBlackTree"]
