"""
Data models for the tree and its error types.
"""

from rbtree.models.exceptions import InvariantViolationError, KeyNotFoundError
from rbtree.models.sortedcontainers import Color, Node, RedBlackTree

__all__ = [
    "Color",
    "InvariantViolationError",
    "KeyNotFoundError",
    "Node",
    "RedBlackTree",
]
