"""
Abstract base classes for ordered tree containers.
"""

from rbtree.interfaces.ordered_container import OrderedContainer
from rbtree.interfaces.traversable import Traversable

__all__ = ["OrderedContainer", "Traversable"]
