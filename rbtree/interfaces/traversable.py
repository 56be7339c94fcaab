"""
Traversable protocol for trees that expose their nodes in a fixed order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class Traversable(ABC):
    """
    Protocol for tree structures that can be walked for inspection.

    Implementations must support:
    - Lazy in-order iteration via __iter__
    - In-order traversal as a materialized list via in_order()
    - Pre-order traversal as a materialized list via pre_order()

    Traversals never mutate the tree. Each call returns a fresh list, so a
    result can be iterated any number of times.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all (key, color) pairs in sorted order."""
        pass

    @abstractmethod
    def in_order(self) -> list[tuple[Any, Any]]:
        """
        Return the (key, color) pairs in left, root, right order.

        Returns:
            List of (key, color) tuples in non-decreasing key order.
        """
        pass

    @abstractmethod
    def pre_order(self) -> list[tuple[Any, Any]]:
        """
        Return the (key, color) pairs in root, left, right order.

        Returns:
            List of (key, color) tuples reflecting the tree shape.
        """
        pass
