"""
OrderedContainer abstract base class for insertion-only ordered trees.
"""

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from rbtree.interfaces.traversable import Traversable


class OrderedContainer(Traversable):
    """
    Abstract base class for ordered, insertion-only key containers.

    Provides O(log N) insertion and lookup. Keys may repeat; there is no
    removal operation. Inherits traversal capabilities from Traversable.

    Implementations:
    - RedBlackTree: top-down red-black insertion
    """

    @abstractmethod
    def insert(self, keys: Iterable[Any]) -> None:
        """
        Insert every key of an iterable, in order.

        Args:
            keys: The keys to insert, left to right.

        Time complexity: O(K log N) for K keys
        """
        pass

    @abstractmethod
    def add(self, key: Any) -> None:
        """
        Insert a single key.

        Args:
            key: The key to insert. Duplicates are accepted.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored keys, duplicates included.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """
        Return the number of nodes on the longest root-to-leaf path.

        Returns:
            0 for an empty container.
        """
        pass
