"""
Red-Black Tree implementation for ordered, insertion-only key storage.

Insertion is top-down: blackness is pushed down on the way to the leaf and
rotations are applied on the way back up, so one recursive pass restores
every invariant below the root.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from rbtree.interfaces.ordered_container import OrderedContainer
from rbtree.models.exceptions import InvariantViolationError, KeyNotFoundError
from rbtree.models.sortedcontainers.node import Color, Node
from rbtree.models.sortedcontainers.rebalancer import (
    has_two_red_children,
    is_red,
    push_blackness_down,
    rebalance,
)

logger = logging.getLogger()


class RedBlackTree(OrderedContainer):
    """
    Red-Black Tree implementation of OrderedContainer.

    Properties maintained after every inserted key:
    1. Red nodes cannot have red children
    2. Root is always black
    3. Every path from root to an absent child has the same number of black nodes
    4. In-order keys are non-decreasing (equal keys are routed right)
    """

    def __init__(self, keys: Iterable[Any] | None = None) -> None:
        self._root: Node | None = None
        self._size: int = 0

        if keys is not None:
            self.insert(keys)

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, keys: Iterable[Any]) -> None:
        """Insert keys one at a time, forcing the root black after each."""
        for key in keys:
            self.add(key)

    def add(self, key: Any) -> None:
        """Insert a single key. O(log N)"""
        self._root = self._add(self._root, key)
        self._root.color = Color.BLACK
        self._size += 1

    def _add(self, current: Node | None, key: Any) -> Node:
        """Insert key below current and return the new subtree root."""
        if current is None:
            return Node(key=key)

        if has_two_red_children(current):
            push_blackness_down(current)

        if key < current.key:
            current.left = self._add(current.left, key)
        else:
            current.right = self._add(current.right, key)

        return rebalance(current)

    def find(self, key: Any) -> Node | None:
        """Find a node holding key. O(log N)"""
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def has(self, key: Any) -> bool:
        return self.find(key) is not None

    def color_of(self, key: Any) -> Color:
        """
        Return the color of the node holding key.

        Raises:
            KeyNotFoundError: If no node holds key.
        """
        node = self.find(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.color

    def color_table(self, keys: Iterable[Any]) -> list[tuple[Any, Color]]:
        """
        Return (key, color) for each listed key, in the listed order.

        Args:
            keys: Keys to report, typically in insertion order.

        Raises:
            KeyNotFoundError: If any listed key is not stored.
        """
        return [(key, self.color_of(key)) for key in keys]

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def __bool__(self) -> bool:
        return self._root is not None

    def height(self) -> int:
        def _height(node: Node | None) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def __iter__(self) -> Iterator[tuple[Any, Color]]:
        """Yield (key, color) pairs in sorted order."""
        stack: list[Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.key, node.color
            current = node.right

    def in_order(self) -> list[tuple[Any, Color]]:
        result: list[tuple[Any, Color]] = []

        def _walk(node: Node | None) -> None:
            if node is None:
                return
            _walk(node.left)
            result.append((node.key, node.color))
            _walk(node.right)

        _walk(self._root)
        return result

    def pre_order(self) -> list[tuple[Any, Color]]:
        result: list[tuple[Any, Color]] = []

        def _walk(node: Node | None) -> None:
            if node is None:
                return
            result.append((node.key, node.color))
            _walk(node.left)
            _walk(node.right)

        _walk(self._root)
        return result

    def validate(self) -> int:
        """
        Verify that the tree satisfies all red-black invariants.

        Returns:
            The black-height of the tree (0 when empty).

        Raises:
            InvariantViolationError: On the first broken property found.
        """
        if self._root is None:
            return 0

        if self._root.color != Color.BLACK:
            raise InvariantViolationError("black root", self._root.key)

        seen: set[int] = set()
        previous: list[Any] = []

        def dfs(node: Node | None) -> int:
            if node is None:
                return 0

            if id(node) in seen:
                raise InvariantViolationError(
                    "exclusive ownership", node.key, "node reachable twice"
                )
            seen.add(id(node))

            if node.color == Color.RED and (is_red(node.left) or is_red(node.right)):
                raise InvariantViolationError("no red-red", node.key)

            left_black = dfs(node.left)

            if previous and node.key < previous[-1]:
                raise InvariantViolationError(
                    "ordering", node.key, f"follows {previous[-1]!r} in order"
                )
            previous.append(node.key)

            right_black = dfs(node.right)

            if left_black != right_black:
                raise InvariantViolationError(
                    "black-height",
                    node.key,
                    f"left {left_black} != right {right_black}",
                )
            return left_black + (1 if node.color == Color.BLACK else 0)

        black_height = dfs(self._root)

        if len(seen) != self._size:
            raise InvariantViolationError(
                "size", self._root.key, f"{len(seen)} nodes, size {self._size}"
            )
        logger.debug(f"Validated {self._size} nodes, black-height {black_height}")
        return black_height

    def __repr__(self) -> str:
        return f"RedBlackTree({format_traversal('inorder', self.in_order())})"


def format_traversal(label: str, pairs: Iterable[tuple[Any, Color]]) -> str:
    """
    Render a traversal as one diagnostic line.

    Example:
        >>> format_traversal("Inorder", [(12, Color.RED), (17, Color.BLACK)])
        'Inorder: (12R), (17B)'
    """
    return f"{label}: " + ", ".join(f"({key}{color.symbol})" for key, color in pairs)
