"""
Node and color types for the red-black tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1

    @property
    def symbol(self) -> str:
        return self.name[0]


@dataclass
class Node:
    """
    Node in the Red-Black Tree.

    Children are owned exclusively by their parent slot. An absent child is
    None and counts as black for color tests.
    """

    key: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None

    def __str__(self) -> str:
        return f"({self.key}{self.color.symbol})"
