"""
Rebalancing primitives for top-down red-black insertion.

Insertion calls two things at every node it visits:

- before descending, ``push_blackness_down`` when both children are red,
  which turns the node red and its children black;
- after the child slot has been replaced, ``rebalance``, which repairs a
  red child with a red grandchild by one single or one double rotation.

A violation that ``rebalance`` cannot see (the node itself turned red by a
push-down while its parent is red) is left for the caller one level up.
"""

import logging
from enum import Enum

from rbtree.models.sortedcontainers.node import Color, Node

logger = logging.getLogger()


class Shape(Enum):
    """Local shape of a node, its red child and red grandchild."""

    LEFT_LEFT = "left-left"
    LEFT_RIGHT = "left-right"
    RIGHT_RIGHT = "right-right"
    RIGHT_LEFT = "right-left"
    BALANCED = "balanced"


def is_red(node: Node | None) -> bool:
    """Return True if node is present and red. Absent children are black."""
    return node is not None and node.color == Color.RED


def has_two_red_children(node: Node) -> bool:
    return is_red(node.left) and is_red(node.right)


def push_blackness_down(node: Node) -> None:
    """Recolor node red and both of its (present) children black."""
    logger.debug(f"Pushing blackness down from {node}")
    node.color = Color.RED
    node.left.color = Color.BLACK
    node.right.color = Color.BLACK


def classify(node: Node) -> Shape:
    """
    Classify the red-red shape directly beneath node.

    The four shapes are checked in a fixed order and the first match wins.
    A red left child with no red grandchild falls through to the right-hand
    checks.
    """
    if is_red(node.left):
        if is_red(node.left.left):
            return Shape.LEFT_LEFT
        if is_red(node.left.right):
            return Shape.LEFT_RIGHT
    if is_red(node.right):
        if is_red(node.right.right):
            return Shape.RIGHT_RIGHT
        if is_red(node.right.left):
            return Shape.RIGHT_LEFT
    return Shape.BALANCED


def rotate_right(grand: Node) -> Node:
    """
    Promote grand's left child and return it as the new subtree root.

    The promoted child becomes black and grand, now its right child, becomes
    red. The promoted child's right subtree moves to grand's left slot.
    """
    parent = grand.left
    grand.left = parent.right
    parent.right = grand

    parent.color = Color.BLACK
    grand.color = Color.RED
    return parent


def rotate_left(grand: Node) -> Node:
    """Mirror of rotate_right: promote grand's right child."""
    parent = grand.right
    grand.right = parent.left
    parent.left = grand

    parent.color = Color.BLACK
    grand.color = Color.RED
    return parent


def rebalance(node: Node) -> Node:
    """
    Resolve a red child with a red grandchild beneath node.

    Args:
        node: Subtree root whose children were just updated by insertion.

    Returns:
        The subtree root to store in the caller's slot. This is node itself
        when no rotation applies.
    """
    shape = classify(node)
    if shape is Shape.BALANCED:
        return node

    logger.debug(f"Rotating {shape.value} at {node}")
    if shape is Shape.LEFT_LEFT:
        return rotate_right(node)
    if shape is Shape.LEFT_RIGHT:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if shape is Shape.RIGHT_RIGHT:
        return rotate_left(node)
    if shape is Shape.RIGHT_LEFT:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    raise AssertionError(f"Unhandled shape {shape!r} at {node}")
