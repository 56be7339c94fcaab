"""
Property-based tests for red-black invariants under arbitrary insertion orders.
"""

import math

from hypothesis import given, strategies as st

from rbtree import Color, RedBlackTree

keys = st.lists(st.integers())
small_keys = st.lists(st.integers(min_value=0, max_value=10))


def red_red_free(node):
    if node is None:
        return True
    if node.color == Color.RED:
        for child in (node.left, node.right):
            if child is not None and child.color == Color.RED:
                return False
    return red_red_free(node.left) and red_red_free(node.right)


def black_heights(node, count=0):
    """Yield the black count of every root-to-absent-child path."""
    if node is None:
        yield count
        return
    count += 1 if node.color == Color.BLACK else 0
    yield from black_heights(node.left, count)
    yield from black_heights(node.right, count)


@given(keys)
def test_in_order_is_sorted(xs):
    tree = RedBlackTree(xs)
    assert [key for key, _ in tree.in_order()] == sorted(xs)


@given(keys)
def test_root_is_black_after_every_insert(xs):
    tree = RedBlackTree()
    for x in xs:
        tree.add(x)
        assert tree.root.color == Color.BLACK


@given(keys)
def test_no_red_red(xs):
    tree = RedBlackTree(xs)
    assert red_red_free(tree.root)


@given(keys)
def test_uniform_black_height(xs):
    tree = RedBlackTree(xs)
    assert len(set(black_heights(tree.root))) == 1


@given(small_keys)
def test_size_counts_duplicates(xs):
    tree = RedBlackTree(xs)
    assert tree.size() == len(xs)
    assert len(tree.pre_order()) == len(xs)


@given(keys)
def test_height_bound(xs):
    tree = RedBlackTree(xs)
    assert tree.height() <= 2 * math.log2(len(xs) + 1)


@given(small_keys)
def test_validate_after_every_insert(xs):
    tree = RedBlackTree()
    for x in xs:
        tree.add(x)
        tree.validate()


@given(keys)
def test_pre_order_is_permutation_of_in_order(xs):
    tree = RedBlackTree(xs)
    assert sorted(tree.pre_order()) == sorted(tree.in_order())
