"""
Shared pytest fixtures for tree and graph tests.
"""

import pytest

from rbtree import RedBlackTree
from rbtree.graph import CoStarGraph

SCENARIO_KEYS = [19, 20, 25, 12, 17, 23, 24]


@pytest.fixture
def empty_tree():
    """Provide a fresh, empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def scenario_tree():
    """Provide the tree built from the canonical seven-key insertion order."""
    return RedBlackTree(SCENARIO_KEYS)


@pytest.fixture
def graph():
    """Provide a small co-star graph with one hub and one pendant vertex."""
    return CoStarGraph([["A", "B", "C"], ["A", "D"]])


@pytest.fixture
def tsv_file(tmp_path):
    """Provide a path to a small movie TSV file."""
    path = tmp_path / "movies.tsv"
    path.write_text(
        "No\tTitle\tActors\n"
        "1\tFirst Movie\tA, B , C\n"
        "2\tSecond Movie\tA,D\n",
        encoding="utf-8",
    )
    return path
