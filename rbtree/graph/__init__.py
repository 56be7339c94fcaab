"""
Co-star graph built from tab-separated movie data.
"""

from rbtree.graph.costar_graph import CoStarGraph
from rbtree.graph.tsv import extract_people, read_rows

__all__ = ["CoStarGraph", "extract_people", "read_rows"]
