import logging
import os

from rbtree import RedBlackTree
from rbtree.graph import CoStarGraph, extract_people, read_rows
from rbtree.models.exceptions import KeyNotFoundError
from rbtree.models.sortedcontainers.red_black_tree import format_traversal

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

DEMO_KEYS = [19, 20, 25, 12, 17, 23, 24]


def tree_report(keys: list[int]) -> list[str]:
    tree = RedBlackTree(keys)
    lines = [
        format_traversal("Inorder", tree.in_order()),
        format_traversal("Preorder", tree.pre_order()),
        "",
        f"{'Node':<5} | {'Color':>5}",
        "-------------",
    ]
    for key, color in tree.color_table(keys):
        lines.append(f"{key:<5} | {color.symbol:>5}")
    return lines


def graph_report(path: str, person: str) -> list[str]:
    rows = read_rows(path)
    if rows is None:
        logger.info(f"No data at {path}, skipping graph statistics")
        return []

    graph = CoStarGraph(extract_people(rows))
    logger.debug(f"Built graph with {len(graph)} vertices")
    lines = []
    try:
        lines.append(f"{person} has a degree of {graph.degree_of(person)}")
    except KeyNotFoundError as e:
        logger.warning(f"Degree query skipped: {e}")
    lines.append(graph.describe_max_degree())
    return lines


def main() -> None:
    for line in tree_report(DEMO_KEYS):
        print(line)

    path = os.environ.get("DATA_ADDRESS", "IMDBDataset.tsv")
    person = os.environ.get("PERSON", "Anne Hathaway")
    for line in graph_report(path, person):
        print(line)


if __name__ == "__main__":
    main()
