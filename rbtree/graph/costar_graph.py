"""
CoStarGraph - Undirected graph of people who appeared in the same movie.
"""

from collections import deque
from collections.abc import Iterable

from rbtree.models.exceptions import KeyNotFoundError


class CoStarGraph:
    """
    Adjacency-list graph keyed by person name.

    Every member of a group is connected to every other member. Neighbour
    lists hold no duplicates and keep first-seen order; vertices are
    reported in sorted name order.
    """

    def __init__(self, groups: Iterable[list[str]] = ()) -> None:
        self._vertices: dict[str, list[str]] = {}
        for group in groups:
            self.add_group(group)

    def add_group(self, group: list[str]) -> None:
        """
        Connect every pair of people in one group.

        Args:
            group: Names of people who appeared together.
        """
        for i, person in enumerate(group):
            neighbours = self._vertices.setdefault(person, [])
            for j, costar in enumerate(group):
                if i != j and costar not in neighbours:
                    neighbours.append(costar)

    def vertices(self) -> list[str]:
        return sorted(self._vertices)

    def neighbours(self, person: str) -> list[str]:
        if person not in self._vertices:
            raise KeyNotFoundError(person, "graph")
        return list(self._vertices[person])

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, person: object) -> bool:
        return person in self._vertices

    def degree_of(self, person: str) -> int:
        """
        Return the number of distinct co-stars of person.

        Raises:
            KeyNotFoundError: If person is not a vertex.
        """
        if person not in self._vertices:
            raise KeyNotFoundError(person, "graph")
        return len(self._vertices[person])

    def max_degree(self) -> tuple[set[str], int]:
        """
        Find the people with the highest degree.

        Returns:
            (names, degree). Ties share the set; an empty graph gives (set(), 0).
        """
        best: set[str] = set()
        max_degree = 0
        for person, neighbours in self._vertices.items():
            degree = len(neighbours)
            if degree > max_degree:
                max_degree = degree
                best = {person}
            elif degree == max_degree:
                best.add(person)
        return best, max_degree

    def describe_max_degree(self) -> str:
        people, degree = self.max_degree()
        names = sorted(people)
        if len(names) > 1:
            who = "a tie between [" + ", ".join(names) + "]"
        elif names:
            who = names[0]
        else:
            who = "nobody"
        return f"The max degree is {who} with a degree of {degree}"

    def bfs_order(self, start: str) -> list[str]:
        """
        Breadth-first visitation order from start.

        Raises:
            KeyNotFoundError: If start is not a vertex.
        """
        if start not in self._vertices:
            raise KeyNotFoundError(start, "graph")

        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._vertices[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def bfs(self, start: str) -> str:
        """Render the breadth-first order as ``Queue: [a, b, c]``."""
        return "Queue: [" + ", ".join(self.bfs_order(start)) + "]"
