"""Kruskal's minimum spanning tree algorithm."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices numbered from 0."""

    source: int
    destination: int
    cost: int


class _DisjointSets:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of x and y; False if they were already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        self._parent[root_x] = root_y
        return True


def kruskal(edges: Iterable[Edge], number_of_vertices: int) -> tuple[int, list[Edge]]:
    """Return the total cost and the edges of a minimum spanning forest."""
    sets = _DisjointSets(number_of_vertices)
    total_cost = 0
    chosen: list[Edge] = []

    for edge in sorted(edges, key=lambda e: e.cost):
        if len(chosen) >= number_of_vertices - 1:
            break
        if sets.union(edge.source, edge.destination):
            total_cost += edge.cost
            chosen.append(Edge(edge.source, edge.destination, edge.cost))
    return total_cost, chosen