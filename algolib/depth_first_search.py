"""Depth-first search over a directed graph given as an edge list."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class Graph:
    """A directed graph: its vertices and its (source, destination) edges."""

    vertices: list[int] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)

    def neighbors(self, vertex: int) -> list[int]:
        """Destinations of the edges leaving vertex, in edge order."""
        return [destination for source, destination in self.edges if source == vertex]


def depth_first_search(graph: Graph, root: int, objective: int) -> list[int] | None:
    """Vertices visited from root until objective is reached, or None if it never is."""
    visited: set[int] = set()
    history: list[int] = []
    pending: deque[int] = deque([root])

    while pending:
        current = pending.popleft()
        history.append(current)
        if current == objective:
            return history
        for neighbor in reversed(graph.neighbors(current)):
            if neighbor not in visited:
                visited.add(neighbor)
                pending.appendleft(neighbor)
    return None