"""Breadth-first search over a directed graph given as an edge list."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class Graph:
    """A directed graph: its nodes and its (source, destination) edges."""

    nodes: list[int] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)

    def neighbors(self, node: int) -> list[int]:
        """Destinations of the edges leaving node, in edge order."""
        return [destination for source, destination in self.edges if source == node]


def breadth_first_search(graph: Graph, root: int, target: int) -> list[int] | None:
    """Nodes visited from root until target is reached, or None if it never is."""
    visited = {root}
    history: list[int] = []
    queue: deque[int] = deque([root])

    while queue:
        current = queue.popleft()
        history.append(current)
        if current == target:
            return history
        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return None