"""Prim's minimum spanning tree algorithm on undirected weighted graphs."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Mapping
from typing import Any

Graph = Mapping[Any, Mapping[Any, Any]]


def add_undirected_edge(
    graph: dict[Any, dict[Any, Any]], v1: Hashable, v2: Hashable, cost: Any
) -> None:
    """Add an edge of the given cost between v1 and v2 in both directions."""
    graph.setdefault(v1, {})[v2] = cost
    graph.setdefault(v2, {})[v1] = cost


def prim(graph: Graph) -> dict[Any, dict[Any, Any]]:
    """Minimum spanning tree grown from the smallest vertex; empty for an empty graph."""
    if not graph:
        return {}
    return prim_with_start(graph, min(graph))


def prim_with_start(graph: Graph, start: Hashable) -> dict[Any, dict[Any, Any]]:
    """Minimum spanning tree of the component of graph that holds start."""
    mst: dict[Any, dict[Any, Any]] = {start: {}}
    queue: list[tuple[Any, Any, Any]] = []

    for vertex in sorted(graph[start]):
        heapq.heappush(queue, (graph[start][vertex], vertex, start))

    while queue:
        cost, target, source = heapq.heappop(queue)
        if target in mst:
            continue
        add_undirected_edge(mst, source, target, cost)
        for vertex in sorted(graph[target]):
            if vertex not in mst:
                heapq.heappush(queue, (graph[target][vertex], vertex, target))

    return mst