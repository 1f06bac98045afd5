"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Mapping
from typing import Any

Graph = Mapping[Any, Mapping[Any, Any]]


def dijkstra(graph: Graph, start: Hashable) -> dict[Any, tuple[Any, Any] | None]:
    """Shortest distances from start in a graph with non-negative weights.

    ``graph[u][v]`` is the weight of the edge from u to v. The result maps
    every reachable vertex to ``(predecessor, distance)``; the start maps to
    None.
    """
    ans: dict[Any, tuple[Any, Any] | None] = {start: None}
    queue: list[tuple[Any, Any, Any]] = []

    for new in sorted(graph[start]):
        weight = graph[start][new]
        ans[new] = (start, weight)
        heapq.heappush(queue, (weight, new, start))

    while queue:
        dist_new, new, prev = heapq.heappop(queue)
        if ans[new] != (prev, dist_new):
            # Stale queue entry, or the start itself.
            continue

        edges = graph[new]
        for following in sorted(edges):
            weight = edges[following]
            candidate = weight + dist_new
            if following in ans:
                entry = ans[following]
                if entry is None or candidate >= entry[1]:
                    continue
            ans[following] = (new, candidate)
            heapq.heappush(queue, (candidate, following, new))

    return ans