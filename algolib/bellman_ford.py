"""Single-source shortest paths with the Bellman-Ford algorithm."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

Graph = Mapping[Any, Mapping[Any, Any]]
Distances = dict[Any, "tuple[Any, Any] | None"]


def bellman_ford(graph: Graph, start: Hashable) -> Distances | None:
    """Shortest distances from start in a directed weighted graph.

    ``graph[u][v]`` is the weight of the edge from u to v. The result maps
    every reachable vertex to ``(predecessor, distance)``; the start maps to
    None. Returns None when a negative cycle is found.
    """
    ans: Distances = {start: None}

    for _ in range(1, len(graph)):
        for u in sorted(graph):
            if u not in ans:
                continue
            entry_u = ans[u]
            dist_u = None if entry_u is None else entry_u[1]
            edges = graph[u]

            for v in sorted(edges):
                d = edges[v]
                if v in ans:
                    entry_v = ans[v]
                    if entry_v is None:
                        # v is the start: a path back to it is only of interest
                        # when it reveals a negative loop.
                        if dist_u is not None and dist_u >= -d:
                            continue
                        if d > d + d:
                            return None
                        continue
                    dist_v = entry_v[1]
                    candidate = d if dist_u is None else dist_u + d
                    if candidate >= dist_v:
                        continue
                ans[v] = (u, d if dist_u is None else dist_u + d)

    for u in sorted(graph):
        edges = graph[u]
        for v in sorted(edges):
            if u not in ans or v not in ans:
                continue
            d = edges[v]
            entry_u, entry_v = ans[u], ans[v]
            if entry_u is None and entry_v is None:
                if d > d + d:
                    return None
            elif entry_u is None:
                if d < entry_v[1]:
                    return None
            elif entry_v is None:
                if entry_u[1] < -d:
                    return None
            elif entry_u[1] + d < entry_v[1]:
                return None

    return ans