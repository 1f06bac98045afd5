"""K-means clustering with deterministic initial centroids."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _distance(x: Sequence[float], y: Sequence[float]) -> float:
    """Sum of squared differences between two equally sized vectors."""
    return sum((xi - yi) ** 2 for xi, yi in zip(x, y))


def _nearest_centroids(
    xs: Sequence[Sequence[float]], centroids: Sequence[Sequence[float]]
) -> list[int]:
    """Index of the nearest centroid for each datum; ties go to the lower index."""
    assignment: list[int] = []
    for xi in xs:
        best_index, best_distance = 0, math.inf
        for index, centroid in enumerate(centroids):
            dist = _distance(xi, centroid)
            if dist < best_distance:
                best_index, best_distance = index, dist
        assignment.append(best_index)
    return assignment


def _recompute_centroids(
    xs: Sequence[Sequence[float]], clustering: Sequence[int], k: int
) -> list[list[float]]:
    """Mean of the data in each cluster; an empty cluster gets NaN coordinates."""
    ndims = len(xs[0])
    centroids: list[list[float]] = []
    for cluster in range(k):
        members = [xi for xi, zi in zip(xs, clustering) if zi == cluster]
        if not members:
            centroids.append([math.nan] * ndims)
            continue
        count = len(members)
        centroids.append([sum(column) / count for column in zip(*members)])
    return centroids


def kmeans(xs: Sequence[Sequence[float]], k: int) -> list[int]:
    """Assign each datum in xs to one of k clusters; returns cluster indices."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if len(xs) < k:
        raise ValueError("need at least k data points")

    # Evenly spaced data points serve as the initial centroids.
    step = len(xs) // k
    centroids = [list(xs[j * step]) for j in range(k)]
    clustering = _nearest_centroids(xs, centroids)

    while True:
        centroids = _recompute_centroids(xs, clustering, k)
        new_clustering = _nearest_centroids(xs, centroids)
        if new_clustering == clustering:
            return clustering
        clustering = new_clustering