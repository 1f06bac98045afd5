"""Convex hull of points in the plane by Graham scan."""

from __future__ import annotations

import math
from collections.abc import Sequence

Point = tuple[float, float]


def _sort_by_angle(points: Sequence[Point], origin: Point) -> list[Point]:
    """Order points by polar angle about origin, nearer ones first on ties."""

    def key(p: Point) -> tuple[float, float, Point]:
        dx, dy = p[0] - origin[0], p[1] - origin[1]
        return math.atan2(dy, dx), math.hypot(dy, dx), p

    return sorted(points, key=key)


def _cross(a: Point, b: Point, c: Point) -> float:
    """z component of the cross product of vectors ab and ac."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])


def convex_hull_graham(points: Sequence[Point]) -> list[Point]:
    """Hull vertices counter-clockwise from the lowest, then leftmost, point.

    Collinear points on the hull boundary are kept.
    """
    if not points:
        return []

    origin = min(points, key=lambda p: (p[1], p[0]))
    ordered = _sort_by_angle(points, origin)
    if len(ordered) <= 3:
        return ordered

    stack: list[Point] = []
    for point in ordered:
        while len(stack) > 1 and _cross(stack[-2], stack[-1], point) < 0:
            stack.pop()
        stack.append(point)
    return stack