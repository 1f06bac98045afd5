"""Largest all-ones square in a binary matrix."""

from __future__ import annotations

from collections.abc import Sequence


def maximal_square(matrix: Sequence[Sequence[int]]) -> int:
    """Area of the largest square made only of 1s. The input is not modified."""
    if not matrix:
        return 0

    sides = [list(row) for row in matrix]
    best = 0
    for r, row in enumerate(sides):
        for c, cell in enumerate(row):
            if cell != 1:
                continue
            if r == 0 or c == 0:
                best = max(best, 1)
            else:
                above = sides[r - 1]
                side = min(above[c - 1], above[c], row[c - 1]) + 1
                row[c] = side
                best = max(best, side)
    return best * best