"""The egg dropping puzzle."""

from __future__ import annotations


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the highest safe floor."""
    if eggs <= 0:
        raise ValueError("eggs must be positive")
    if floors < 0:
        raise ValueError("floors must be non-negative")
    if eggs == 1 or floors <= 1:
        return floors

    # drops[i][j]: answer with i eggs and j floors
    drops = [[0] * (floors + 1) for _ in range(eggs + 1)]
    for row in drops[1:]:
        row[1] = 1
    drops[1] = list(range(floors + 1))

    for i in range(2, eggs + 1):
        fewer, row = drops[i - 1], drops[i]
        for j in range(2, floors + 1):
            row[j] = min(1 + max(fewer[k - 1], row[j - k]) for k in range(1, j + 1))
    return drops[eggs][floors]