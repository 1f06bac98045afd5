"""Rows of Pascal's triangle."""

from __future__ import annotations


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first num_rows rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for i in range(1, num_rows + 1):
        row = [1]
        value = 1
        for k in range(1, i):
            value = value * (i - k) // k
            row.append(value)
        rows.append(row)
    return rows