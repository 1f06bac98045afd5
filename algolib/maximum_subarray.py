"""Largest sum of a contiguous, non-empty subarray."""

from __future__ import annotations

from collections.abc import Sequence


def maximum_subarray(array: Sequence[int]) -> int:
    """Largest sum of any contiguous subarray holding at least one element."""
    if not array:
        raise ValueError("array must not be empty")

    current = best = array[0]
    for value in array[1:]:
        current = current + value if current > 0 else value
        best = max(best, current)
    return best