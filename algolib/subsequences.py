"""Longest common subsequence and longest run of strictly increasing items."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def longest_common_subsequence(a: str, b: str) -> str:
    """A longest string that is a subsequence of both a and b."""
    # lengths[i][j]: LCS length of a[:i] and b[:j]
    lengths = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, ca in enumerate(a):
        for j, cb in enumerate(b):
            if ca == cb:
                lengths[i + 1][j + 1] = lengths[i][j] + 1
            else:
                lengths[i + 1][j + 1] = max(lengths[i][j + 1], lengths[i + 1][j])

    result: list[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif lengths[i - 1][j] > lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(result))


def longest_continuous_increasing_subsequence(items: Sequence[Any]) -> Sequence[Any]:
    """The first longest contiguous slice of items that is strictly increasing."""
    n = len(items)
    if n <= 1:
        return items[:]

    # run[i]: length of the increasing run that starts at i
    run = [1] * n
    for i in reversed(range(n - 1)):
        if items[i] < items[i + 1]:
            run[i] = run[i + 1] + 1

    start = max(range(n), key=run.__getitem__)
    return items[start : start + run[start]]