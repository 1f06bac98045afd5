"""Levenshtein edit distance between two strings, measured over UTF-8 bytes."""

from __future__ import annotations


def edit_distance(str_a: str, str_b: str) -> int:
    """Insertions, deletions and substitutions needed to turn str_a into str_b.

    Uses a full distance table.
    """
    a, b = str_a.encode("utf-8"), str_b.encode("utf-8")
    distances = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    distances[0] = list(range(len(b) + 1))
    for i, row in enumerate(distances):
        row[0] = i

    for i, char_a in enumerate(a, start=1):
        previous, row = distances[i - 1], distances[i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            row[j] = min(previous[j] + 1, row[j - 1] + 1, previous[j - 1] + cost)
    return distances[-1][-1]


def edit_distance_se(str_a: str, str_b: str) -> int:
    """Same result as edit_distance, keeping only one row of the table."""
    a, b = str_a.encode("utf-8"), str_b.encode("utf-8")
    distances = list(range(len(b) + 1))

    for i, char_a in enumerate(a, start=1):
        diagonal = i - 1
        current = i
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current = min(diagonal + cost, current + 1, distances[j] + 1)
            diagonal = distances[j]
            distances[j] = current
    return distances[-1]