"""The 0/1 knapsack problem."""

from __future__ import annotations

from collections.abc import Sequence


def _table(capacity: int, weights: Sequence[int], values: Sequence[int]) -> list[list[int]]:
    """Best value using the first i items with weight at most j, for every i and j."""
    table = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        previous = table[-1]
        row = [0] * (capacity + 1)
        for j in range(1, capacity + 1):
            if weight <= j:
                row[j] = max(value + previous[j - weight], previous[j])
            else:
                row[j] = previous[j]
        table.append(row)
    return table


def _chosen_items(weights: Sequence[int], table: list[list[int]], capacity: int) -> list[int]:
    """1-based indices of the items in an optimal knapsack, ascending."""
    chosen: list[int] = []
    j = capacity
    for i in range(len(weights), 0, -1):
        if table[i][j] > table[i - 1][j]:
            chosen.append(i)
            j -= weights[i - 1]
    chosen.reverse()
    return chosen


def knapsack(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> tuple[int, int, list[int]]:
    """Solve the 0/1 knapsack.

    Returns the optimal profit, the total weight of the chosen items and the
    1-based indices of those items.
    """
    if len(weights) != len(values):
        raise ValueError(
            "Number of items in the list of weights doesn't match "
            "the number of items in the list of values!"
        )
    if capacity < 0:
        raise ValueError("capacity must be non-negative")

    table = _table(capacity, weights, values)
    items = _chosen_items(weights, table, capacity)
    total_weight = sum(weights[i - 1] for i in items)
    return table[len(weights)][capacity], total_weight, items