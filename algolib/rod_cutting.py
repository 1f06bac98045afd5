"""The rod-cutting problem."""

from __future__ import annotations

from collections.abc import Sequence


def rod_cut(prices: Sequence[int]) -> int:
    """Best profit from cutting a rod of length ``len(prices)``.

    ``prices[l - 1]`` is the profit of a piece of length ``l``.
    """
    best: list[int] = []
    for i, price in enumerate(prices):
        best.append(max([price, *(prices[j - 1] + best[i - j] for j in range(1, i + 1))]))
    return best[-1] if best else 0