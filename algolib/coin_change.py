"""Fewest coins making up an amount."""

from __future__ import annotations

from collections.abc import Sequence


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins summing to amount, or None if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must be non-negative")

    # fewest[i]: fewest coins making up i, None when impossible
    fewest: list[int | None] = [0] + [None] * amount
    for i in range(1, amount + 1):
        options = [
            fewest[i - coin] + 1
            for coin in coins
            if 0 < coin <= i and fewest[i - coin] is not None
        ]
        if options:
            fewest[i] = min(options)
    return fewest[amount]