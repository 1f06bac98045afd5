"""Find two entries of a list that add up to a target."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` with ``j < i`` and ``nums[i] + nums[j] == target``.

    Returns the first such pair found scanning left to right, or an empty list.
    """
    seen: dict[int, int] = {}
    for i, item in enumerate(nums):
        partner = seen.get(target - item)
        if partner is not None:
            return [i, partner]
        seen[item] = i
    return []