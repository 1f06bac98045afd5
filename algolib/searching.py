"""Binary and linear search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(item: Any, arr: Sequence[Any]) -> int | None:
    """Index of item in the sorted sequence arr, or None if absent."""
    left, right = 0, len(arr)
    while left < right:
        mid = left + (right - left) // 2
        if item < arr[mid]:
            right = mid
        elif item == arr[mid]:
            return mid
        else:
            left = mid + 1
    return None


def binary_search_rec(
    items: Sequence[Any], target: Any, left: int = 0, right: int | None = None
) -> int | None:
    """Recursive binary search for target within ``items[left:right]``."""
    if right is None:
        right = len(items)
    if left >= right:
        return None

    middle = left + (right - left) // 2
    if target < items[middle]:
        return binary_search_rec(items, target, left, middle)
    if target > items[middle]:
        return binary_search_rec(items, target, middle + 1, right)
    return middle


def linear_search(item: Any, arr: Sequence[Any]) -> int | None:
    """Index of the first element equal to item, or None."""
    return next((i for i, value in enumerate(arr) if value == item), None)