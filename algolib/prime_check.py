"""Primality test by trial division."""

from __future__ import annotations

from math import isqrt


def prime_check(num: int) -> bool:
    """True if num is prime."""
    if 1 < num < 4:
        return True
    if num < 2 or num % 2 == 0:
        return False
    return all(num % i for i in range(3, isqrt(num) + 1, 2))