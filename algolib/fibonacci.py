"""Several ways of computing Fibonacci numbers."""

from __future__ import annotations


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")


def fibonacci(n: int) -> int:
    """Return the nth Fibonacci number with F(0) = F(1) = 1."""
    _check(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return b


def recursive_fibonacci(n: int) -> int:
    """Return the nth Fibonacci number with F(0) = F(1) = 1, computed recursively."""
    _check(n)
    return _recursive_fibonacci(n, 0, 1)


def _recursive_fibonacci(n: int, previous: int, current: int) -> int:
    if n == 0:
        return current
    return _recursive_fibonacci(n - 1, current, current + previous)


def classical_fibonacci(n: int) -> int:
    """Return the nth Fibonacci number with F(0) = 0 and F(1) = 1."""
    _check(n)
    if n < 2:
        return n
    k = n // 2
    f1 = classical_fibonacci(k)
    f2 = classical_fibonacci(k - 1)
    remainder = n % 4
    if remainder in (0, 2):
        return f1 * (f1 + 2 * f2)
    product = (2 * f1 + f2) * (2 * f1 - f2)
    return product + 2 if remainder == 1 else product - 2


def logarithmic_fibonacci(n: int) -> int:
    """Return the nth Fibonacci number with F(0) = 0, using fast doubling."""
    _check(n)
    return _fast_doubling(n)[0]


def _fast_doubling(n: int) -> tuple[int, int]:
    if n == 0:
        return 0, 1
    current, following = _fast_doubling(n // 2)
    c = current * (following * 2 - current)
    d = current * current + following * following
    return (c, d) if n % 2 == 0 else (d, c + d)


def memoized_fibonacci(n: int) -> int:
    """Return the nth Fibonacci number with F(0) = 0, memoising subresults."""
    _check(n)
    cache: dict[int, int] = {}

    def compute(m: int) -> int:
        if m < 2:
            return m
        if m not in cache:
            cache[m] = compute(m - 1) + compute(m - 2)
        return cache[m]

    return compute(n)