"""Integer algorithms: gcd, modular power, perfect numbers, primes and factorisation."""

from __future__ import annotations

from math import isqrt


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def extended_euclidean_algorithm(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``g == a*s + b*t`` and ``g`` the gcd of a and b."""
    old_r, rem = a, b
    old_s, coeff_s = 1, 0
    old_t, coeff_t = 0, 1

    while rem != 0:
        quotient = _trunc_div(old_r, rem)
        old_r, rem = rem, old_r - quotient * rem
        old_s, coeff_s = coeff_s, old_s - quotient * coeff_s
        old_t, coeff_t = coeff_t, old_t - quotient * coeff_t

    return old_r, old_s, old_t


def fast_power(base: int, power: int, modulus: int) -> int:
    """Return ``base ** power`` reduced modulo ``modulus`` by repeated squaring."""
    if base < 1:
        raise ValueError("base must be at least 1")

    result = 1
    while power > 0:
        if power & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        power >>= 1
    return result


def greatest_common_divisor_recursive(a: int, b: int) -> int:
    """Greatest common divisor of a and b, always non-negative."""
    if a == 0:
        return abs(b)
    return greatest_common_divisor_recursive(_trunc_rem(b, a), a)


def greatest_common_divisor_iterative(a: int, b: int) -> int:
    """Greatest common divisor of a and b, always non-negative."""
    while a != 0:
        a, b = _trunc_rem(b, a), a
    return abs(b)


def is_perfect_number(num: int) -> bool:
    """True if num equals the sum of its divisors below ``num - 1``."""
    if num < 1:
        raise ValueError("num must be a positive integer")
    return num == sum(i for i in range(1, num - 1) if num % i == 0)


def perfect_numbers(max_value: int) -> list[int]:
    """All perfect numbers from 1 up to and including max_value."""
    return [i for i in range(1, max_value + 1) if is_perfect_number(i)]


def prime_numbers(max_value: int) -> list[int]:
    """All primes up to and including max_value, in ascending order."""
    result = [2] if max_value >= 2 else []
    for candidate in range(3, max_value + 1, 2):
        stop = isqrt(candidate) + 1
        if all(candidate % divisor for divisor in range(3, stop, 2)):
            result.append(candidate)
    return result


def trial_division(num: int) -> list[int]:
    """Prime factors of num in ascending order, with repetition."""
    if num == 0:
        raise ValueError("zero has no prime factorisation")

    result: list[int] = []
    while num % 2 == 0:
        result.append(2)
        num //= 2

    factor = 3
    while factor * factor <= num:
        if num % factor == 0:
            result.append(factor)
            num //= factor
        else:
            factor += 2

    if num != 1:
        result.append(num)
    return result