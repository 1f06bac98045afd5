"""Moves that solve the Towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator


def _moves(n: int, source: int, target: int, via: int) -> Iterator[tuple[int, int]]:
    if n > 0:
        yield from _moves(n - 1, source, via, target)
        yield source, target
        yield from _moves(n - 1, via, target, source)


def hanoi(n: int, source: int, target: int, via: int) -> list[tuple[int, int]]:
    """Moves ``(from_peg, to_peg)`` that carry n discs from source to target."""
    return list(_moves(n, source, target, via))