"""Subsequence test for strings."""

from __future__ import annotations


def is_subsequence(sub: str, text: str) -> bool:
    """True if sub can be formed from text by deleting characters.

    The comparison is made over the UTF-8 bytes of both strings.
    """
    remaining = iter(text.encode("utf-8"))
    return all(byte in remaining for byte in sub.encode("utf-8"))