"""Substring search: the brute-force scan and the Knuth-Morris-Pratt algorithm."""

from __future__ import annotations


def build_next(pattern: str) -> list[int]:
    """Build the KMP failure table for a non-empty pattern.

    Entry ``i`` is the length of the longest proper border of ``pattern[:i]``,
    with ``-1`` at index 0.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = [-1] * len(pattern)
    i, j = 0, -1
    while i < len(pattern) - 1:
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            table[i] = j
        else:
            j = table[j]
    return table


def kmp_search(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1.

    An empty pattern is found at index 0.
    """
    if not pattern:
        return 0
    table = build_next(pattern)
    i = j = 0
    while i < len(text) and j < len(pattern):
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - len(pattern) if j == len(pattern) else -1


def naive_search(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text`` by trying every offset, or -1."""
    width = len(pattern)
    return next(
        (start for start in range(len(text) - width + 1) if text[start:start + width] == pattern),
        -1,
    )