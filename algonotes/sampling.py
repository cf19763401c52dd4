"""Random sampling and shuffling: reservoir sampling, online selection, shuffles."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any, Optional


def _chooser(rng: Optional[random.Random]) -> Any:
    return rng if rng is not None else random


def reservoir_sample(
    nums: Sequence[int], m: int, rng: Optional[random.Random] = None
) -> list[int]:
    """Pick ``m`` of ``nums`` in one pass with reservoir sampling.

    Item ``i`` (for ``i >= m``) replaces slot ``j`` when a draw ``j`` from
    ``range(i)`` lands below ``m``.
    """
    if not 0 <= m <= len(nums):
        raise ValueError("sample size must be between 0 and the number of items")
    chooser = _chooser(rng)
    sample = list(nums[:m])
    if m == 0:
        return sample
    for i in range(m, len(nums)):
        j = chooser.randrange(i)
        if j < m:
            sample[j] = nums[i]
    return sample


def select_online(
    source: Iterable[int], n: int, m: int, rng: Optional[random.Random] = None
) -> list[int]:
    """Pick ``m`` of the next ``n`` values of ``source``, seeing each value once.

    The ``i``-th value is kept with probability ``remaining / (n - i)``, so every
    value is kept with probability ``m / n``.
    """
    if not 0 <= m <= n:
        raise ValueError("selection size must be between 0 and n")
    chooser = _chooser(rng)
    selected: list[int] = []
    remaining = m
    seen = 0
    for i, value in enumerate(islice(source, n)):
        seen += 1
        if chooser.randrange(n - i) < remaining:
            selected.append(value)
            remaining -= 1
    if seen < n:
        raise ValueError(f"source gave {seen} values, expected {n}")
    return selected


def priority_shuffle(items: list[Any], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``items`` in place by sorting on a random priority drawn for each."""
    chooser = _chooser(rng)
    keyed = [(chooser.random(), item) for item in items]
    keyed.sort(key=lambda pair: pair[0])
    items[:] = [item for _, item in keyed]


def fisher_yates_shuffle(items: list[Any], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``items`` in place, swapping each position with a random later one."""
    chooser = _chooser(rng)
    n = len(items)
    for i in range(n):
        k = chooser.randrange(i, n)
        items[i], items[k] = items[k], items[i]