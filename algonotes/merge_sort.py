"""Merge sort, and counting inversions by the same divide-and-conquer scheme."""

from __future__ import annotations

from collections.abc import Sequence


def _merge(left: list[int], right: list[int]) -> tuple[list[int], int]:
    """Merge two sorted lists; also count pairs with a left value above a right one."""
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            inversions += len(left) - i
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_and_count(values: Sequence[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return list(values), 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    merged, cross_count = _merge(left, right)
    return merged, left_count + right_count + cross_count


def merge_sort(nums: Sequence[int]) -> list[int]:
    """Return the values of ``nums`` in non-decreasing order; the input is left alone."""
    return _sort_and_count(nums)[0]


def count_inversions(nums: Sequence[int]) -> int:
    """Number of index pairs ``i < j`` with ``nums[i] > nums[j]``."""
    return _sort_and_count(nums)[1]