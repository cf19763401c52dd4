"""Array problems: sums, searching, in-place compaction and counting."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, combinations, groupby, pairwise
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Find two indices whose values add up to ``target`` in one pass.

    Returns ``[later_index, earlier_index]`` for the first pair found, or an
    empty list when no pair exists.
    """
    seen: dict[int, int] = {}
    for i, x in enumerate(nums):
        j = seen.get(target - x)
        if j is not None:
            return [i, j]
        seen[x] = i
    return []


def two_sum_all(nums: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return every index pair ``(i, j)``, ``i < j``, whose values add up to ``target``."""
    return [
        (i, j)
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a + b == target
    ]


def remove_duplicates(nums: list[int]) -> int:
    """Drop repeated neighbours from a sorted list in place and return its new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every ``val`` from the list in place, keeping order; return the new length."""
    nums[:] = [x for x in nums if x != val]
    return len(nums)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Binary search a sorted sequence for ``target``.

    Returns its index if present, otherwise the index at which it would be inserted.
    """
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by dynamic programming."""
    values = iter(nums)
    try:
        best = current = next(values)
    except StopIteration:
        raise ValueError("max_subarray() needs at least one number") from None
    for x in values:
        current = max(current + x, x)
        best = max(best, current)
    return best


def max_subarray_divide(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by divide and conquer."""
    if not nums:
        raise ValueError("max_subarray_divide() needs at least one number")

    def solve(lo: int, hi: int) -> int:
        if lo == hi:
            return nums[lo]
        mid = (lo + hi) // 2
        left_best = solve(lo, mid)
        right_best = solve(mid + 1, hi)
        cross_left = max(accumulate(reversed(nums[lo:mid + 1])))
        cross_right = max(accumulate(nums[mid + 1:hi + 1]))
        return max(left_best, right_best, cross_left + cross_right)

    return solve(0, len(nums) - 1)


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] == 9:
            result[i] = 0
        else:
            result[i] += 1
            return result
    return [1, *result]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place.

    ``nums1`` must have room for ``m + n`` values.
    """
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")
    nums1[:m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell; zero if no trade pays."""
    best = run = 0
    for before, after in pairwise(prices):
        change = after - before
        run = max(run + change, change)
        best = max(best, run)
    return best


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Find two 1-based positions in a sorted sequence whose values add up to ``target``.

    Returns an empty list when no pair exists.
    """
    i, j = 0, len(numbers) - 1
    while i < j:
        total = numbers[i] + numbers[j]
        if total == target:
            return [i + 1, j + 1]
        if total < target:
            i += 1
        else:
            j -= 1
    return []


def majority_element(nums: Sequence[int]) -> int:
    """Return the most frequent value; zero for an empty sequence."""
    counts = Counter(nums)
    if not counts:
        return 0
    return counts.most_common(1)[0][0]