import pytest
from hypothesis import assume, given, strategies as st

from algonotes.arrays import (
    majority_element,
    max_profit,
    max_subarray,
    max_subarray_divide,
    merge_sorted,
    plus_one,
    remove_duplicates,
    remove_element,
    search_insert,
    single_number,
    two_sum,
    two_sum_all,
    two_sum_sorted,
)

small_ints = st.integers(min_value=-50, max_value=50)


@given(st.lists(small_ints, max_size=30), small_ints)
def test_two_sum_finds_valid_pair_or_none_exists(nums, target):
    result = two_sum(nums, target)
    if result:
        later, earlier = result
        assert earlier < later
        assert nums[earlier] + nums[later] == target
    else:
        assert two_sum_all(nums, target) == []


@given(st.lists(small_ints, max_size=20), small_ints)
def test_two_sum_all_pairs_are_valid_and_ordered(nums, target):
    pairs = two_sum_all(nums, target)
    assert all(i < j and nums[i] + nums[j] == target for i, j in pairs)
    assert pairs == sorted(pairs)


def test_two_sum_all_lists_every_pair():
    nums = [1, 1, 1]
    assert two_sum_all(nums, 2) == [(0, 1), (0, 2), (1, 2)]


@given(st.lists(small_ints))
def test_remove_duplicates(nums):
    nums.sort()
    expected = sorted(set(nums))
    k = remove_duplicates(nums)
    assert k == len(expected)
    assert nums == expected


@given(st.lists(st.integers(0, 5)), st.integers(0, 5))
def test_remove_element_keeps_order(nums, val):
    original = list(nums)
    k = remove_element(nums, val)
    assert k == len(original) - original.count(val)
    assert val not in nums
    remaining = iter(original)
    assert all(x in remaining for x in nums)


def test_search_insert_source_example():
    assert search_insert([1, 3, 5, 6], 3) == 1


@given(st.lists(small_ints, unique=True), small_ints)
def test_search_insert_position(nums, target):
    nums.sort()
    idx = search_insert(nums, target)
    assert all(x < target for x in nums[:idx])
    assert all(x >= target for x in nums[idx:])
    if target in nums:
        assert nums[idx] == target


def test_max_subarray_source_example():
    nums = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    assert max_subarray(nums) == 6
    assert max_subarray_divide(nums) == 6


@given(st.lists(small_ints, min_size=1, max_size=40))
def test_max_subarray_strategies_agree(nums):
    best = max_subarray(nums)
    assert best == max_subarray_divide(nums)
    assert best >= max(nums)
    assert best >= sum(nums)


def test_max_subarray_rejects_empty():
    with pytest.raises(ValueError):
        max_subarray([])
    with pytest.raises(ValueError):
        max_subarray_divide([])


@given(st.integers(min_value=0, max_value=10**30))
def test_plus_one_adds_one(n):
    digits = [int(c) for c in str(n)]
    before = list(digits)
    result = plus_one(digits)
    assert int("".join(map(str, result))) == n + 1
    assert digits == before


@given(st.lists(small_ints), st.lists(small_ints))
def test_merge_sorted_in_place(first, second):
    first.sort()
    second.sort()
    nums1 = first + [0] * len(second)
    merge_sorted(nums1, len(first), second, len(second))
    assert nums1 == sorted(first + second)


def test_merge_sorted_needs_room():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


def test_max_profit_source_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


@given(st.lists(small_ints, min_size=2, max_size=40))
def test_max_profit_matches_best_run_of_changes(prices):
    changes = [b - a for a, b in zip(prices, prices[1:])]
    assert max_profit(prices) == max(0, max_subarray(changes))


@given(st.lists(small_ints, max_size=1))
def test_max_profit_needs_two_days(prices):
    assert max_profit(prices) == 0


@given(st.lists(st.integers(), unique=True, min_size=1))
def test_single_number(values):
    unique, *paired = values
    nums = paired + [unique] + paired[::-1]
    assert single_number(nums) == unique


@given(st.lists(small_ints, min_size=2, max_size=30), small_ints)
def test_two_sum_sorted(numbers, target):
    numbers.sort()
    result = two_sum_sorted(numbers, target)
    if result:
        i, j = result
        assert 1 <= i < j <= len(numbers)
        assert numbers[i - 1] + numbers[j - 1] == target
    else:
        assert two_sum_all(numbers, target) == []


@given(st.lists(small_ints, max_size=20), small_ints)
def test_majority_element(others, winner):
    assume(winner not in others)
    nums = others + [winner] * (len(others) + 1)
    assert majority_element(nums) == winner
    assert majority_element(nums[::-1]) == winner


def test_majority_element_empty():
    assert majority_element([]) == 0