import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.structures import TreeNode, build_tree
from algonotes.trees import (
    MidpointRule,
    has_path_sum,
    inorder,
    is_balanced,
    is_same_tree,
    is_symmetric,
    max_depth,
    min_depth,
    postorder,
    preorder,
    sorted_array_to_bst,
)

sorted_lists = st.lists(st.integers(-1000, 1000), max_size=60, unique=True).map(sorted)


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


def _leaf_sums(node, acc=0):
    if node is None:
        return []
    total = acc + node.val
    if node.left is None and node.right is None:
        return [total]
    return _leaf_sums(node.left, total) + _leaf_sums(node.right, total)


def test_traversals_of_empty_tree_are_empty():
    assert inorder(None) == []
    assert preorder(None) == []
    assert postorder(None) == []


def test_inorder_of_example_tree():
    root = build_tree([1, None, 2, 3])
    assert inorder(root) == [1, 3, 2]


@given(sorted_lists)
def test_inorder_of_search_tree_is_sorted_input(nums):
    assert inorder(sorted_array_to_bst(nums)) == nums


@given(sorted_lists.filter(bool))
def test_preorder_and_postorder_place_root(nums):
    root = sorted_array_to_bst(nums, MidpointRule.UPPER)
    pre, post = preorder(root), postorder(root)
    assert pre[0] == root.val
    assert post[-1] == root.val
    assert sorted(pre) == nums
    assert sorted(post) == nums


def test_same_tree():
    assert is_same_tree(build_tree([1, 2, 3]), build_tree([1, 2, 3]))
    assert not is_same_tree(build_tree([1, 2]), build_tree([1, None, 2]))
    assert not is_same_tree(build_tree([1, 2, 1]), build_tree([1, 1, 2]))
    assert is_same_tree(None, None)
    assert not is_same_tree(build_tree([1]), None)


def test_symmetric_examples():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(build_tree([1, 2, 2, None, 3, None, 3]))
    assert is_symmetric(None)


@given(sorted_lists.filter(bool))
def test_tree_joined_with_its_mirror_is_symmetric(nums):
    half = sorted_array_to_bst(nums)
    assert is_symmetric(TreeNode(0, half, _mirror(half)))


def test_depths_of_example_tree():
    root = build_tree([3, 9, 20, None, None, 15, 7])
    assert max_depth(root) == 3
    assert min_depth(root) == 2


def test_depths_of_empty_tree():
    assert max_depth(None) == 0
    assert min_depth(None) == 0


def test_min_depth_ignores_missing_child():
    root = build_tree([2, None, 3, None, 4, None, 5, None, 6])
    assert min_depth(root) == max_depth(root)
    assert max_depth(root) == len(inorder(root))


@given(sorted_lists)
def test_balanced_tree_has_minimal_height(nums):
    root = sorted_array_to_bst(nums)
    assert is_balanced(root)
    assert max_depth(root) == len(nums).bit_length()


def test_midpoint_rules_pick_different_roots():
    assert sorted_array_to_bst([1, 2], MidpointRule.LOWER).val == 1
    assert sorted_array_to_bst([1, 2], MidpointRule.UPPER).val == 2
    assert sorted_array_to_bst([]) is None


@given(sorted_lists, st.integers(0, 2**32))
def test_random_rule_still_builds_balanced_search_tree(nums, seed):
    root = sorted_array_to_bst(nums, MidpointRule.RANDOM, random.Random(seed))
    assert inorder(root) == nums
    assert is_balanced(root)


def test_random_rule_is_reproducible_with_seed():
    nums = list(range(40))
    a = sorted_array_to_bst(nums, MidpointRule.RANDOM, random.Random(7))
    b = sorted_array_to_bst(nums, MidpointRule.RANDOM, random.Random(7))
    assert is_same_tree(a, b)


def test_unbalanced_chain():
    assert not is_balanced(build_tree([1, None, 2, None, 3]))
    assert is_balanced(None)


def test_path_sum_example():
    root = build_tree([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1])
    assert has_path_sum(root, 22)
    assert not has_path_sum(root, 5)


def test_path_sum_empty_tree():
    assert not has_path_sum(None, 0)


@pytest.mark.parametrize("values", [[1, 2, 3], [1, 2], [-2, None, -3]])
def test_path_sum_matches_every_leaf_sum(values):
    root = build_tree(values)
    sums = _leaf_sums(root)
    for total in sums:
        assert has_path_sum(root, total)
    assert not has_path_sum(root, max(sums) + 1)


@given(sorted_lists.filter(bool))
def test_path_sum_of_generated_trees(nums):
    root = sorted_array_to_bst(nums)
    for total in _leaf_sums(root):
        assert has_path_sum(root, total)