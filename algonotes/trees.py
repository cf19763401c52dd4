"""Binary tree problems: traversals, shape checks, depths and path sums."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Sequence
from enum import Enum
from typing import Optional

from algonotes.structures import TreeNode


class MidpointRule(Enum):
    """How to pick the root when a slice has an even number of values."""

    LOWER = "lower"
    UPPER = "upper"
    RANDOM = "random"


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values of the tree in left, node, right order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            values.append(node.val)
            node = node.right
    return values


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values of the tree in node, left, right order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            values.append(node.val)
            stack.append(node)
            node = node.left
        else:
            node = stack.pop().right
    return values


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values of the tree in left, right, node order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    last_visited: Optional[TreeNode] = None
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is None or top.right is last_visited:
            values.append(top.val)
            stack.pop()
            last_visited = top
        else:
            node = top.right
    return values


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    pending = deque([(p, q)])
    while pending:
        a, b = pending.popleft()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.left, b.left))
        pending.append((a.right, b.right))
    return True


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself; an empty tree is."""
    if root is None:
        return True
    pending = deque([(root.left, root.right)])
    while pending:
        a, b = pending.popleft()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.left, b.right))
        pending.append((a.right, b.left))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def sorted_array_to_bst(
    nums: Sequence[int],
    rule: MidpointRule = MidpointRule.LOWER,
    rng: Optional[random.Random] = None,
) -> Optional[TreeNode]:
    """Build a height-balanced search tree from an ascending sequence.

    ``rule`` decides which middle value becomes the root of an even-sized
    slice; with ``MidpointRule.RANDOM`` the choice is drawn from ``rng``.
    """
    chooser = rng if rng is not None else random

    def middle(begin: int, end: int) -> int:
        if rule is MidpointRule.LOWER:
            return (begin + end) // 2
        if rule is MidpointRule.UPPER:
            return (begin + end + 1) // 2
        return (begin + end + chooser.randrange(2)) // 2

    def build(begin: int, end: int) -> Optional[TreeNode]:
        if begin > end:
            return None
        mid = middle(begin, end)
        return TreeNode(nums[mid], build(begin, mid - 1), build(mid + 1, end))

    return build(0, len(nums) - 1)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def height(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        left = height(node.left)
        if left is None:
            return None
        right = height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return height(root) is not None


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest path from the root down to a leaf."""
    if root is None:
        return 0
    pending = deque([(root, 1)])
    while pending:
        node, depth = pending.popleft()
        if node.left is None and node.right is None:
            return depth
        for child in (node.left, node.right):
            if child is not None:
                pending.append((child, depth + 1))
    return 0


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path has values adding up to ``target_sum``."""
    if root is None:
        return False
    pending = deque([(root, root.val)])
    while pending:
        node, total = pending.popleft()
        if node.left is None and node.right is None and total == target_sum:
            return True
        for child in (node.left, node.right):
            if child is not None:
                pending.append((child, total + child.val))
    return False