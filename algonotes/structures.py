"""Singly linked list and binary tree nodes, with helpers to build and read them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order.

    Raises ValueError if the list loops back on itself.
    """
    seen: set[int] = set()
    values: list[int] = []
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a binary tree from a level-order listing where None marks a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    queue = deque([root])
    rest = iter(items[1:])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(rest)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    if any(value is not None for value in rest):
        raise ValueError("level-order listing has values with no parent")
    return root