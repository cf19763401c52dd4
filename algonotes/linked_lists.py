"""Singly linked list problems: merging, de-duplication, cycles and intersections."""

from __future__ import annotations

from typing import Optional

from algonotes.structures import ListNode


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two ascending lists into one ascending list, reusing their nodes.

    On equal values the node from ``l1`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink repeated values from an ascending list so each appears once."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops, using slow and fast pointers."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by two lists, or None if they never meet."""
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a