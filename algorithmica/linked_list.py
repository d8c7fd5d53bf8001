"""Singly linked lists: building, deletion, merging, sorting and rotation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding values in order; None when there are none."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of the list as a Python list."""
    return [] if head is None else list(head)


def push(head: ListNode | None, value: Any) -> ListNode:
    """Put value at the front of the list and return the new head."""
    return ListNode(value, head)


def delete_key(head: ListNode | None, key: Any) -> ListNode | None:
    """Unlink the first node holding key and return the head of the list."""
    if head is None:
        return None
    if head.val == key:
        return head.next
    previous = head
    for node in _nodes(head.next):
        if node.val == key:
            previous.next = node.next
            break
        previous = node
    return head


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two ascending lists into one by relinking their nodes.

    On equal values the node from the first list comes first.
    """
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.val > second.val:
            tail.next, second = second, second.next
        else:
            tail.next, first = first, first.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def insertion_sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list in ascending order by relinking its nodes; stable."""
    nodes = list(_nodes(head))
    anchor = ListNode(None)
    for node in reversed(nodes):
        place = anchor
        while place.next is not None and node.val > place.next.val:
            place = place.next
        node.next = place.next
        place.next = node
    return anchor.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list k places to the right and return the new head."""
    if head is None:
        return None
    nodes = list(_nodes(head))
    shift = k % len(nodes)
    if shift == 0:
        return head
    new_tail = nodes[len(nodes) - shift - 1]
    new_head = new_tail.next
    new_tail.next = None
    nodes[-1].next = head
    return new_head