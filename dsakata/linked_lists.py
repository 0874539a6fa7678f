"""Singly linked lists: building, merging sorted lists, removing from the end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """The values of the list starting at ``head``, in order."""
    return [] if head is None else list(head)


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes."""
    anchor = ListNode(0)
    tail = anchor
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists by merging neighbours pairwise until one remains."""
    pending = list(lists)
    if not pending:
        return None
    while len(pending) > 1:
        merged = [
            merge_two_lists(pending[i], pending[i + 1])
            for i in range(0, len(pending) - 1, 2)
        ]
        if len(pending) % 2:
            merged.append(pending[-1])
        pending = merged
    return pending[0]


def remove_nth_from_end(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Unlink the ``k``-th node from the end and return the new head.

    The list is left unchanged when ``k`` is not positive or exceeds its length.
    """
    if head is None or k <= 0:
        return head
    fast: Optional[ListNode] = head
    for _ in range(k):
        if fast is None:
            return head
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        assert slow.next is not None
        slow = slow.next
    assert slow.next is not None
    slow.next = slow.next.next
    return head