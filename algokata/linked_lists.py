"""Singly linked lists: removal from the end, deep copies and cycle detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node that also carries a pointer to an arbitrary node of its list."""

    val: int = 0
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end (1 is the last) and return the head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n is larger than the length of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return head


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of a list whose nodes carry random pointers."""
    copies: dict[Optional[RandomNode], Optional[RandomNode]] = {None: None}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next
    for original, copy in copies.items():
        if original is None:
            continue
        copy.next = copies[original.next]
        copy.random = copies[original.random]
    return copies[head]


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None if the list ends."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            entry = head
            while entry is not slow:
                entry = entry.next
                slow = slow.next
            return entry
    return None