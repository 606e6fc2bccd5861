"""Singly linked lists and the classic pointer algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class Node:
    """One cell of a singly linked list."""

    val: int
    next: Optional[Node] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[Node] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self.val!r})"


def from_iterable(values: Iterable[int]) -> Optional[Node]:
    """Build a list holding ``values`` in order; None when there are none."""
    dummy = Node(0)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[Node]) -> list[int]:
    """Values of the list as a Python list."""
    return list(head) if head is not None else []


def has_cycle(head: Optional[Node]) -> bool:
    """True if following ``next`` from ``head`` ever revisits a node (Floyd)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_sorted(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Splice two sorted lists into one sorted list; on ties ``second`` goes first."""
    dummy = Node(0)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def middle_node(head: Optional[Node]) -> Optional[Node]:
    """Middle node; the second of the two middles when the length is even."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def remove_nth_from_end(head: Optional[Node], n: int) -> Optional[Node]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = Node(0, head)
    lead: Optional[Node] = dummy
    for _ in range(n + 1):
        if lead is None:
            raise ValueError(f"list has fewer than {n} nodes")
        lead = lead.next
    trail = dummy
    while lead is not None:
        lead = lead.next
        trail = trail.next  # type: ignore[assignment]
    trail.next = trail.next.next  # type: ignore[union-attr]
    return dummy.next


def reverse_list(head: Optional[Node]) -> Optional[Node]:
    """Reverse the links in place and return the new head."""
    prev: Optional[Node] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def contains(head: Optional[Node], key: int) -> bool:
    """True if some node holds ``key``."""
    return head is not None and key in head


def length(head: Optional[Node]) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in head) if head is not None else 0


def remove_sorted_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Drop repeated neighbours from a sorted list in place; returns the head."""
    curr = head
    while curr is not None and curr.next is not None:
        if curr.val == curr.next.val:
            curr.next = curr.next.next
        else:
            curr = curr.next
    return head


def format_list(head: Optional[Node]) -> str:
    """Render the list as ``a -> b -> NULL``."""
    return "".join(f"{value} -> " for value in (head or ())) + "NULL"