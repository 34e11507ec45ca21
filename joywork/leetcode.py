"""Solutions to a couple of classic interview problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class ListNode:
    """Singly linked list node."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list from ``values``; an empty input gives ``None``."""
        head: ListNode | None = None
        tail: ListNode | None = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair summing to ``target``, or an empty list."""
    needed: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in needed:
            return [needed[value], index]
        needed.setdefault(target - value, index)
    return []


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists."""
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    digits: list[int] = []
    carry = 0
    while l1 is not None or l2 is not None:
        total = (l1.val if l1 else 0) + (l2.val if l2 else 0) + carry
        carry, digit = divmod(total, 10)
        digits.append(digit)
        l1 = l1.next if l1 else None
        l2 = l2.next if l2 else None
    if carry > 0:
        digits.append(carry)
    return ListNode.from_values(digits)