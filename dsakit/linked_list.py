"""A singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """A node holding a value and a link to the next node."""

    value: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list with a head reference."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for item in items:
            self.append(item)

    def push_front(self, value: Any) -> None:
        """Insert a value at the beginning of the list."""
        self.head = ListNode(value, self.head)

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = node

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def __iter__(self) -> Iterator[Any]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)