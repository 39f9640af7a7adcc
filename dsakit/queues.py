"""Queues backed by a fixed-capacity array and by linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 101


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeuing an empty queue."""


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a full queue."""


class ArrayQueue:
    """A first-in, first-out queue with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """An unbounded first-in, first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self._front is None:
            raise QueueEmptyError("nothing to dequeue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        current = self._front
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size