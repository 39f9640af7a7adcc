"""Stacks backed by a fixed-capacity array and by linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 101


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        current = self._top
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size


def reverse_string(text: str) -> str:
    """Reverse a string by pushing its characters on a stack and popping them."""
    stack = LinkedStack()
    for char in text:
        stack.push(char)
    return "".join(stack.pop() for _ in range(len(stack)))