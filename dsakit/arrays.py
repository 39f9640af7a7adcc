"""Operations on plain Python lists treated as simple arrays."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def format_array(items: Iterable[Any]) -> str:
    """Return the items separated by single spaces."""
    return " ".join(str(item) for item in items)


def format_reverse(items: Sequence[Any]) -> str:
    """Return the items in reverse order, separated by single spaces."""
    return " ".join(str(item) for item in reversed(items))


def format_matrix(rows: Iterable[Iterable[Any]]) -> str:
    """Return a two-dimensional array as lines of space-separated values."""
    return "\n".join(format_array(row) for row in rows)


def append_item(items: MutableSequence[Any], item: Any) -> None:
    """Add an item to the end of the array."""
    items.append(item)


def insert_at(items: MutableSequence[Any], item: Any, position: int) -> None:
    """Insert an item at a zero-based position, shifting later items right.

    The position may equal the length of the array, which appends.
    """
    if position < 0 or position > len(items):
        raise IndexError(f"invalid position: {position}")
    items.insert(position, item)


def remove_last(items: MutableSequence[Any]) -> Any:
    """Remove and return the last item."""
    if not items:
        raise IndexError("array is empty")
    return items.pop()


def remove_nth(items: MutableSequence[Any], position: int) -> Any:
    """Remove and return the item at a one-based position."""
    if position < 1 or position > len(items):
        raise IndexError(f"invalid position: {position}")
    return items.pop(position - 1)


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse the array in place."""
    items.reverse()


def linear_search(items: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first item equal to key, or None."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return None


def exchange_sort(items: MutableSequence[Any]) -> None:
    """Sort the array in place in ascending order by pairwise exchanges."""
    count = len(items)
    for i in range(count):
        for j in range(i + 1, count):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]


def update_nth(items: MutableSequence[Any], position: int, item: Any) -> None:
    """Replace the item at a one-based position."""
    if position < 1 or position > len(items):
        raise IndexError(f"invalid position: {position}")
    items[position - 1] = item