"""A priority queue that keeps its items ordered by a "less than" predicate."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Queue whose front is always the item that compares least.

    The whole queue is re-ordered on every push, so items that were changed
    in place after being queued are put back where they now belong.  Items
    that compare equal keep the order in which they were pushed.
    """

    def __init__(self, less: Callable[[T, T], bool]) -> None:
        self._less = less
        self._items: list[T] = []
        self._key = cmp_to_key(self._compare)

    def _compare(self, a: T, b: T) -> int:
        if self._less(a, b):
            return -1
        if self._less(b, a):
            return 1
        return 0

    def push(self, value: T) -> None:
        """Add a value and restore the ordering."""
        self._items.append(value)
        self._items.sort(key=self._key)

    def pop(self) -> T:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        return self._items.pop(0)

    def top(self) -> T:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("top of an empty priority queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)