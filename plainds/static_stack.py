"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class StaticStack:
    """LIFO stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Maximum number of elements the stack can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from top to bottom without removing them."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"

    def is_full(self) -> bool:
        """Return True if no more elements fit."""
        return len(self._items) == self._capacity

    def push(self, value: Any) -> None:
        """Put a value on top; raise StackFullError if the stack is full."""
        if self.is_full():
            raise StackFullError("push onto a full stack")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]