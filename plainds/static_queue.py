"""A fixed-capacity first-in, first-out queue on a circular buffer."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueuing onto a queue that has reached its capacity."""


class StaticQueue:
    """FIFO queue holding at most ``capacity`` elements in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Maximum number of elements the queue can hold."""
        return len(self._items)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from front to rear without removing them."""
        capacity = self.capacity
        for offset in range(self._size):
            yield self._items[(self._front + offset) % capacity]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"

    def is_full(self) -> bool:
        """Return True if no more elements fit."""
        return self._size == self.capacity

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear; raise QueueFullError if the queue is full."""
        if self.is_full():
            raise QueueFullError("enqueue onto a full queue")
        self._items[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError if empty."""
        if not self._size:
            raise IndexError("dequeue from an empty queue")
        value = self._items[self._front]
        self._items[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it; raise IndexError if empty."""
        if not self._size:
            raise IndexError("peek at an empty queue")
        return self._items[self._front]