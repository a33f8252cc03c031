"""An unbounded first-in, first-out queue built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .linked_list import _Node


class LinkedQueue:
    """FIFO queue with constant-time enqueue at the rear and dequeue at the front."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self.clear()
        for value in iterable:
            self.enqueue(value)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._length = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError if empty."""
        node = self._front
        if node is None:
            raise IndexError("dequeue from an empty queue")
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._length -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front value without removing it; raise IndexError if empty."""
        if self._front is None:
            raise IndexError("peek at an empty queue")
        return self._front.value