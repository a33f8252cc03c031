"""An unbounded last-in, first-out stack built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .linked_list import _Node


class LinkedStack:
    """LIFO stack iterated top to bottom; values from ``iterable`` are pushed in order."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self.clear()
        for value in iterable:
            self.push(value)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)[::-1]!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._top: _Node | None = None
        self._length = 0

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError if empty."""
        node = self._top
        if node is None:
            raise IndexError("pop from an empty stack")
        self._top = node.next
        self._length -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it; raise IndexError if empty."""
        if self._top is None:
            raise IndexError("peek at an empty stack")
        return self._top.value