"""Linked nodes and a singly linked list built on them."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Any = None) -> None:
        self.value = value
        self.next = next


class LinkedList:
    """Singly linked list supporting front, back, indexed and ordered insertion."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self.clear()
        for value in iterable:
            self.insert_back(value)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __getitem__(self, index: int) -> Any:
        return self._node_at(self._check_index(index)).value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        return index

    def _node_at(self, index: int) -> Any:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _insert_after(self, prev: _Node | None, value: Any) -> None:
        if prev is None:
            self.insert_front(value)
            return
        node = _Node(value, prev.next)
        prev.next = node
        if prev is self._tail:
            self._tail = node
        self._length += 1

    def _unlink(self, prev: _Node | None, node: _Node) -> None:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._length -= 1

    def insert_front(self, value: Any) -> None:
        """Insert a value at the beginning of the list."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def insert_back(self, value: Any) -> None:
        """Insert a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert a value at position ``index`` (0 to len inclusive)."""
        index = operator.index(index)
        if not 0 <= index <= self._length:
            raise IndexError("insertion index out of range")
        if index == 0:
            self.insert_front(value)
        elif index == self._length:
            self.insert_back(value)
        else:
            self._insert_after(self._node_at(index - 1), value)

    def _insert_ordered(self, value: Any, before: Callable[[Any, Any], bool]) -> None:
        prev = None
        node = self._head
        while node is not None and before(node.value, value):
            prev, node = node, node.next
        self._insert_after(prev, value)

    def insert_ascending(self, value: Any) -> None:
        """Insert a value before the first element not smaller than it."""
        self._insert_ordered(value, operator.lt)

    def insert_descending(self, value: Any) -> None:
        """Insert a value before the first element not greater than it."""
        self._insert_ordered(value, operator.gt)

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of ``value``; raise ValueError if absent."""
        prev = None
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(prev, node)
                return
            prev, node = node, node.next
        raise ValueError(f"{value!r} not in list")

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        index = self._check_index(index)
        prev = None if index == 0 else self._node_at(index - 1)
        node = self._head if prev is None else prev.next
        self._unlink(prev, node)
        return node.value