"""A doubly linked list with head and tail references."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any


class _DNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any, prev: Any = None, next: Any = None) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class DoublyLinkedList:
    """Doubly linked list; indexed access walks from the nearer end."""

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

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __getitem__(self, index: int) -> Any:
        return self._node_at(self._check_index(index)).value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        self._length = 0

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        return index

    def _node_at(self, index: int) -> Any:
        if index < self._length // 2:
            node = self._head
            for _ in range(index):
                node = node.next
            return node
        node = self._tail
        for _ in range(self._length - 1 - index):
            node = node.prev
        return node

    def _unlink(self, node: _DNode) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._length -= 1

    def insert_front(self, value: Any) -> None:
        """Insert a value at the beginning of the list."""
        node = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def insert_back(self, value: Any) -> None:
        """Insert a value at the end of the list."""
        node = _DNode(value, self._tail, None)
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
            prev = self._node_at(index - 1)
            node = _DNode(value, prev, prev.next)
            prev.next.prev = node
            prev.next = node
            self._length += 1

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of ``value``; raise ValueError if absent."""
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return
            node = node.next
        raise ValueError(f"{value!r} not in list")

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        node = self._node_at(self._check_index(index))
        self._unlink(node)
        return node.value