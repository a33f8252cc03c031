# plainds

This package provides small implementations of classic data structures. It has no dependencies.

| Class              | Module                       | Notes                                           |
|--------------------|------------------------------|-------------------------------------------------|
| `LinkedList`       | `plainds.linked_list`        | Singly linked, with sorted insertion helpers    |
| `DoublyLinkedList` | `plainds.doubly_linked_list` | Indexed access walks from the nearer end        |
| `LinkedQueue`      | `plainds.linked_queue`       | Unbounded FIFO queue                            |
| `StaticQueue`      | `plainds.static_queue`       | Fixed-capacity FIFO queue on a circular buffer  |
| `LinkedStack`      | `plainds.linked_stack`       | Unbounded LIFO stack                            |
| `StaticStack`      | `plainds.static_stack`       | Fixed-capacity LIFO stack                       |

Every container supports `len()`, truthiness, iteration and `repr()`. Iterating a container does not change it.

The package is a library only. It has no command-line interface.

## Installation

```
pip install plainds
```

## Lists

`LinkedList` and `DoublyLinkedList` take an optional iterable. Its values are appended in order.

```python
from plainds.linked_list import LinkedList
from plainds.doubly_linked_list import DoublyLinkedList

items = LinkedList([3, 1])
items.insert_front(0)
items.insert_back(9)
items.insert_at(2, 5)
print(list(items))        # [0, 3, 5, 1, 9]
print(items[2], 5 in items, items[-1])   # 5 True 9

items.remove(5)           # removes the first occurrence
print(items.remove_at(0)) # 0 (returns the removed value)

ordered = LinkedList()
for value in (4, 1, 3):
    ordered.insert_ascending(value)
print(list(ordered))      # [1, 3, 4]

dll = DoublyLinkedList([1, 2, 3])
print(list(reversed(dll)))  # [3, 2, 1]
dll.clear()
```

Rules for indexes and removal:

- Indexing (`items[i]`) and `remove_at` accept negative indexes.
- `insert_at` accepts an index from `0` to `len(items)` inclusive.
- An index outside these ranges raises `IndexError`.
- `remove` raises `ValueError` when the value is not present.

Ordered insertion on `LinkedList`:

- `insert_ascending` places the value before the first element that is not smaller than it.
- `insert_descending` places the value before the first element that is not greater than it.

## Queues

```python
from plainds.linked_queue import LinkedQueue
from plainds.static_queue import StaticQueue, QueueFullError

queue = LinkedQueue([1, 2])
queue.enqueue(3)
print(queue.peek(), queue.dequeue())   # 1 1
print(list(queue))                     # [2, 3]  front to rear

ring = StaticQueue(2)
ring.enqueue("a")
ring.enqueue("b")
print(ring.is_full(), ring.capacity)   # True 2
try:
    ring.enqueue("c")
except QueueFullError:
    print("no room")
```

`LinkedQueue` also has `clear()`.

## Stacks

```python
from plainds.linked_stack import LinkedStack
from plainds.static_stack import StaticStack, StackFullError

stack = LinkedStack([1, 2])            # 1 is pushed first, then 2
stack.push(3)
print(list(stack))                     # [3, 2, 1]  top to bottom
print(stack.pop(), stack.peek())       # 3 2

bounded = StaticStack(1)
bounded.push("x")
try:
    bounded.push("y")
except StackFullError:
    print("stack is full")
```

`LinkedStack` also has `clear()`.

## Errors

- Taking from an empty queue or stack (`dequeue`, `pop`, `peek`) raises `IndexError`.
- Creating a `StaticQueue` or `StaticStack` with a negative capacity raises `ValueError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```