"""FIFO, ring-buffer, priority and double-ended queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


class QueueEmptyError(IndexError):
    """Raised when an item is taken from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when an item is added to a queue that has no room left."""


class Queue:
    """An unbounded first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, item: int) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> int:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("Queue is empty!")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("Queue is empty!")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)


class CircularQueue:
    """A fixed-capacity queue stored in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[int] = [0] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, item: int) -> None:
        """Add ``item`` at the back, wrapping around the buffer."""
        if self.is_full():
            raise QueueFullError("Queue is full!")
        rear = (self._front + self._count) % len(self._slots)
        self._slots[rear] = item
        self._count += 1

    def dequeue(self) -> int:
        """Remove and return the front item."""
        item = self.peek()
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        return item

    def peek(self) -> int:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        capacity = len(self._slots)
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % capacity]


@dataclass(frozen=True)
class _Task:
    name: str
    priority: int


class PriorityQueue:
    """A bounded queue that hands out the task with the best priority.

    With ``ascending`` the lowest priority number comes out first, otherwise
    the highest. Among equal priorities the earliest task wins.
    """

    def __init__(self, capacity: int, ascending: bool = True) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._ascending = ascending
        self._tasks: list[_Task] = []

    def enqueue(self, task: str, priority: int) -> None:
        """Add ``task`` with the given ``priority``."""
        if len(self._tasks) >= self._capacity:
            raise QueueFullError("Queue Full!")
        self._tasks.append(_Task(task, priority))

    def dequeue(self) -> str:
        """Remove and return the name of the task with the best priority."""
        if not self._tasks:
            raise QueueEmptyError("Empty")
        pick = min if self._ascending else max
        index, task = pick(enumerate(self._tasks), key=lambda pair: pair[1].priority)
        del self._tasks[index]
        return task.name

    def __len__(self) -> int:
        return len(self._tasks)


class Deque:
    """A double-ended queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def add_front(self, item: int) -> None:
        self._items.appendleft(item)

    def add_rear(self, item: int) -> None:
        self._items.append(item)

    def remove_front(self) -> int:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("Empty Deque!")
        return self._items.popleft()

    def remove_rear(self) -> int:
        """Remove and return the rear item."""
        if not self._items:
            raise QueueEmptyError("Empty Deque!")
        return self._items.pop()

    def peek_front(self) -> int:
        if not self._items:
            raise QueueEmptyError("Empty Deque!")
        return self._items[0]

    def peek_rear(self) -> int:
        if not self._items:
            raise QueueEmptyError("Empty Deque!")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)