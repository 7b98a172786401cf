"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    data: int
    next: Optional[_Node] = None


@dataclass
class _DoubleNode:
    data: int
    next: Optional[_DoubleNode] = None
    prev: Optional[_DoubleNode] = None


class SinglyLinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def add_head(self, data: int) -> None:
        """Put ``data`` in a new first node."""
        node = _Node(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_tail(self, data: int) -> None:
        """Put ``data`` in a new last node."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        """Drop every node."""
        self._head = None
        self._tail = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


class DoublyLinkedList:
    """A doubly linked list with positional insertion."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0

    def insert(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if position < 0 or position > self._size:
            raise IndexError(f"invalid position: {position}")
        node = _DoubleNode(value)
        if self._head is None:
            self._head = self._tail = node
        elif position == 0:
            node.next = self._head
            self._head.prev = node
            self._head = node
        elif position == self._size:
            assert self._tail is not None
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        else:
            before = self._head
            for _ in range(position - 1):
                assert before.next is not None
                before = before.next
            after = before.next
            assert after is not None
            node.prev = before
            node.next = after
            before.next = node
            after.prev = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size


class CircularList:
    """A singly linked ring whose starting node can be moved."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def append(self, value: int) -> None:
        """Add ``value`` just before the current head."""
        node = _Node(value)
        if self._head is None:
            node.next = node
            self._head = node
        else:
            last = self._head
            while last.next is not self._head:
                assert last.next is not None
                last = last.next
            node.next = self._head
            last.next = node
        self._size += 1

    def set_head(self, position: int) -> None:
        """Make the node at 1-based ``position`` the new head."""
        if self._head is None or position < 1 or position > self._size:
            raise IndexError(f"invalid position (1-based): {position}")
        for _ in range(position - 1):
            assert self._head.next is not None
            self._head = self._head.next

    def __iter__(self) -> Iterator[int]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node.data
            assert node.next is not None
            node = node.next
            if node is self._head:
                return

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Render the ring once around, starting from the head."""
        if self._head is None:
            raise ValueError("empty list, cannot format")
        return "->".join(str(value) for value in self)