"""Fixed-capacity insertion and a self-growing array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def insert_value(values: Iterable[int], capacity: int, value: int, position: int) -> list[int]:
    """Insert ``value`` at ``position`` into a fixed-capacity array.

    ``values`` holds the occupied slots. The result has exactly ``capacity``
    slots, with unused slots filled with zero.
    """
    items = list(values)
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    if len(items) > capacity:
        raise ValueError("more values than the array can hold")
    if len(items) >= capacity:
        raise OverflowError("Not enough space")
    if position < 0 or position > len(items):
        raise IndexError(f"invalid position: {position}")
    items.insert(position, value)
    return items + [0] * (capacity - len(items))


class DynamicArray:
    """An array that doubles its capacity whenever it runs out of room."""

    def __init__(self, capacity: int = 2) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[int] = []

    def append(self, element: int) -> None:
        """Add ``element`` at the end, growing the storage if it is full."""
        if len(self._items) >= self._capacity:
            self._capacity *= 2
        self._items.append(element)

    def get(self, index: int) -> int:
        """Return the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid index: {index}")
        return self._items[index]

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def info(self) -> str:
        """Describe the capacity, length and contents."""
        return (
            f"Current cap: {self._capacity}\n"
            f"Current length: {len(self._items)}\n"
            + " ".join(str(item) for item in self._items)
        )