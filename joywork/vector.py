"""A growable array that manages its own capacity."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """Array backed by a fixed number of slots that grows when it fills up.

    Growth follows ``capacity * 2 + 1``; capacity never shrinks.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[T | None] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Drop all elements but keep the reserved capacity."""
        for position in range(self._size):
            self._slots[position] = None
        self._size = 0

    def push_back(self, value: T) -> None:
        if self._size == self.capacity:
            self.reserve(self.capacity * 2 + 1)
        self._slots[self._size] = value
        self._size += 1

    def pop_back(self) -> T:
        """Remove the last element and return it."""
        if self._size == 0:
            raise IndexError("pop from empty array")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = None
        return value  # type: ignore[return-value]

    def back(self) -> T:
        if self._size == 0:
            raise IndexError("back of empty array")
        return self._slots[self._size - 1]  # type: ignore[return-value]

    def front(self) -> T:
        if self._size == 0:
            raise IndexError("front of empty array")
        return self._slots[0]  # type: ignore[return-value]

    def resize(self, new_size: int) -> None:
        """Change the number of elements; new positions hold ``None``."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        if new_size > self.capacity:
            self.reserve(max(self.capacity * 2 + 1, new_size))
        for position in range(new_size, self._size):
            self._slots[position] = None
        self._size = new_size

    def reserve(self, new_capacity: int) -> None:
        """Grow the capacity to ``new_capacity``; smaller requests are ignored."""
        if self.capacity >= new_capacity:
            return
        self._slots.extend([None] * (new_capacity - self.capacity))

    def copy(self) -> DynamicArray[T]:
        """Return an independent array with the same capacity and elements."""
        duplicate: DynamicArray[T] = DynamicArray(self.capacity)
        duplicate._slots[: self._size] = self._slots[: self._size]
        duplicate._size = self._size
        return duplicate

    def _position(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("array index out of range")
        return index

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> T:
        return self._slots[self._position(index)]  # type: ignore[return-value]

    def __setitem__(self, index: int, value: T) -> None:
        self._slots[self._position(index)] = value

    def __iter__(self) -> Iterator[T]:
        return islice(self._slots, self._size)  # type: ignore[arg-type]