"""A growable array of integers with an explicit capacity."""

from __future__ import annotations

import sys
from collections.abc import Iterator


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")


class Vector:
    """An integer array that doubles its capacity when full and halves it when sparse."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._items: list[int] = []
        self._capacity = capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        """The number of elements the vector can hold before growing."""
        return self._capacity

    def resize(self, capacity: int) -> None:
        """Set the capacity, dropping elements that no longer fit."""
        _check_capacity(capacity)
        self._capacity = capacity
        del self._items[capacity:]

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self.resize(max(self._capacity * 2, 1))

    def append(self, elt: int) -> None:
        """Add ``elt`` at the end, growing if needed."""
        self._grow_if_full()
        self._items.append(elt)

    def format(self) -> str:
        """Return the elements joined by commas."""
        return ",".join(str(elt) for elt in self._items)

    def print(self) -> None:
        """Write the comma-separated elements and a newline to standard output."""
        line = ",".join(str(elt) for elt in self._items)
        sys.stdout.write(line + "\n")

    def reset(self, capacity: int) -> None:
        """Remove every element and set the capacity."""
        self._items.clear()
        self.resize(capacity)

    def insert(self, index: int, elt: int) -> None:
        """Insert ``elt`` at ``index``, growing if needed."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range for vector of size {len(self)}")
        self._grow_if_full()
        self._items.insert(index, elt)

    def remove(self, index: int) -> int:
        """Remove and return the element at ``index``; halve capacity when under half full."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for vector of size {len(self)}")
        value = self._items.pop(index)
        if len(self._items) < self._capacity // 2:
            self.resize(self._capacity // 2)
        return value