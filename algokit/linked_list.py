"""A singly linked sequence with positional editing, sorting and splitting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class LinkedList:
    """An ordered sequence of values.

    Positions are zero-based. Positions past the end are tolerated: inserting
    there appends, and removing there leaves the list unchanged.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(items or ())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._items == other._items

    def prepend(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._items.insert(0, value)

    def append(self, value: Any) -> None:
        """Insert ``value`` at the tail."""
        self._items.append(value)

    def print(self) -> None:
        """Print the values separated by spaces; print nothing when empty."""
        if self._items:
            print(" ".join(str(value) for value in self._items))

    def insert(self, value: Any, index: int) -> None:
        """Insert ``value`` at ``index``, or at the end if ``index`` is past it."""
        if index < 0:
            raise IndexError(f"negative index {index}")
        self._items.insert(min(index, len(self._items)), value)

    def remove(self, index: int) -> Any | None:
        """Remove and return the value at ``index``; return None if there is none."""
        if index < 0:
            raise IndexError(f"negative index {index}")
        if index >= len(self._items):
            return None
        return self._items.pop(index)

    def find(self, value: Any) -> int:
        """Return the index of the first occurrence of ``value``, or -1."""
        try:
            return self._items.index(value)
        except ValueError:
            return -1

    def concat(self, other: LinkedList) -> None:
        """Move every value of ``other`` to the end of this list."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        self._items.extend(other._items)
        other._items.clear()

    def sort(self) -> None:
        """Sort the values in ascending order, in place."""
        self._items.sort()

    def reverse(self) -> None:
        """Reverse the order of the values, in place."""
        self._items.reverse()

    def split(self, index: int) -> LinkedList:
        """Keep the first ``index`` values and return the rest as a new list.

        When ``index`` is at or past the end nothing is split off and an
        empty list is returned.
        """
        if index < 0:
            raise IndexError(f"negative index {index}")
        tail = LinkedList()
        if index < len(self._items):
            tail._items = self._items[index:]
            del self._items[index:]
        return tail