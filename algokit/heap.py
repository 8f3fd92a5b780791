"""A max-heap of integers stored in an array with tracked capacity."""

from __future__ import annotations

import sys

INITIAL_CAPACITY = 8


class MaxHeap:
    """A binary max-heap whose capacity doubles when full and halves when sparse."""

    def __init__(self) -> None:
        self._array: list[int] = []
        self._capacity = INITIAL_CAPACITY

    def __len__(self) -> int:
        return len(self._array)

    def __repr__(self) -> str:
        return f"MaxHeap({self._array!r})"

    @property
    def capacity(self) -> int:
        """The number of values the heap can hold before growing."""
        return self._capacity

    def _sift_up(self, index: int) -> None:
        array = self._array
        while index > 0:
            parent = (index - 1) // 2
            if array[parent] >= array[index]:
                break
            array[parent], array[index] = array[index], array[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        array = self._array
        size = len(array)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and array[child] > array[largest]:
                    largest = child
            if largest == index:
                break
            array[index], array[largest] = array[largest], array[index]
            index = largest

    def add(self, val: int) -> None:
        """Insert ``val``."""
        if len(self._array) == self._capacity:
            self._capacity *= 2
        self._array.append(val)
        self._sift_up(len(self._array) - 1)

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._array:
            raise IndexError("pop from empty heap")
        root = self._array[0]
        last = self._array.pop()
        if self._array:
            self._array[0] = last
            self._sift_down(0)
        if len(self._array) < self._capacity // 2 and self._capacity > INITIAL_CAPACITY:
            self._capacity //= 2
        return root

    def preorder(self) -> list[int]:
        """Return the values in preorder over the implicit tree."""
        result: list[int] = []
        pending = [0] if self._array else []
        while pending:
            index = pending.pop()
            result.append(self._array[index])
            for child in (2 * index + 2, 2 * index + 1):
                if child < len(self._array):
                    pending.append(child)
        return result

    def print(self) -> None:
        """Write the preorder values separated by spaces, then a newline, to standard output."""
        line = " ".join(str(val) for val in self.preorder())
        sys.stdout.write(line + "\n")