"""A list of non-negative integers with positional editing operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from algokit.levenshtein import levenshtein as _levenshtein


def _check_element(element: int) -> None:
    if element < 0:
        raise ValueError(f"elements must be non-negative, got {element}")


class DList:
    """A sequence of non-negative integers.

    Positions are zero-based. Negative elements are rejected with
    ``ValueError``, bad positions with ``IndexError``.
    """

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._items: list[int] = []
        for element in items or ():
            self.push_back(element)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DList({self._items!r})"

    def push_front(self, element: int) -> None:
        """Insert ``element`` at the head."""
        _check_element(element)
        self._items.insert(0, element)

    def push_back(self, element: int) -> None:
        """Insert ``element`` at the tail."""
        _check_element(element)
        self._items.append(element)

    def print(self) -> None:
        """Print each element on its own line, head first."""
        for element in self._items:
            print(element)

    def _check_position(self, index: int, *, allow_end: bool) -> None:
        limit = len(self._items) if allow_end else len(self._items) - 1
        if not 0 <= index <= limit:
            raise IndexError(f"index {index} out of range for list of size {len(self)}")

    def get(self, index: int) -> int:
        """Return the element at ``index``."""
        self._check_position(index, allow_end=False)
        return self._items[index]

    def insert_at(self, element: int, index: int) -> None:
        """Insert ``element`` so that it ends up at ``index``."""
        _check_element(element)
        self._check_position(index, allow_end=True)
        self._items.insert(index, element)

    def find(self, element: int) -> int:
        """Return the index of the first occurrence of ``element``, or -1."""
        try:
            return self._items.index(element)
        except ValueError:
            return -1

    def remove_at(self, index: int) -> int:
        """Remove the element at ``index`` and return it."""
        self._check_position(index, allow_end=False)
        return self._items.pop(index)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def map_square(self) -> None:
        """Replace every element by its square."""
        self._items = [element * element for element in self._items]

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._items.reverse()

    def split_at(self, index: int) -> DList:
        """Keep the first ``index`` elements and return the rest as a new list."""
        self._check_position(index, allow_end=True)
        tail = DList()
        tail._items = self._items[index:]
        del self._items[index:]
        return tail

    def concat(self, other: DList) -> None:
        """Move every element of ``other`` to the end of this list."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        self._items.extend(other._items)
        other._items.clear()

    def levenshtein(self, other: DList) -> int:
        """Return the edit distance between the two element sequences."""
        return _levenshtein(self._items, other._items)