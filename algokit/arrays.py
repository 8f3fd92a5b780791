"""Small array utilities: reversal, comparator sorting, lookup tables and copies."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")

LUT_SIZE = 256


def reverse_matrix(matrix: list[list[Any]]) -> None:
    """Reverse each row and the order of the rows, in place."""
    for row in matrix:
        row.reverse()
    matrix.reverse()


def insertion_sort(items: list[T], compare: Callable[[T, T], int]) -> None:
    """Sort ``items`` in place, stably, by a three-way ``compare`` function."""
    items.sort(key=cmp_to_key(compare))


def apply_lut(matrix: list[list[int]], lut: Sequence[int]) -> None:
    """Replace every byte ``v`` of ``matrix`` by ``lut[v]``, in place."""
    if len(lut) != LUT_SIZE:
        raise ValueError(f"lookup table must have {LUT_SIZE} entries, got {len(lut)}")
    for row in matrix:
        for value in row:
            if not 0 <= value < LUT_SIZE:
                raise ValueError(f"matrix value {value} is not a byte")
        row[:] = [lut[value] for value in row]


def create_array(size: int) -> list[int]:
    """Return a zero-filled array of ``size`` integers; ``size`` must be positive."""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    return [0] * size


def strndup(text: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``text``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return text[:n]