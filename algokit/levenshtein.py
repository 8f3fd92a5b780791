"""Edit distance between two sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def levenshtein(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the Levenshtein distance between ``first`` and ``second``."""
    if not first:
        return len(second)
    if not second:
        return len(first)
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, 1):
        current = [i]
        for j, b in enumerate(second, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (a != b),
                )
            )
        previous = current
    return previous[-1]