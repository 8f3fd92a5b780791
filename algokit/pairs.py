"""Integer pairs and their component-wise sums."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    """Two integers ``x`` and ``y``."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Pair:
        if not isinstance(other, Pair):
            return NotImplemented
        return Pair(self.x + other.x, self.y + other.y)


def three_pairs_sum(pair_1: Pair, pair_2: Pair, pair_3: Pair) -> Pair:
    """Return the component-wise sum of three pairs."""
    return pair_1 + pair_2 + pair_3


def pairs_sum(pairs: Iterable[Pair]) -> Pair:
    """Return the component-wise sum of ``pairs``; ``Pair(0, 0)`` when empty."""
    total = Pair()
    for pair in pairs:
        total = total + pair
    return total