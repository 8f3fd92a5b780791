"""Rounding to the nearest integer, halves away from zero."""

from __future__ import annotations

import struct


def _to_single(n: float) -> float:
    return struct.unpack("f", struct.pack("f", n))[0]


def my_round(n: float) -> int:
    """Round ``n`` (taken at single precision) to the nearest int, halves away from zero."""
    n = _to_single(n)
    whole = int(n)
    fraction = n - whole
    if n > 0:
        return whole + 1 if fraction >= 0.5 else whole
    if fraction == 0 or fraction > -0.5:
        return whole
    return whole - 1