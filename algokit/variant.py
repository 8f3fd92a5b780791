"""Tagged values holding an int, a float, a character or a string."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

VariantValue = Union[int, float, str]


class VariantType(Enum):
    """The kind of value a variant holds."""

    INT = "int"
    FLOAT = "float"
    CHAR = "char"
    STRING = "string"


def _to_single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True, eq=False)
class Variant:
    """A value tagged with its type."""

    type: VariantType
    value: VariantValue

    def __post_init__(self) -> None:
        kind, value = self.type, self.value
        if kind is VariantType.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"INT variant needs an int, got {value!r}")
        elif kind is VariantType.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"FLOAT variant needs a number, got {value!r}")
            object.__setattr__(self, "value", float(value))
        elif kind is VariantType.CHAR:
            if not isinstance(value, str) or len(value) != 1:
                raise TypeError(f"CHAR variant needs a single character, got {value!r}")
        elif kind is VariantType.STRING:
            if not isinstance(value, str):
                raise TypeError(f"STRING variant needs a str, got {value!r}")
        else:
            raise TypeError(f"unknown variant type {kind!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def format(self) -> str:
        """Render the value; floats get six decimal places."""
        if self.type is VariantType.FLOAT:
            return f"{self.value:f}"
        return str(self.value)


def variant_display(variant: Variant | None) -> None:
    """Print the variant's value on its own line, or an empty line for None."""
    print("" if variant is None else variant.format())


def variant_find(variants: Iterable[Variant], vtype: VariantType, value: Any) -> int:
    """Return the index of the first variant of ``vtype`` equal to ``value``, or -1."""
    for index, variant in enumerate(variants):
        if variant.type is vtype and variant.value == value:
            return index
    return -1


def variant_sum(variants: Iterable[Variant]) -> float:
    """Sum the INT and FLOAT variants at single precision; others are skipped."""
    total = 0.0
    for variant in variants:
        if variant.type in (VariantType.INT, VariantType.FLOAT):
            total = _to_single(total + _to_single(float(variant.value)))
    return total