"""Eight on/off lights packed into one byte."""

from __future__ import annotations

from dataclasses import dataclass

_BYTE = 0xFF
_LOW_NIBBLE = 0x0F


def _check_light(light_num: int) -> None:
    if light_num < 0:
        raise ValueError(f"light number must be non-negative, got {light_num}")


@dataclass
class TrafficLights:
    """A byte whose bits are lights; bit ``n`` is light ``n``."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _BYTE:
            raise ValueError(f"value must fit in a byte, got {self.value}")

    def turn_on(self, light_num: int) -> None:
        """Switch light ``light_num`` on."""
        _check_light(light_num)
        self.value = (self.value | (1 << light_num)) & _BYTE

    def turn_off(self, light_num: int) -> None:
        """Switch light ``light_num`` off."""
        _check_light(light_num)
        self.value = self.value & ~(1 << light_num) & _BYTE

    def next_step(self) -> None:
        """Shift the four low lights left by one, wrapping light 3 back to light 0.

        The high lights are cleared, while light 3 also carries into light 4.
        """
        current = self.value & _LOW_NIBBLE
        self.value = ((current << 1) | (current >> 3)) & _BYTE

    def reverse(self) -> None:
        """Toggle the four low lights."""
        self.value ^= _LOW_NIBBLE

    def swap(self, other: TrafficLights) -> None:
        """Exchange states with ``other``."""
        self.value, other.value = other.value, self.value