"""A small printf supporting %d, %u, %x, %o, %c and %s."""

from __future__ import annotations

import sys
from typing import Any, Callable

_MASK32 = 0xFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%{spec} expects an integer or a single character")
        return ord(value)
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def _format_decimal(value: Any) -> str:
    return str(_signed32(_as_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _MASK32)


def _format_hex(value: Any) -> str:
    return format(_as_int(value, "x") & _MASK32, "x")


def _format_octal(value: Any) -> str:
    return format(_as_int(value, "o") & _MASK32, "o")


def _format_char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": _format_decimal,
    "u": _format_unsigned,
    "x": _format_hex,
    "o": _format_octal,
    "c": _format_char,
    "s": _format_str,
}


def tiny_format(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions are copied verbatim with their ``%`` and consume
    no argument; ``%%`` yields a single ``%``.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            pieces.append("%" if spec == "%" else "%" + spec)
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise ValueError(f"missing argument for %{spec}") from None
        pieces.append(convert(arg))
    return "".join(pieces)


def tinyprintf(fmt: str, *args: Any) -> int:
    """Write the formatted text to stdout and return the number of characters."""
    text = tiny_format(fmt, *args)
    sys.stdout.write(text)
    return len(text)