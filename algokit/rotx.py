"""Rotate letters and digits by a fixed amount (a Caesar cipher)."""

from __future__ import annotations

import re
import sys

BUFFER_SIZE = 1024

_RANGES = (("a", 26), ("A", 26), ("0", 10))
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def rotx_char(c: str, x: int) -> str:
    """Rotate one character; letters wrap within 26, digits within 10."""
    for first, span in _RANGES:
        offset = ord(c) - ord(first)
        if 0 <= offset < span:
            return chr(ord(first) + (offset + x) % span)
    return c


def _char_table(x: int) -> dict[int, str]:
    return {
        ord(first) + offset: rotx_char(chr(ord(first) + offset), x)
        for first, span in _RANGES
        for offset in range(span)
    }


def _byte_table(x: int) -> bytes:
    return bytes(ord(rotx_char(chr(b), x)) for b in range(256))


def rotx(text: str, x: int) -> str:
    """Rotate every ASCII letter and digit of ``text`` by ``x``."""
    return text.translate(_char_table(x))


def _atoi(text: str) -> int:
    found = _ATOI.match(text)
    return int(found.group(1)) if found else 0


def main(argv: list[str] | None = None) -> int:
    """Rotate stdin to stdout by the amount given as the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return 0
    table = _byte_table(_atoi(args[0]))
    source = sys.stdin.buffer
    sink = sys.stdout.buffer
    while True:
        try:
            chunk = source.read(BUFFER_SIZE)
        except OSError as exc:
            print(f"rotx: read failed: {exc}", file=sys.stderr)
            return 1
        if not chunk:
            break
        try:
            sink.write(chunk.translate(table))
        except OSError as exc:
            print(f"rotx: write failed: {exc}", file=sys.stderr)
            return 1
    sink.flush()
    return 0