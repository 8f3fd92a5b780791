"""String helpers: case-insensitive compare, tokenizing and glob matching."""

from __future__ import annotations

from collections.abc import Iterator


def _ascii_lower(ch: str) -> str:
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def strcasecmp(s1: str, s2: str) -> int:
    """Compare two strings ignoring ASCII case.

    Returns zero when equal, otherwise the code-point difference of the
    first differing characters (a missing character counts as zero).
    """
    for a, b in zip(s1, s2):
        c1, c2 = _ascii_lower(a), _ascii_lower(b)
        if c1 != c2:
            return ord(c1) - ord(c2)
    shared = min(len(s1), len(s2))
    end1 = ord(_ascii_lower(s1[shared])) if len(s1) > shared else 0
    end2 = ord(_ascii_lower(s2[shared])) if len(s2) > shared else 0
    return end1 - end2


def tokenize(text: str, delim: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` separated by any character of ``delim``."""
    separators = set(delim)
    token: list[str] = []
    for ch in text:
        if ch in separators:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)


def fnmatch(pattern: str, string: str) -> bool:
    """Match ``string`` against a pattern with ``*``, ``?`` and ``\\`` escapes."""
    return _match(pattern, 0, string, 0)


def _match(pattern: str, i: int, string: str, j: int) -> bool:
    while True:
        if i == len(pattern):
            return j == len(string)
        ch = pattern[i]
        if ch == "*":
            while i < len(pattern) and pattern[i] == "*":
                i += 1
            if i == len(pattern):
                return True
            return any(_match(pattern, i, string, k) for k in range(j, len(string)))
        if ch == "\\":
            if i + 1 == len(pattern):
                return False
            if j < len(string) and pattern[i + 1] == string[j]:
                i += 2
                j += 1
                continue
            return False
        if j == len(string):
            return False
        if ch == "?" or ch == string[j]:
            i += 1
            j += 1
            continue
        return False