"""A string-to-string hash map with chained buckets."""

from __future__ import annotations

from collections.abc import Iterator

_MASK64 = (1 << 64) - 1


def hash_key(key: str) -> int:
    """Sum the key's bytes (as signed chars) and add its byte length."""
    data = key.encode("utf-8")
    total = sum(b - 256 if b >= 128 else b for b in data) + len(data)
    return total & _MASK64


class HashMap:
    """A fixed number of buckets, each a chain with the newest entry first."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self._buckets: list[list[list[str]]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    @property
    def size(self) -> int:
        """The number of buckets."""
        return len(self._buckets)

    def _bucket(self, key: str) -> list[list[str]]:
        return self._buckets[hash_key(key) % len(self._buckets)]

    def _find(self, key: str) -> list[str] | None:
        return next((pair for pair in self._bucket(key) if pair[0] == key), None)

    def insert(self, key: str, value: str) -> bool:
        """Set ``key`` to ``value``; return True if an existing entry was updated."""
        pair = self._find(key)
        if pair is not None:
            pair[1] = value
            return True
        self._bucket(key).insert(0, [key, value])
        return False

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or None if absent."""
        pair = self._find(key)
        return None if pair is None else pair[1]

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, pair in enumerate(bucket):
            if pair[0] == key:
                del bucket[position]
                return True
        return False

    def dump_lines(self) -> Iterator[str]:
        """Yield one ``key: value, ...`` line per non-empty bucket."""
        for bucket in self._buckets:
            if bucket:
                yield ", ".join(f"{key}: {value}" for key, value in bucket)

    def dump(self) -> None:
        """Print every non-empty bucket on its own line."""
        for line in self.dump_lines():
            print(line)