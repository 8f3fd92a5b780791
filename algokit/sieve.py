"""Sieve of Eratosthenes: listing and counting primes."""

from __future__ import annotations

MAX_LISTED = 1000


def _composite_flags(limit: int) -> list[bool]:
    """Return flags for 0..limit-1 where True marks a non-prime."""
    flags = [False] * limit
    for i in range(2, limit):
        if i * i >= limit:
            break
        if not flags[i]:
            flags[i * i :: i] = [True] * len(range(i * i, limit, i))
    return flags


def primes_up_to(n: int) -> list[int]:
    """Return the primes from 2 to ``n`` inclusive; ``n`` may be at most 1000."""
    if n > MAX_LISTED:
        raise ValueError(f"n must be at most {MAX_LISTED}, got {n}")
    if n < 2:
        return []
    flags = _composite_flags(n + 1)
    return [i for i in range(2, n + 1) if not flags[i]]


def print_primes(n: int) -> None:
    """Print the primes up to ``n``, one per line."""
    for prime in primes_up_to(n):
        print(prime)


def count_primes_below(n: int) -> int:
    """Return how many primes are strictly below ``n``."""
    if n <= 2:
        return 0
    flags = _composite_flags(n)
    return sum(1 for i in range(2, n) if not flags[i])


def print_prime_count(n: int) -> None:
    """Print the number of primes below ``n``; print nothing when ``n`` is 2 or less."""
    if n <= 2:
        return
    print(count_primes_below(n))