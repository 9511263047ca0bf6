"""Prime lookups: a prime's position, or the nearest prime below a number."""

from __future__ import annotations

import sys
from bisect import bisect_right
from collections.abc import Sequence
from itertools import compress
from math import isqrt


def primes_up_to(limit: int) -> list[int]:
    """Return every prime ``p`` with ``p <= limit`` in increasing order."""
    if limit < 2:
        return []
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(limit) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return list(compress(range(limit + 1), sieve))


def query(primes: Sequence[int], n: int) -> int:
    """Return the 1-based position of ``n`` if it is prime, else the largest prime below it.

    ``primes`` must be the sorted primes covering at least ``n``.
    """
    position = bisect_right(primes, n)
    if position == 0:
        raise ValueError(f"no prime at or below {n}")
    nearest = primes[position - 1]
    return position if nearest == n else nearest


def main(argv=None) -> int:
    """Read ``Q`` numbers from standard input and answer each one."""
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens))
    numbers = [int(next(tokens)) for _ in range(count)]
    primes = primes_up_to(max(numbers, default=2))
    for n in numbers:
        print(query(primes, n))
    return 0