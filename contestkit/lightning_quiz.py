"""Sum a range of primes taken by their position in the sequence of primes."""

from __future__ import annotations

import math
import sys

from contestkit.anonymous import primes_up_to

MODULUS = 10**9 + 7


def _sieve_bound(count: int) -> int:
    """Return a limit that holds at least ``count`` primes."""
    if count < 6:
        return 15
    return int(count * (math.log(count) + math.log(math.log(count)))) + 1


def first_primes(count: int) -> list[int]:
    """Return the first ``count`` primes in increasing order."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []
    return primes_up_to(_sieve_bound(count))[:count]


def prime_sum(a: int, b: int) -> int:
    """Return the sum of the ``a``-th through ``b``-th primes (1-based), modulo 1e9+7."""
    if a < 1:
        raise ValueError(f"prime positions start at 1, got {a}")
    if b < a:
        return 0
    return sum(first_primes(b)[a - 1 :]) % MODULUS


def main(argv=None) -> int:
    """Read ``a b`` from standard input and print the sum of those primes."""
    tokens = iter(sys.stdin.read().split())
    a, b = int(next(tokens)), int(next(tokens))
    print(prime_sum(a, b))
    return 0