"""Least smoke from mixing a row of colours two neighbours at a time."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import accumulate


def min_mix_cost(values: Sequence[int]) -> int:
    """Return the least total smoke mixing all ``values`` into one.

    Mixing ``a`` and ``b`` makes ``(a + b) % 100`` and ``a * b`` smoke.
    """
    values = list(values)
    n = len(values)
    if n == 0:
        raise ValueError("need at least one value")
    prefix = [0, *accumulate(values)]

    def colour(left: int, right: int) -> int:
        return (prefix[right + 1] - prefix[left]) % 100

    cost = [[0] * n for _ in range(n)]
    for size in range(1, n):
        for left in range(n - size):
            right = left + size
            cost[left][right] = min(
                cost[left][mid] + cost[mid + 1][right] + colour(left, mid) * colour(mid + 1, right)
                for mid in range(left, right)
            )
    return cost[0][n - 1]


def main(argv=None) -> int:
    """Read ``T`` cases from standard input and print the total least smoke."""
    tokens = iter(sys.stdin.read().split())
    total = 0
    for _ in range(int(next(tokens))):
        count = int(next(tokens))
        total += min_mix_cost([int(next(tokens)) for _ in range(count)])
    print(total)
    return 0