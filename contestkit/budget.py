"""Count pairs ``i < j`` whose earlier value is at least the later one."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from contestkit.fenwick import FenwickTree

MAX_VALUE = 10**6
MODULUS = 10**9 + 7


def count_budget_pairs(values: Iterable[int]) -> int:
    """Return the number of pairs ``i < j`` with ``values[i] >= values[j]``, modulo 1e9+7."""
    tree = FenwickTree(MAX_VALUE + 1)
    total = 0
    for value in values:
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"value {value} outside 0..{MAX_VALUE}")
        slot = MAX_VALUE - value + 1
        total += tree.prefix_sum(slot)
        tree.add(slot, 1)
    return total % MODULUS


def main(argv=None) -> int:
    """Read ``n`` and ``n`` values from standard input and print the pair count."""
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens))
    values = [int(next(tokens)) for _ in range(count)]
    print(count_budget_pairs(values))
    return 0