"""Find every code of distinct digits 1-9 consistent with a set of scored guesses."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import permutations


@dataclass(frozen=True)
class Condition:
    """A guess with how many digits sit in place and how many sit elsewhere."""

    digits: tuple[int, ...]
    position: int
    present: int


def _matches(code: tuple[int, ...], condition: Condition) -> bool:
    in_place = sum(a == b for a, b in zip(code, condition.digits))
    shared = sum(a == b for a in code for b in condition.digits)
    return in_place == condition.position and shared - in_place == condition.present


def find_codes(n: int, conditions: Iterable[Condition]) -> list[tuple[int, ...]]:
    """Return all length-``n`` codes of distinct digits 1-9 meeting every condition, in lexicographic order."""
    if not 0 <= n <= 9:
        raise ValueError(f"code length must be between 0 and 9, got {n}")
    conditions = list(conditions)
    for condition in conditions:
        if len(condition.digits) != n:
            raise ValueError(f"guess {condition.digits} does not have {n} digits")
    return [
        code
        for code in permutations(range(1, 10), n)
        if all(_matches(code, condition) for condition in conditions)
    ]


def main(argv=None) -> int:
    """Read ``n m`` and ``m`` scored guesses from standard input; print the codes and their count."""
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    conditions = []
    for _ in range(m):
        digits = tuple(int(next(tokens)) for _ in range(n))
        conditions.append(Condition(digits, int(next(tokens)), int(next(tokens))))
    codes = find_codes(n, conditions)
    for code in codes:
        print("".join(f"{digit} " for digit in code))
    print(len(codes))
    return 0