"""Eat sandwiches along a line until the walking cost uses up the budget."""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections.abc import Iterable


class Sandwich:
    """A line of stops: non-negative values are eaten, negative ones cost walking."""

    def __init__(self, values: Iterable[int]) -> None:
        self._gain = [0]
        self._walk = [0]
        for value in values:
            if value >= 0:
                self._gain.append(self._gain[-1] + value)
                self._walk.append(self._walk[-1])
            else:
                self._gain.append(self._gain[-1])
                self._walk.append(self._walk[-1] - value)

    def __len__(self) -> int:
        return len(self._gain) - 1

    def eat(self, p: int, m: int) -> int:
        """Return what is eaten starting at stop ``p`` (1-based) with walking budget ``m``."""
        if not 1 <= p <= len(self):
            raise IndexError(f"stop {p} outside 1..{len(self)}")
        if m < 0:
            raise ValueError(f"budget must be non-negative, got {m}")
        end = max(bisect_left(self._walk, self._walk[p] + m), 1)
        return self._gain[end - 1] - self._gain[p - 1]


def main(argv=None) -> int:
    """Read the stops and ``Q`` queries ``p m`` from standard input; print each answer."""
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens))
    line = Sandwich(int(next(tokens)) for _ in range(count))
    for _ in range(int(next(tokens))):
        p, m = int(next(tokens)), int(next(tokens))
        print(line.eat(p, m))
    return 0