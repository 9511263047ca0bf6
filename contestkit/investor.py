"""Merge neighbouring holdings and report each group's span and total value."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def _find(parent: list[int], node: int) -> int:
    root = node
    while parent[root] != root:
        root = parent[root]
    while parent[node] != root:
        parent[node], node = root, parent[node]
    return root


class Investor:
    """Holdings numbered from 1, grouped by two union-find forests tracking group ends."""

    def __init__(self, values: Iterable[int]) -> None:
        self._initial = [0, *values]
        self._current = list(self._initial)
        size = len(self._initial)
        self._left = list(range(size))
        self._right = list(range(size))

    def _check(self, node: int) -> None:
        if not 1 <= node < len(self._initial):
            raise IndexError(f"holding {node} outside 1..{len(self._initial) - 1}")

    def merge(self, x: int, y: int) -> None:
        """Join the groups of ``x`` and ``y``.

        Merging two holdings already in one group adds their initial values
        to the group again.
        """
        self._check(x)
        self._check(y)
        x, y = sorted((x, y))

        left_x, left_y = _find(self._left, x), _find(self._left, y)
        if left_x == left_y:
            self._current[left_x] += self._initial[x] + self._initial[y]
        else:
            keep, absorb = min(left_x, left_y), max(left_x, left_y)
            self._left[absorb] = keep
            self._current[keep] += self._current[absorb]
            self._current[absorb] = 0

        right_x, right_y = _find(self._right, x), _find(self._right, y)
        if right_x != right_y:
            self._right[min(right_x, right_y)] = max(right_x, right_y)

    def span(self, node: int) -> int:
        """Return how many positions the group of ``node`` stretches over."""
        self._check(node)
        return _find(self._right, node) - _find(self._left, node) + 1

    def value(self, node: int) -> int:
        """Return the total value of the group of ``node``."""
        self._check(node)
        return self._current[_find(self._left, node)]


def main(argv=None) -> int:
    """Read holdings and commands A/B/C/D from standard input, printing each report."""
    tokens = iter(sys.stdin.read().split())
    count, commands = int(next(tokens)), int(next(tokens))
    investor = Investor(int(next(tokens)) for _ in range(count))
    for _ in range(commands):
        command = next(tokens)
        if command == "A":
            investor.merge(int(next(tokens)), int(next(tokens)))
        elif command == "B":
            print(investor.span(int(next(tokens))))
        elif command == "C":
            print(investor.value(int(next(tokens))))
        elif command == "D":
            node = int(next(tokens))
            print(investor.span(node), investor.value(node))
        else:
            raise ValueError(f"unknown command {command!r}")
    return 0