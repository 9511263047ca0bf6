"""Manhattan distance from each query point to the nearest time hole."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable


class _PrefixMin:
    """Lowering updates and prefix minimums over positions ``1..size``."""

    def __init__(self, size: int) -> None:
        self._tree = [math.inf] * (size + 1)

    def lower(self, index: int, value: float) -> None:
        tree = self._tree
        while index < len(tree):
            if value < tree[index]:
                tree[index] = value
            index += index & -index

    def query(self, index: int) -> float:
        best = math.inf
        tree = self._tree
        while index:
            if tree[index] < best:
                best = tree[index]
            index &= index - 1
        return best


def nearest_distances(
    holes: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return, for each query point in order, the Manhattan distance to the closest hole."""
    holes = [tuple(hole) for hole in holes]
    queries = [tuple(point) for point in queries]
    if not holes:
        raise ValueError("at least one hole is needed")
    ranks = {y: r for r, y in enumerate(sorted({y for _, y in holes + queries}), 1)}
    size = len(ranks)

    events = [(x, y, 0, -1) for x, y in holes]
    events += [(x, y, 1, i) for i, (x, y) in enumerate(queries)]
    events.sort()

    best = [math.inf] * len(queries)

    below, above = _PrefixMin(size), _PrefixMin(size)
    for x, y, kind, i in events:
        rank = ranks[y]
        if kind == 0:
            below.lower(rank, -x - y)
            above.lower(size - rank + 1, -x + y)
        else:
            best[i] = min(best[i], below.query(rank) + x + y, above.query(size - rank + 1) + x - y)

    below, above = _PrefixMin(size), _PrefixMin(size)
    for x, y, kind, i in reversed(events):
        rank = ranks[y]
        if kind == 0:
            below.lower(rank, x - y)
            above.lower(size - rank + 1, x + y)
        else:
            best[i] = min(best[i], below.query(rank) - x + y, above.query(size - rank + 1) - x - y)

    return [int(distance) for distance in best]


def main(argv=None) -> int:
    """Read ``n m``, ``n`` holes and ``m`` query points; print each distance."""
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    holes = [(int(next(tokens)), int(next(tokens))) for _ in range(n)]
    queries = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
    for distance in nearest_distances(holes, queries):
        print(distance)
    return 0