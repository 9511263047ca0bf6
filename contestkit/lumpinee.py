"""Best treasure gathered along a short path that only moves up or left."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def best_treasure(grid: Sequence[Sequence[int]], k: int) -> int:
    """Return the largest sum over paths of at most ``k`` cells ending anywhere.

    A path steps up or left from its end cell and stops at the board edge or
    after ``k`` cells; the answer is never below zero.
    """
    if k < 0:
        raise ValueError(f"path length must be non-negative, got {k}")
    rows = [list(row) for row in grid]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    # Past this length every path reaches an edge first, so nothing changes.
    steps = min(k, len(rows) + width)

    previous = [[0] * width for _ in rows]
    for _ in range(steps):
        current = []
        for x, row in enumerate(rows):
            line = []
            for y, cell in enumerate(row):
                up = previous[x - 1][y] if x > 0 else 0
                left = previous[x][y - 1] if y > 0 else 0
                line.append(max(up, left) + cell)
            current.append(line)
        previous = current
    if steps == 0:
        return 0
    return max(0, max(max(line) for line in previous))


def main(argv=None) -> int:
    """Read ``m n k`` and the grid from standard input; print the best treasure."""
    tokens = iter(sys.stdin.read().split())
    m, n, k = (int(next(tokens)) for _ in range(3))
    grid = [[int(next(tokens)) for _ in range(n)] for _ in range(m)]
    print(best_treasure(grid, k))
    return 0