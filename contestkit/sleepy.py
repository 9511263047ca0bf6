"""Cheapest left-to-right path through a grid, shifting at most one row per column."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def min_path_cost(grid: Sequence[Sequence[int]]) -> int:
    """Return the least total cost crossing all columns, moving to an adjacent or same row."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    best = [row[0] for row in rows]
    for column in range(1, width):
        best = [
            row[column] + min(best[max(0, j - 1) : j + 2])
            for j, row in enumerate(rows)
        ]
    return min(best)


def main(argv=None) -> int:
    """Read ``N M`` and the grid from standard input; print the least cost."""
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    grid = [[int(next(tokens)) for _ in range(m)] for _ in range(n)]
    print(min_path_cost(grid))
    return 0