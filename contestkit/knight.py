"""Fewest knight moves between two squares of an ``n`` by ``n`` board."""

from __future__ import annotations

import sys

_MOVES = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))


def knight_distance(n: int, start: tuple[int, int], target: tuple[int, int]) -> int | None:
    """Return the fewest moves from ``start`` to ``target`` (1-based squares), or None if unreachable.

    A knight must always move, so a square is never reached in zero moves.
    """
    start, target = tuple(start), tuple(target)
    if not all(1 <= coordinate <= n for coordinate in start):
        raise ValueError(f"start square {start} is off a {n}x{n} board")
    visited = {start}
    frontier = [start]
    step = 0
    while frontier:
        step += 1
        following = []
        for x, y in frontier:
            for dx, dy in _MOVES:
                square = (x + dx, y + dy)
                if square == target:
                    return step
                if 1 <= square[0] <= n and 1 <= square[1] <= n and square not in visited:
                    visited.add(square)
                    following.append(square)
        frontier = following
    return None


def main(argv=None) -> int:
    """Read the board size, target square and start square; print the distance or -1."""
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    target = (int(next(tokens)), int(next(tokens)))
    start = (int(next(tokens)), int(next(tokens)))
    distance = knight_distance(n, start, target)
    print(-1 if distance is None else distance)
    return 0