"""Pour water evenly over columns of given capacity and report each column's level."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence


def water_level(heights: Sequence[int], volume: float) -> float:
    """Return the common level reached after pouring ``volume`` over the columns.

    Water beyond the total capacity is lost, so the level never exceeds the
    tallest column.
    """
    level = 0.0
    remaining = float(volume)
    ordered = sorted(heights)
    count = len(ordered)
    for i, height in enumerate(ordered):
        columns = count - i
        capacity = (height - level) * columns
        if remaining > capacity:
            remaining -= capacity
            level = float(height)
        else:
            level += remaining / columns
            break
    return level


def _format_level(height: int, level: float) -> str:
    if level >= height:
        return str(height)
    if level == math.floor(level):
        return str(int(level))
    return f"{level:.2f}"


def format_levels(heights: Sequence[int], level: float) -> list[str]:
    """Return each column's filled level as printed: whole numbers bare, others to two places."""
    return [_format_level(height, level) for height in heights]


def main(argv=None) -> int:
    """Read ``n``, the volume and ``n`` heights from standard input; print each level."""
    tokens = iter(sys.stdin.read().split())
    count = int(next(tokens))
    volume = float(next(tokens))
    heights = [int(next(tokens)) for _ in range(count)]
    for line in format_levels(heights, water_level(heights, volume)):
        print(line)
    return 0