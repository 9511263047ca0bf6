"""Fenwick (binary indexed) tree over 1-based positions."""

from __future__ import annotations


class FenwickTree:
    """Point updates and prefix sums over positions ``1..size``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` at position ``index``."""
        size = len(self)
        if not 1 <= index <= size:
            raise IndexError(f"position {index} outside 1..{size}")
        tree = self._tree
        while index <= size:
            tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions ``1..index`` (0 for ``index == 0``)."""
        if not 0 <= index <= len(self):
            raise IndexError(f"position {index} outside 0..{len(self)}")
        total = 0
        tree = self._tree
        while index:
            total += tree[index]
            index &= index - 1
        return total