"""Track damage levels along a line and report the stretch within a safe band."""

from __future__ import annotations

import sys

from contestkit.fenwick import FenwickTree


class DisasterDragon:
    """Positions ``1..n`` whose levels must lie between ``low`` and ``high``."""

    def __init__(self, n: int, low: int, high: int) -> None:
        if n < 1:
            raise ValueError(f"need at least one position, got {n}")
        self.n = n
        self.low = low
        self.high = high
        self._tree = FenwickTree(n + 1)

    def apply(self, kind: int, x: int, c: int) -> tuple[int, ...] | None:
        """Apply one event and return the safe stretch.

        Kind 1 raises positions ``1..x`` by ``c``; kind 2 lowers positions
        ``x..n`` by ``c``. The result is ``(first, last)`` for a stretch,
        ``(position,)`` for a single position, or ``None`` when there is none.
        """
        if kind == 1:
            self._tree.add(1, c)
            self._tree.add(x + 1, -c)
        elif kind == 2:
            self._tree.add(x, -c)
        else:
            raise ValueError(f"unknown event kind {kind}")
        return self._safe_stretch()

    def _level(self, position: int) -> int:
        return self._tree.prefix_sum(position)

    def _safe_stretch(self) -> tuple[int, ...] | None:
        lo, hi = 1, self.n
        while lo < hi:
            mid = (lo + hi) // 2
            if self._level(mid) <= self.high:
                hi = mid
            else:
                lo = mid + 1
        first = lo

        lo, hi = 1, self.n
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if self._level(mid) >= self.low:
                lo = mid
            else:
                hi = mid - 1
        last = hi

        if first < last:
            return (first, last)
        if first == last and self.low <= self._level(first) <= self.high:
            return (first,)
        return None


def main(argv=None) -> int:
    """Read ``n q a b`` and ``q`` events from standard input, printing each answer."""
    tokens = iter(sys.stdin.read().split())
    n, events, low, high = (int(next(tokens)) for _ in range(4))
    dragon = DisasterDragon(n, low, high)
    for _ in range(events):
        kind, x, c = (int(next(tokens)) for _ in range(3))
        stretch = dragon.apply(kind, x, c)
        print(-1 if stretch is None else " ".join(map(str, stretch)))
    return 0