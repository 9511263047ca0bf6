"""Two teams fighting front to front, defeated fighters rejoining at the back."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from enum import Enum
from itertools import islice


class Outcome(Enum):
    A = "A"
    B = "B"
    DRAW = "draw"


class StreetFighter:
    """Teams A and B, each a queue of fighters' powers."""

    def __init__(self, team_a: Iterable[int], team_b: Iterable[int]) -> None:
        self._a = deque(team_a)
        self._b = deque(team_b)
        if not self._a or len(self._a) != len(self._b):
            raise ValueError("teams must be non-empty and of equal size")
        self._full_a = self._a[0]
        self._full_b = self._b[0]
        self.points_a = 0
        self.points_b = 0

    @staticmethod
    def _send_back(team: deque[int], full_power: int) -> int:
        team.popleft()
        team.append(full_power)
        return team[0]

    def attack(self) -> Outcome:
        """Fight the two front fighters; the loser returns to the back at full power."""
        a, b = self._a, self._b
        if a[0] > b[0]:
            self.points_a += 1
            a[0] -= b[0]
            self._full_b = self._send_back(b, self._full_b)
            return Outcome.A
        if b[0] > a[0]:
            self.points_b += 1
            b[0] -= a[0]
            self._full_a = self._send_back(a, self._full_a)
            return Outcome.B
        self.points_a += 1
        self.points_b += 1
        self._full_a = self._send_back(a, self._full_a)
        self._full_b = self._send_back(b, self._full_b)
        return Outcome.DRAW

    def lineup(self) -> tuple[list[int], list[int]]:
        """Return the powers of the first three fighters of each team."""
        return list(islice(self._a, 3)), list(islice(self._b, 3))


def main(argv=None) -> int:
    """Read both teams and ``T`` commands from standard input; print lineups and the score."""
    tokens = iter(sys.stdin.read().split())
    n, commands = int(next(tokens)), int(next(tokens))
    team_a = [int(next(tokens)) for _ in range(n)]
    team_b = [int(next(tokens)) for _ in range(n)]
    fight = StreetFighter(team_a, team_b)
    for _ in range(commands):
        if next(tokens) == "A":
            fight.attack()
        else:
            for team in fight.lineup():
                print("".join(f"{power} " for power in team))
    print(fight.points_a, fight.points_b)
    return 0