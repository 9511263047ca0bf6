"""Fewest days of activities needed to lift a score to 100."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass

LAST_DAY = 1000
TARGET = 100


@dataclass(frozen=True)
class Activity:
    """An activity held on days ``start..end`` that adds ``score`` points."""

    start: int
    end: int
    score: float

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= LAST_DAY:
            raise ValueError(f"days {self.start}..{self.end} are not a range within 0..{LAST_DAY}")

    @property
    def days(self) -> int:
        return self.end - self.start + 1

    @property
    def rate(self) -> float:
        return self.score / self.days


def min_days(score: int, activities: Iterable[Activity]) -> int | None:
    """Return the days spent greedily reaching a score of 100, or None if it cannot be reached.

    Activities are taken best points-per-day first while they stay short of
    the target; the shortest free activity that reaches it finishes.
    """
    ordered = sorted(activities, key=lambda a: (-a.rate, a.days, a.start))
    taken: set[int] = set()

    def free(activity: Activity) -> bool:
        return taken.isdisjoint(range(activity.start, activity.end + 1))

    days = 0
    stop = len(ordered)
    for index, activity in enumerate(ordered):
        if score + activity.score >= TARGET:
            stop = index
            break
        if not free(activity):
            continue
        taken.update(range(activity.start, activity.end + 1))
        score = int(score + activity.score)
        days += activity.days

    finishing = [a.days for a in ordered[stop:] if free(a) and score + a.score >= TARGET]
    return days + min(finishing) if finishing else None


def main(argv=None) -> int:
    """Read the score, ``n`` and ``n`` activities from standard input; print the days or -1."""
    tokens = iter(sys.stdin.read().split())
    score, count = int(next(tokens)), int(next(tokens))
    activities = [
        Activity(int(next(tokens)), int(next(tokens)), float(next(tokens))) for _ in range(count)
    ]
    result = min_days(score, activities)
    print(-1 if result is None else result)
    return 0