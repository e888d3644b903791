"""
Adherence statistics over session history.

Streaks are measured in **calendar days**, not sessions: several
completed sessions on the same day count once, and a day with only
unfinished sessions breaks the chain.

Algorithm
---------

1. ``total_sessions`` counts every session, finished or not.
2. ``completion_rate`` is the rounded share of sessions that reached
   ``completed`` (unfinished attempts stay in the denominator).
3. The distinct completed dates are sorted newest first and split into
   runs of consecutive days in a single pass.
4. ``current_streak`` is the newest run, but only when it ends today or
   yesterday; ``longest_streak`` is the longest run.  Since the current
   streak is one of the runs, ``longest_streak >= current_streak``.

The computation is a pure function of the history and the reference
date; it is recomputed on demand and never cached.
"""

from __future__ import annotations

import datetime
import math
from typing import Iterable, Optional

from lumbar.schemas.session_log import SessionLog
from lumbar.schemas.statistics import Statistics


def round_half_up(value: float) -> int:
    """Round a non-negative number to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


def completed_dates(history: Iterable[SessionLog]) -> list[datetime.date]:
    """Distinct local start dates of completed sessions, newest first."""
    return sorted({s.session_date for s in history if s.completed}, reverse=True)


def split_into_streaks(dates: list[datetime.date]) -> list[int]:
    """Split *dates* (distinct, newest first) into run lengths.

    >>> d = datetime.date
    >>> split_into_streaks([d(2026, 1, 5), d(2026, 1, 4), d(2026, 1, 2)])
    [2, 1]
    """
    runs: list[int] = []
    previous: Optional[datetime.date] = None
    for day in dates:
        if previous is not None and (previous - day).days == 1:
            runs[-1] += 1
        else:
            runs.append(1)
        previous = day
    return runs


def compute_statistics(history: list[SessionLog], today: Optional[datetime.date] = None) -> Statistics:
    """Compute :class:`Statistics` for *history* as of *today*.

    Args:
        history: Every session log, in any order
        today: Reference local date (defaults to the current date)
    """
    today = today or datetime.date.today()

    total = len(history)
    completed_count = sum(1 for s in history if s.completed)
    completion_rate = round_half_up(100 * completed_count / total) if total else 0

    dates = completed_dates(history)
    runs = split_into_streaks(dates)

    current_streak = 0
    if dates and (today - dates[0]).days in (0, 1):
        current_streak = runs[0]

    return Statistics(total_sessions=total, current_streak=current_streak, longest_streak=max(runs, default=0),
                      completion_rate=completion_rate, last_session_date=dates[0] if dates else None, )
