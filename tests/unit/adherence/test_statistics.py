"""Tests for adherence statistics.

Pure unit tests: histories are built in memory and the reference date
is passed explicitly.
"""

import datetime

import pytest

from lumbar.adherence.statistics import (
    completed_dates,
    compute_statistics,
    round_half_up,
    split_into_streaks,
)
from lumbar.schemas.session_log import SessionLog

TODAY = datetime.date(2026, 3, 10)


# ======================================================================
# Helpers
# ======================================================================


def _session(day: datetime.date, completed: bool = True, hour: int = 7) -> SessionLog:
    start = datetime.datetime.combine(day, datetime.time(hour, 0))
    end = start + datetime.timedelta(minutes=12) if completed else None
    return SessionLog(routine_id=1, start_time=start, end_time=end, completed=completed)


def _days_ago(*offsets: int) -> list[SessionLog]:
    return [_session(TODAY - datetime.timedelta(days=n)) for n in offsets]


# ======================================================================
# Helpers under test
# ======================================================================


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(0.0, 0), (0.49, 0), (0.5, 1), (2.5, 3), (66.666, 67)])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestSplitIntoStreaks:
    def test_empty(self):
        assert split_into_streaks([]) == []

    def test_single_run(self):
        dates = [TODAY - datetime.timedelta(days=n) for n in range(4)]
        assert split_into_streaks(dates) == [4]

    def test_gaps_split_runs(self):
        dates = [TODAY - datetime.timedelta(days=n) for n in (0, 1, 3, 6, 7, 8)]
        assert split_into_streaks(dates) == [2, 1, 3]

    def test_completed_dates_are_distinct_and_newest_first(self):
        history = [_session(TODAY, hour=7), _session(TODAY, hour=18),
                   _session(TODAY - datetime.timedelta(days=2)),
                   _session(TODAY - datetime.timedelta(days=1), completed=False)]
        assert completed_dates(history) == [TODAY, TODAY - datetime.timedelta(days=2)]


# ======================================================================
# compute_statistics
# ======================================================================


class TestComputeStatistics:
    def test_empty_history(self):
        stats = compute_statistics([], today=TODAY)
        assert stats.total_sessions == 0
        assert stats.current_streak == 0
        assert stats.longest_streak == 0
        assert stats.completion_rate == 0
        assert stats.last_session_date is None

    def test_streak_stops_at_gap_day(self):
        """{today, -1, -2, -4}: the gap at -3 ends the current run."""
        stats = compute_statistics(_days_ago(0, 1, 2, 4), today=TODAY)
        assert stats.current_streak == 3
        assert stats.longest_streak == 3
        assert stats.last_session_date == TODAY

    def test_completion_rate_counts_unfinished_attempts(self):
        history = _days_ago(0, 1) + [_session(TODAY - datetime.timedelta(days=2), completed=False)]
        stats = compute_statistics(history, today=TODAY)
        assert stats.total_sessions == 3
        assert stats.completion_rate == 67

    def test_streak_anchored_at_yesterday_still_counts(self):
        stats = compute_statistics(_days_ago(1, 2), today=TODAY)
        assert stats.current_streak == 2

    def test_streak_older_than_yesterday_is_broken(self):
        stats = compute_statistics(_days_ago(2, 3, 4, 5), today=TODAY)
        assert stats.current_streak == 0
        assert stats.longest_streak == 4
        assert stats.last_session_date == TODAY - datetime.timedelta(days=2)

    def test_several_sessions_on_one_day_count_once(self):
        history = [_session(TODAY, hour=7), _session(TODAY, hour=17), _session(TODAY - datetime.timedelta(days=1))]
        stats = compute_statistics(history, today=TODAY)
        assert stats.total_sessions == 3
        assert stats.current_streak == 2

    def test_unfinished_day_breaks_streak(self):
        history = _days_ago(0, 2) + [_session(TODAY - datetime.timedelta(days=1), completed=False)]
        stats = compute_statistics(history, today=TODAY)
        assert stats.current_streak == 1
        assert stats.longest_streak == 1

    def test_longest_run_in_the_past(self):
        stats = compute_statistics(_days_ago(0, 5, 6, 7, 8, 9), today=TODAY)
        assert stats.current_streak == 1
        assert stats.longest_streak == 5

    def test_history_order_does_not_matter(self):
        history = _days_ago(4, 0, 2, 1)
        assert compute_statistics(history, today=TODAY) == compute_statistics(list(reversed(history)), today=TODAY)

    @pytest.mark.parametrize("offsets", [
        (0,), (1,), (3,), (0, 1, 2), (0, 2, 3, 4, 5), (1, 2, 10, 11, 12, 13), (0, 1, 7, 8, 9), (6, 7),
    ])
    def test_longest_streak_never_below_current(self, offsets):
        stats = compute_statistics(_days_ago(*offsets), today=TODAY)
        assert stats.longest_streak >= stats.current_streak
