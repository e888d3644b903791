"""Adherence analytics over session history."""

from lumbar.adherence.statistics import compute_statistics, split_into_streaks

__all__ = ["compute_statistics", "split_into_streaks"]
