"""Lumbar Routines: guided daily exercise routines with adherence tracking."""

__version__ = "0.1.0"
