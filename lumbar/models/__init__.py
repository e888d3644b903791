"""SQLModel database models."""

from lumbar.models.exercise import Exercise
from lumbar.models.routine import Routine
from lumbar.models.session_log import SessionLog
from lumbar.models.app_setting import AppSetting

__all__ = [
    "Exercise",
    "Routine",
    "SessionLog",
    "AppSetting",
]
