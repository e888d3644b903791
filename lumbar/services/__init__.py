"""Business logic services."""

from lumbar.services.exercise_service import ExerciseService
from lumbar.services.routine_service import RoutineService, estimate_duration_minutes
from lumbar.services.session_service import SessionService
from lumbar.services.settings_service import SettingsService

__all__ = [
    "ExerciseService",
    "RoutineService",
    "SessionService",
    "SettingsService",
    "estimate_duration_minutes",
]
