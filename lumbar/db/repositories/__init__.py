"""Database repositories."""

from lumbar.db.repositories.exercise import ExerciseRepository
from lumbar.db.repositories.routine import RoutineRepository
from lumbar.db.repositories.session_log import SessionLogRepository
from lumbar.db.repositories.settings import SettingsRepository
from lumbar.db.repositories.memory import (
    InMemoryExerciseRepository,
    InMemoryRoutineRepository,
    InMemorySessionLogRepository,
    InMemorySettingsRepository,
)

__all__ = [
    "ExerciseRepository",
    "RoutineRepository",
    "SessionLogRepository",
    "SettingsRepository",
    "InMemoryExerciseRepository",
    "InMemoryRoutineRepository",
    "InMemorySessionLogRepository",
    "InMemorySettingsRepository",
]
