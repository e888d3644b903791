"""Pydantic schemas for domain records and request/response validation."""

from lumbar.schemas.exercise import (
    Difficulty,
    ExerciseCategory,
    ExerciseDefinition,
    ExerciseDraft,
    ExerciseModifications,
    ExerciseValidationIssue,
    ExerciseValidationResult,
    MeasurementMode,
)
from lumbar.schemas.routine import (
    Routine,
    RoutineCreate,
    RoutineExercisesUpdate,
    RoutineKind,
    RoutineResponse,
)
from lumbar.schemas.session_log import (
    CompletionCreate,
    ExerciseCompletion,
    SessionLog,
    SessionLogResponse,
    SessionStart,
)
from lumbar.schemas.statistics import Statistics
from lumbar.schemas.user_settings import UserSettings, UserSettingsUpdate

__all__ = [
    "Difficulty",
    "ExerciseCategory",
    "ExerciseDefinition",
    "ExerciseDraft",
    "ExerciseModifications",
    "ExerciseValidationIssue",
    "ExerciseValidationResult",
    "MeasurementMode",
    "Routine",
    "RoutineCreate",
    "RoutineExercisesUpdate",
    "RoutineKind",
    "RoutineResponse",
    "CompletionCreate",
    "ExerciseCompletion",
    "SessionLog",
    "SessionLogResponse",
    "SessionStart",
    "Statistics",
    "UserSettings",
    "UserSettingsUpdate",
]
