"""
Exercise catalog service.

Read-only queries over the catalog plus validation of user-submitted
exercise drafts.
"""

from typing import Optional

from lumbar.core.errors import NotFoundError
from lumbar.db.repositories.interfaces import ExerciseStore
from lumbar.schemas.exercise import (
    ExerciseCategory,
    ExerciseDefinition,
    ExerciseDraft,
    ExerciseValidationIssue,
)


class ExerciseService:
    """Service for exercise catalog lookups."""

    def __init__(self, exercises: ExerciseStore):
        self.repository = exercises

    def get_all(self) -> list[ExerciseDefinition]:
        return self.repository.get_all()

    def get_by_id(self, exercise_id: str) -> Optional[ExerciseDefinition]:
        return self.repository.get_by_id(exercise_id)

    def get_or_raise(self, exercise_id: str) -> ExerciseDefinition:
        exercise = self.repository.get_by_id(exercise_id)
        if exercise is None:
            raise NotFoundError(f"Exercise '{exercise_id}' not found", reason="exercise_not_found",
                                exercise_id=exercise_id)
        return exercise

    def get_by_category(self, category: ExerciseCategory) -> list[ExerciseDefinition]:
        return self.repository.get_by_category(category)

    def get_stretching_exercises(self) -> list[ExerciseDefinition]:
        return self.get_by_category(ExerciseCategory.STRETCHING)

    def get_core_exercises(self) -> list[ExerciseDefinition]:
        return self.get_by_category(ExerciseCategory.CORE)

    @staticmethod
    def validate(draft: ExerciseDraft) -> Optional[ExerciseValidationIssue]:
        """Return the first failing check for *draft*, or ``None`` if valid.

        Checks run in order: name, description, category, target.
        """
        if not draft.name or not draft.name.strip():
            return ExerciseValidationIssue.NAME_REQUIRED
        if not draft.description or not draft.description.strip():
            return ExerciseValidationIssue.DESCRIPTION_REQUIRED
        if draft.category is None:
            return ExerciseValidationIssue.CATEGORY_REQUIRED
        # Exactly one positive target must be given
        if _has_target(draft.reps) == _has_target(draft.duration_seconds):
            return ExerciseValidationIssue.TARGET_REQUIRED
        return None


def _has_target(value: Optional[int]) -> bool:
    return value is not None and value > 0
