"""
Routine service.

Expands routines into concrete exercises, estimates how long a routine
takes, and manages custom routines.

**Duration estimate**::

    work  = SUM(duration_seconds if timed else reps * SECONDS_PER_REP)
    rest  = SECONDS_BETWEEN_EXERCISES * (count - 1)        # 0 below 2 exercises
    total = ceil((work + rest) / 60)                       # minutes, rounded up

The estimate is advisory (UI hints) and ignores per-exercise ``sets``
and ``rest_between_sets``.
"""

import math
from typing import Optional

from loguru import logger

from lumbar.core.errors import ForbiddenError, InvalidArgumentError, NotFoundError
from lumbar.db.repositories.interfaces import ExerciseStore, RoutineStore, SettingsStore
from lumbar.schemas.exercise import ExerciseDefinition
from lumbar.schemas.routine import Routine, RoutineKind, RoutineResponse

SECONDS_PER_REP = 3
SECONDS_BETWEEN_EXERCISES = 10


def estimate_duration_minutes(exercises: list[ExerciseDefinition]) -> int:
    """Estimated length of *exercises* in whole minutes (ceiling)."""
    total_seconds = 0
    for exercise in exercises:
        if exercise.duration_seconds:
            total_seconds += exercise.duration_seconds
        elif exercise.reps:
            total_seconds += exercise.reps * SECONDS_PER_REP

    total_seconds += SECONDS_BETWEEN_EXERCISES * max(len(exercises) - 1, 0)
    return math.ceil(total_seconds / 60)


class RoutineService:
    """Service for routine business logic.

    When a settings store is given, exercises the user disabled are
    skipped during resolution the same way stale ids are.
    """

    def __init__(self, routines: RoutineStore, exercises: ExerciseStore,
                 user_settings: Optional[SettingsStore] = None):
        self.repository = routines
        self.exercises = exercises
        self.user_settings = user_settings

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all(self) -> list[Routine]:
        return self.repository.get_all()

    def get_by_id(self, routine_id: int) -> Optional[Routine]:
        return self.repository.get_by_id(routine_id)

    def get_by_kind(self, kind: RoutineKind) -> Optional[Routine]:
        return self.repository.get_by_kind(kind)

    def get_or_raise(self, routine_id: int) -> Routine:
        routine = self.repository.get_by_id(routine_id)
        if routine is None:
            raise NotFoundError(f"Routine {routine_id} not found", reason="routine_not_found",
                                routine_id=routine_id)
        return routine

    def resolve_exercises(self, routine_id: int) -> list[ExerciseDefinition]:
        """Materialise a routine into its exercises, in routine order.

        Ids missing from the catalog (or disabled by the user) are
        skipped silently.

        Raises:
            NotFoundError: If the routine does not exist
        """
        routine = self.get_or_raise(routine_id)
        disabled = self._disabled_ids()

        resolved = []
        for exercise_id in routine.exercise_ids:
            if exercise_id in disabled:
                continue
            exercise = self.exercises.get_by_id(exercise_id)
            if exercise is None:
                logger.debug(f"Routine {routine_id}: skipping unknown exercise '{exercise_id}'")
                continue
            resolved.append(exercise)
        return resolved

    def routine_duration_minutes(self, routine_id: int) -> int:
        return estimate_duration_minutes(self.resolve_exercises(routine_id))

    def exercise_count(self, routine_id: int) -> int:
        """Stored ids, stale or disabled included; 0 for an unknown routine."""
        routine = self.repository.get_by_id(routine_id)
        return len(routine.exercise_ids) if routine else 0

    def to_response(self, routine: Routine) -> RoutineResponse:
        return RoutineResponse(id=routine.id, name=routine.name, kind=routine.kind,
                               exercise_ids=list(routine.exercise_ids),
                               exercise_count=self.exercise_count(routine.id),
                               estimated_duration_minutes=self.routine_duration_minutes(routine.id), )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create_routine(self, name: str, exercise_ids: list[str]) -> Routine:
        """Create a custom routine.

        Raises:
            InvalidArgumentError: Blank name, empty list, or unknown
                exercise id (checked in that order; the first unknown
                id is reported)
        """
        if not name or not name.strip():
            raise InvalidArgumentError("Routine title is required", reason="routine_name_required")
        if not exercise_ids:
            raise InvalidArgumentError("Routine must contain at least one exercise",
                                       reason="routine_exercises_required")
        self._check_exercises_exist(exercise_ids)

        routine = self.repository.save(Routine(name=name.strip(), kind=RoutineKind.CUSTOM,
                                               exercise_ids=list(exercise_ids)))
        logger.info(f"Created custom routine {routine.id} '{routine.name}' ({len(exercise_ids)} exercises)")
        return routine

    def update_routine_exercises(self, routine_id: int, exercise_ids: list[str]) -> Routine:
        """Replace the ordered exercise list of a routine."""
        routine = self.get_or_raise(routine_id)
        if not exercise_ids:
            raise InvalidArgumentError("Routine must contain at least one exercise",
                                       reason="routine_exercises_required")
        self._check_exercises_exist(exercise_ids)

        routine.exercise_ids = list(exercise_ids)
        return self.repository.update(routine)

    def delete_routine(self, routine_id: int) -> None:
        """Delete a custom routine.

        Raises:
            NotFoundError: If the routine does not exist
            ForbiddenError: If it is a default ``morning``/``evening`` routine
        """
        routine = self.get_or_raise(routine_id)
        if routine.kind.is_default:
            raise ForbiddenError("Cannot delete default routines", reason="default_routine",
                                 routine_id=routine_id)
        self.repository.delete(routine_id)
        logger.info(f"Deleted routine {routine_id} '{routine.name}'")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_exercises_exist(self, exercise_ids: list[str]) -> None:
        for exercise_id in exercise_ids:
            if self.exercises.get_by_id(exercise_id) is None:
                raise InvalidArgumentError(f"Exercise with ID {exercise_id} not found", reason="unknown_exercise",
                                           exercise_id=exercise_id)

    def _disabled_ids(self) -> set[str]:
        if self.user_settings is None:
            return set()
        return set(self.user_settings.get_all().disabled_exercises)
