"""
In-memory repositories.

Plain-dict implementations of the store contracts.  They back unit tests
and throwaway runs without any database; records are copied on the way
in and out so callers can never mutate stored state by reference.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional

from lumbar.schemas.exercise import ExerciseCategory, ExerciseDefinition
from lumbar.schemas.routine import Routine, RoutineKind
from lumbar.schemas.session_log import SessionLog
from lumbar.schemas.user_settings import UserSettings, check_setting_key, merge_settings


class InMemoryExerciseRepository:
    def __init__(self, exercises: Optional[list[ExerciseDefinition]] = None):
        self._exercises: dict[str, ExerciseDefinition] = {}
        for exercise in exercises or []:
            self.save(exercise)

    def get_all(self) -> list[ExerciseDefinition]:
        return list(self._exercises.values())

    def get_by_id(self, exercise_id: str) -> Optional[ExerciseDefinition]:
        return self._exercises.get(exercise_id)

    def get_by_category(self, category: ExerciseCategory) -> list[ExerciseDefinition]:
        category = ExerciseCategory(category)
        return [e for e in self._exercises.values() if e.category is category]

    def count(self) -> int:
        return len(self._exercises)

    def save(self, exercise: ExerciseDefinition) -> ExerciseDefinition:
        # Definitions are frozen, no copy needed
        self._exercises[exercise.exercise_id] = exercise
        return exercise

    def update(self, exercise: ExerciseDefinition) -> ExerciseDefinition:
        return self.save(exercise)

    def delete(self, exercise_id: str) -> bool:
        return self._exercises.pop(exercise_id, None) is not None


class InMemoryRoutineRepository:
    def __init__(self) -> None:
        self._routines: dict[int, Routine] = {}
        self._next_id = 1

    def get_all(self) -> list[Routine]:
        return [r.model_copy(deep=True) for _, r in sorted(self._routines.items())]

    def get_by_id(self, routine_id: int) -> Optional[Routine]:
        routine = self._routines.get(routine_id)
        return routine.model_copy(deep=True) if routine else None

    def get_by_kind(self, kind: RoutineKind) -> Optional[Routine]:
        kind = RoutineKind(kind)
        for routine in self.get_all():
            if routine.kind is kind:
                return routine
        return None

    def save(self, routine: Routine) -> Routine:
        stored = routine.model_copy(update={"id": self._next_id}, deep=True)
        self._routines[self._next_id] = stored
        self._next_id += 1
        return stored.model_copy(deep=True)

    def update(self, routine: Routine) -> Routine:
        if routine.id in self._routines:
            self._routines[routine.id] = routine.model_copy(deep=True)
        return routine

    def delete(self, routine_id: int) -> bool:
        return self._routines.pop(routine_id, None) is not None


class InMemorySessionLogRepository:
    def __init__(self) -> None:
        self._sessions: dict[int, SessionLog] = {}
        self._next_id = 1

    def get_all(self) -> list[SessionLog]:
        ordered = sorted(self._sessions.values(), key=lambda s: (s.start_time, s.id), reverse=True)
        return [s.model_copy(deep=True) for s in ordered]

    def get_by_id(self, session_id: int) -> Optional[SessionLog]:
        session_log = self._sessions.get(session_id)
        return session_log.model_copy(deep=True) if session_log else None

    def get_by_date(self, date: datetime.date) -> list[SessionLog]:
        return self.get_by_date_range(date, date)

    def get_by_date_range(self, start: datetime.date, end: datetime.date) -> list[SessionLog]:
        matching = [s for s in self._sessions.values() if start <= s.session_date <= end]
        return [s.model_copy(deep=True) for s in sorted(matching, key=lambda s: s.start_time)]

    def save(self, session_log: SessionLog) -> int:
        new_id = self._next_id
        self._sessions[new_id] = session_log.model_copy(update={"id": new_id}, deep=True)
        self._next_id += 1
        return new_id

    def update(self, session_log: SessionLog) -> SessionLog:
        if session_log.id in self._sessions:
            self._sessions[session_log.id] = session_log.model_copy(deep=True)
        return session_log

    def delete(self, session_id: int) -> bool:
        return self._sessions.pop(session_id, None) is not None


class InMemorySettingsRepository:
    def __init__(self) -> None:
        self._settings: Optional[UserSettings] = None

    def get_all(self) -> UserSettings:
        if self._settings is None:
            self._settings = UserSettings()
        return self._settings.model_copy(deep=True)

    def get(self, key: str) -> Any:
        check_setting_key(key)
        return getattr(self.get_all(), key)

    def set(self, key: str, value: Any) -> UserSettings:
        return self.save_all(merge_settings(self.get_all(), **{key: value}))

    def save_all(self, user_settings: UserSettings) -> UserSettings:
        self._settings = user_settings.model_copy(deep=True)
        return user_settings

    def reset(self) -> UserSettings:
        return self.save_all(UserSettings())
