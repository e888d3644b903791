"""
Store contracts.

Services depend on these protocols, not on a concrete backend, so the
SQL repositories and the in-memory ones are interchangeable.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional, Protocol

from lumbar.schemas.exercise import ExerciseCategory, ExerciseDefinition
from lumbar.schemas.routine import Routine, RoutineKind
from lumbar.schemas.session_log import SessionLog
from lumbar.schemas.user_settings import UserSettings


class ExerciseStore(Protocol):
    def get_all(self) -> list[ExerciseDefinition]: ...

    def get_by_id(self, exercise_id: str) -> Optional[ExerciseDefinition]: ...

    def get_by_category(self, category: ExerciseCategory) -> list[ExerciseDefinition]: ...

    def count(self) -> int: ...

    def save(self, exercise: ExerciseDefinition) -> ExerciseDefinition: ...

    def update(self, exercise: ExerciseDefinition) -> ExerciseDefinition: ...

    def delete(self, exercise_id: str) -> bool: ...


class RoutineStore(Protocol):
    def get_all(self) -> list[Routine]: ...

    def get_by_id(self, routine_id: int) -> Optional[Routine]: ...

    def get_by_kind(self, kind: RoutineKind) -> Optional[Routine]: ...

    def save(self, routine: Routine) -> Routine: ...

    def update(self, routine: Routine) -> Routine: ...

    def delete(self, routine_id: int) -> bool: ...


class SessionStore(Protocol):
    def get_all(self) -> list[SessionLog]: ...

    def get_by_id(self, session_id: int) -> Optional[SessionLog]: ...

    def get_by_date(self, date: datetime.date) -> list[SessionLog]: ...

    def get_by_date_range(self, start: datetime.date, end: datetime.date) -> list[SessionLog]: ...

    def save(self, session_log: SessionLog) -> int: ...

    def update(self, session_log: SessionLog) -> SessionLog: ...

    def delete(self, session_id: int) -> bool: ...


class SettingsStore(Protocol):
    def get_all(self) -> UserSettings: ...

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> UserSettings: ...

    def save_all(self, user_settings: UserSettings) -> UserSettings: ...

    def reset(self) -> UserSettings: ...
