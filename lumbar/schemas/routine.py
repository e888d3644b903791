"""Routine schemas."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RoutineKind(str, Enum):
    MORNING = "morning"
    EVENING = "evening"
    CUSTOM = "custom"

    @property
    def is_default(self) -> bool:
        """Default routines are seeded once and can never be deleted."""
        return self in (RoutineKind.MORNING, RoutineKind.EVENING)


class Routine(BaseModel):
    """Named, ordered list of exercise ids.

    ``id`` is ``None`` until the routine store assigns one.
    """

    id: Optional[int] = None
    name: str
    kind: RoutineKind = RoutineKind.CUSTOM
    exercise_ids: list[str] = Field(default_factory=list)


class RoutineCreate(BaseModel):
    """Schema for creating a custom routine.

    Validation of the name and exercise list happens in the service so
    that errors follow a fixed order.
    """

    name: str = ""
    exercise_ids: list[str] = Field(default_factory=list)


class RoutineExercisesUpdate(BaseModel):
    exercise_ids: list[str]


class RoutineResponse(BaseModel):
    """Schema for routine in API responses."""

    id: int
    name: str
    kind: RoutineKind
    exercise_ids: list[str]
    exercise_count: int
    estimated_duration_minutes: int
