"""
Session log schemas.

A :class:`SessionLog` records one workout attempt.  It is owned by the
session service while in progress and becomes an immutable history
record once ``completed`` is set (it can still be deleted wholesale).

Invariants enforced on every instance:

* ``completed`` implies ``end_time`` is present,
* ``end_time`` is never before ``start_time``,
* at most one :class:`ExerciseCompletion` per exercise id.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ExerciseCompletion(BaseModel):
    """One exercise attempted within a session."""

    exercise_id: str
    completed: bool = True
    actual_reps: Optional[int] = Field(None, ge=0)
    actual_duration: Optional[int] = Field(None, ge=0, description="Seconds actually performed")


class SessionLog(BaseModel):
    id: Optional[int] = None
    routine_id: int
    start_time: datetime.datetime
    end_time: Optional[datetime.datetime] = None
    completions: list[ExerciseCompletion] = Field(default_factory=list)
    completed: bool = False

    @model_validator(mode="after")
    def _check_invariants(self) -> "SessionLog":
        if self.completed and self.end_time is None:
            raise ValueError("a completed session must have an end time")
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end time precedes start time")
        seen = set()
        for completion in self.completions:
            if completion.exercise_id in seen:
                raise ValueError(f"duplicate completion for exercise '{completion.exercise_id}'")
            seen.add(completion.exercise_id)
        return self

    @property
    def session_date(self) -> datetime.date:
        """Local calendar date the session started on."""
        return self.start_time.date()

    def with_completion(self, completion: ExerciseCompletion) -> "SessionLog":
        """Return a copy with *completion* upserted (last write wins)."""
        completions = list(self.completions)
        for i, existing in enumerate(completions):
            if existing.exercise_id == completion.exercise_id:
                completions[i] = completion
                break
        else:
            completions.append(completion)
        return self.model_copy(update={"completions": completions})


# ======================================================================
# API schemas
# ======================================================================

class SessionStart(BaseModel):
    routine_id: int


class CompletionCreate(BaseModel):
    """Schema for recording an exercise completion."""

    exercise_id: str = Field(..., min_length=1)
    actual_reps: Optional[int] = Field(None, ge=0)
    actual_duration: Optional[int] = Field(None, ge=0)


class SessionLogResponse(BaseModel):
    """Schema for session log in API responses."""

    id: int
    routine_id: int
    session_date: datetime.date
    start_time: datetime.datetime
    end_time: Optional[datetime.datetime]
    completions: list[ExerciseCompletion]
    completed: bool
    duration_minutes: int
