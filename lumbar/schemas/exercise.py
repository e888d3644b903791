"""
Exercise catalog schemas.

An :class:`ExerciseDefinition` is read-only reference data: it is created
when the catalog is seeded and never mutated at runtime.  The measurement
mode decides which target is populated: ``reps`` for rep-based
exercises, ``duration_seconds`` for timed holds.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ======================================================================
# Enums
# ======================================================================

class ExerciseCategory(str, Enum):
    STRETCHING = "stretching"
    STRENGTHENING = "strengthening"
    FLEXIBILITY = "flexibility"
    POSTURE = "posture"
    MOBILITY = "mobility"
    CORE = "core"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"


class MeasurementMode(str, Enum):
    """How the exercise target is measured."""
    REPS = "reps"
    DURATION = "duration"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExerciseValidationIssue(str, Enum):
    """First failing check reported by the catalog validator."""
    NAME_REQUIRED = "Name is required"
    DESCRIPTION_REQUIRED = "Description is required"
    CATEGORY_REQUIRED = "Category is required"
    TARGET_REQUIRED = "Either reps or duration must be specified"


# ======================================================================
# Models
# ======================================================================

class ExerciseModifications(BaseModel):
    """Easier and harder variations of an exercise."""

    model_config = ConfigDict(frozen=True)

    easier: str = ""
    harder: str = ""


class ExerciseDefinition(BaseModel):
    """Immutable catalog entry."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str = Field(..., min_length=1, description="Stable identifier, e.g. 'bird_dog'")
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: ExerciseCategory
    mode: MeasurementMode

    reps: Optional[int] = Field(None, ge=1, description="Target repetitions (rep-based only)")
    duration_seconds: Optional[int] = Field(None, ge=1, description="Target hold time (duration-based only)")

    sets: int = Field(1, ge=1)
    rest_between_sets: int = Field(0, ge=0, description="Rest in seconds between sets")

    target_muscles: tuple[str, ...] = ()
    difficulty: Difficulty = Difficulty.BEGINNER
    equipment: str = "none"
    image_url: Optional[str] = None
    instructions: tuple[str, ...] = ()
    form_cues: tuple[str, ...] = ()
    contraindications: tuple[str, ...] = ()
    modifications: ExerciseModifications = ExerciseModifications()

    @model_validator(mode="after")
    def _check_target(self) -> "ExerciseDefinition":
        if self.mode is MeasurementMode.REPS:
            if self.reps is None or self.duration_seconds is not None:
                raise ValueError("rep-based exercise must set reps and not duration_seconds")
        elif self.duration_seconds is None or self.reps is not None:
            raise ValueError("duration-based exercise must set duration_seconds and not reps")
        return self

    @property
    def is_timed(self) -> bool:
        return self.mode is MeasurementMode.DURATION


class ExerciseDraft(BaseModel):
    """Partially filled exercise, as submitted for validation."""

    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[ExerciseCategory] = None
    reps: Optional[int] = None
    duration_seconds: Optional[int] = None


class ExerciseValidationResult(BaseModel):
    valid: bool
    error: Optional[ExerciseValidationIssue] = None
