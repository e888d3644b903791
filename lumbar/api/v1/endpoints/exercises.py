"""
Exercise catalog endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from lumbar.api.dependencies import get_exercise_service
from lumbar.schemas.exercise import (
    ExerciseCategory,
    ExerciseDefinition,
    ExerciseDraft,
    ExerciseValidationResult,
)
from lumbar.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("", summary="List catalog exercises, optionally by category.", response_model=list[ExerciseDefinition], )
def list_exercises(category: Optional[ExerciseCategory] = Query(None, description="Filter by category"),
                   service: ExerciseService = Depends(get_exercise_service), ):
    if category is not None:
        return service.get_by_category(category)
    return service.get_all()


@router.post("/validate", summary="Validate an exercise draft.", response_model=ExerciseValidationResult, )
def validate_exercise(draft: ExerciseDraft, service: ExerciseService = Depends(get_exercise_service), ):
    issue = service.validate(draft)
    return ExerciseValidationResult(valid=issue is None, error=issue)


@router.get("/{exercise_id}", summary="Get one exercise.", response_model=ExerciseDefinition, )
def get_exercise(exercise_id: str, service: ExerciseService = Depends(get_exercise_service), ):
    return service.get_or_raise(exercise_id)
