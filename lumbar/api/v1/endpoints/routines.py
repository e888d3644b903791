"""
Routine endpoints.

Routines are resolved against the catalog on every read, so duration
estimates always reflect the current catalog and disabled exercises.
"""

from fastapi import APIRouter, Depends, status

from lumbar.api.dependencies import get_routine_service
from lumbar.core.errors import NotFoundError
from lumbar.schemas.exercise import ExerciseDefinition
from lumbar.schemas.routine import RoutineCreate, RoutineExercisesUpdate, RoutineKind, RoutineResponse
from lumbar.services.routine_service import RoutineService

router = APIRouter()


@router.get("", summary="List all routines.", response_model=list[RoutineResponse], )
def list_routines(service: RoutineService = Depends(get_routine_service)):
    return [service.to_response(r) for r in service.get_all()]


@router.post("", summary="Create a custom routine.", response_model=RoutineResponse,
             status_code=status.HTTP_201_CREATED, )
def create_routine(data: RoutineCreate, service: RoutineService = Depends(get_routine_service)):
    routine = service.create_routine(data.name, data.exercise_ids)
    return service.to_response(routine)


@router.get("/kind/{kind}", summary="Get the routine of a kind (morning, evening).", response_model=RoutineResponse, )
def get_routine_by_kind(kind: RoutineKind, service: RoutineService = Depends(get_routine_service)):
    routine = service.get_by_kind(kind)
    if routine is None:
        raise NotFoundError(f"No {kind.value} routine", reason="routine_not_found")
    return service.to_response(routine)


@router.get("/{routine_id}", summary="Get one routine with its duration estimate.", response_model=RoutineResponse, )
def get_routine(routine_id: int, service: RoutineService = Depends(get_routine_service)):
    return service.to_response(service.get_or_raise(routine_id))


@router.get("/{routine_id}/exercises", summary="Resolve a routine into its exercises.",
            response_model=list[ExerciseDefinition], )
def get_routine_exercises(routine_id: int, service: RoutineService = Depends(get_routine_service)):
    return service.resolve_exercises(routine_id)


@router.put("/{routine_id}/exercises", summary="Replace the ordered exercise list.", response_model=RoutineResponse, )
def update_routine_exercises(routine_id: int, data: RoutineExercisesUpdate,
                             service: RoutineService = Depends(get_routine_service), ):
    routine = service.update_routine_exercises(routine_id, data.exercise_ids)
    return service.to_response(routine)


@router.delete("/{routine_id}", summary="Delete a custom routine.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_routine(routine_id: int, service: RoutineService = Depends(get_routine_service)):
    service.delete_routine(routine_id)
