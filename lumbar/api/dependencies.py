"""
Shared API dependencies.

Build services over the SQL repositories for the request's session.
"""

from fastapi import Depends
from sqlmodel import Session

from lumbar.db.repositories import (
    ExerciseRepository,
    RoutineRepository,
    SessionLogRepository,
    SettingsRepository,
)
from lumbar.db.session import get_db
from lumbar.services import ExerciseService, RoutineService, SessionService, SettingsService


def get_exercise_service(db: Session = Depends(get_db)) -> ExerciseService:
    return ExerciseService(ExerciseRepository(db))


def get_routine_service(db: Session = Depends(get_db)) -> RoutineService:
    return RoutineService(RoutineRepository(db), ExerciseRepository(db), SettingsRepository(db))


def get_session_service(routines: RoutineService = Depends(get_routine_service),
                        db: Session = Depends(get_db), ) -> SessionService:
    return SessionService(SessionLogRepository(db), routines)


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    return SettingsService(SettingsRepository(db))
