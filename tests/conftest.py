"""Shared fixtures: seeded in-memory stores and a controllable clock."""

import datetime

import pytest

from lumbar.catalog import seed_catalog
from lumbar.db.repositories import (
    InMemoryExerciseRepository,
    InMemoryRoutineRepository,
    InMemorySessionLogRepository,
    InMemorySettingsRepository,
)
from lumbar.schemas.routine import RoutineKind
from lumbar.services import ExerciseService, RoutineService, SessionService, SettingsService


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime.datetime):
        self.now = now

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += datetime.timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime.datetime(2026, 3, 10, 7, 0, 0))


@pytest.fixture
def catalog():
    """Exercise and routine stores seeded the way a first launch does it."""
    exercises = InMemoryExerciseRepository()
    routines = InMemoryRoutineRepository()
    seed_catalog(exercises, routines)
    return exercises, routines


@pytest.fixture
def exercise_store(catalog):
    return catalog[0]


@pytest.fixture
def routine_store(catalog):
    return catalog[1]


@pytest.fixture
def settings_store():
    return InMemorySettingsRepository()


@pytest.fixture
def exercise_service(exercise_store):
    return ExerciseService(exercise_store)


@pytest.fixture
def routine_service(routine_store, exercise_store, settings_store):
    return RoutineService(routine_store, exercise_store, settings_store)


@pytest.fixture
def session_service(routine_service, clock):
    return SessionService(InMemorySessionLogRepository(), routine_service, clock=clock)


@pytest.fixture
def settings_service(settings_store):
    return SettingsService(settings_store)


@pytest.fixture
def morning_id(routine_service):
    return routine_service.get_by_kind(RoutineKind.MORNING).id


@pytest.fixture
def evening_id(routine_service):
    return routine_service.get_by_kind(RoutineKind.EVENING).id
