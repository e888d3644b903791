"""Tests for the SQL repositories against an in-memory SQLite database."""

import datetime

import pytest
from sqlmodel import Session

from lumbar.catalog import BUILTIN_EXERCISES
from lumbar.core.errors import StorageFailureError
from lumbar.db.init_db import create_tables, init_db
from lumbar.db.repositories import (
    ExerciseRepository,
    RoutineRepository,
    SessionLogRepository,
    SettingsRepository,
)
from lumbar.db.session import create_db_engine
from lumbar.schemas.exercise import ExerciseCategory
from lumbar.schemas.routine import Routine, RoutineKind
from lumbar.schemas.session_log import ExerciseCompletion, SessionLog
from lumbar.schemas.user_settings import UserSettings
from lumbar.services import RoutineService, SessionService


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite:///:memory:")
    init_db(engine, seed=True)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


def _start(day: int, hour: int = 7) -> datetime.datetime:
    return datetime.datetime(2026, 3, day, hour, 0)


# ======================================================================
# Catalog
# ======================================================================


class TestExerciseRepository:
    def test_seeded_catalog_round_trips(self, db):
        repo = ExerciseRepository(db)
        assert repo.count() == len(BUILTIN_EXERCISES)
        for exercise in BUILTIN_EXERCISES:
            assert repo.get_by_id(exercise.exercise_id) == exercise

    def test_get_by_category(self, db):
        core = ExerciseRepository(db).get_by_category(ExerciseCategory.CORE)
        assert core
        assert all(e.category is ExerciseCategory.CORE for e in core)

    def test_unknown_id(self, db):
        assert ExerciseRepository(db).get_by_id("nope") is None

    def test_init_db_seeds_once(self, engine, db):
        assert init_db(engine, seed=True) is False
        assert len(RoutineRepository(db).get_all()) == 2


class TestRoutineRepository:
    def test_default_kinds(self, db):
        repo = RoutineRepository(db)
        morning = repo.get_by_kind(RoutineKind.MORNING)
        evening = repo.get_by_kind(RoutineKind.EVENING)
        assert morning.name == "Morning Routine"
        assert evening.name == "Evening Routine"
        assert repo.get_by_kind(RoutineKind.CUSTOM) is None

    def test_save_update_delete(self, db):
        repo = RoutineRepository(db)
        saved = repo.save(Routine(name="Desk break", exercise_ids=["cat_cow"]))
        assert saved.id is not None

        saved.exercise_ids = ["cobra", "cat_cow"]
        repo.update(saved)
        assert repo.get_by_id(saved.id).exercise_ids == ["cobra", "cat_cow"]

        assert repo.delete(saved.id)
        assert repo.get_by_id(saved.id) is None
        assert not repo.delete(saved.id)


# ======================================================================
# Sessions
# ======================================================================


class TestSessionLogRepository:
    def test_completion_upsert_persists(self, db):
        repo = SessionLogRepository(db)
        session_id = repo.save(SessionLog(routine_id=1, start_time=_start(9)))

        session_log = repo.get_by_id(session_id)
        session_log = session_log.with_completion(ExerciseCompletion(exercise_id="cat_cow", actual_reps=10))
        repo.update(session_log)
        session_log = repo.get_by_id(session_id)
        repo.update(session_log.with_completion(ExerciseCompletion(exercise_id="cat_cow", actual_reps=12)))

        completions = repo.get_by_id(session_id).completions
        assert len(completions) == 1
        assert completions[0].actual_reps == 12

    def test_ordering_and_date_lookups(self, db):
        repo = SessionLogRepository(db)
        first = repo.save(SessionLog(routine_id=1, start_time=_start(8)))
        evening = repo.save(SessionLog(routine_id=2, start_time=_start(9, hour=17)))
        morning = repo.save(SessionLog(routine_id=1, start_time=_start(9)))

        assert [s.id for s in repo.get_all()] == [evening, morning, first]
        assert [s.id for s in repo.get_by_date(datetime.date(2026, 3, 9))] == [morning, evening]
        in_range = repo.get_by_date_range(datetime.date(2026, 3, 1), datetime.date(2026, 3, 8))
        assert [s.id for s in in_range] == [first]

    def test_finished_session_round_trips(self, db):
        repo = SessionLogRepository(db)
        session_id = repo.save(SessionLog(routine_id=1, start_time=_start(9)))
        finished = repo.get_by_id(session_id).model_copy(update={"end_time": _start(9, hour=8), "completed": True})
        repo.update(finished)

        stored = repo.get_by_id(session_id)
        assert stored.completed
        assert stored.end_time == _start(9, hour=8)

    def test_local_wall_clock_times_are_stored_naive(self, db):
        repo = SessionLogRepository(db)
        late = datetime.datetime(2026, 3, 9, 23, 45, 10)
        session_id = repo.save(SessionLog(routine_id=1, start_time=late))

        stored = repo.get_by_id(session_id)
        assert stored.start_time == late
        assert stored.start_time.tzinfo is None
        assert [s.id for s in repo.get_by_date(datetime.date(2026, 3, 9))] == [session_id]

    def test_service_over_sql_stores(self, db):
        routines = RoutineService(RoutineRepository(db), ExerciseRepository(db), SettingsRepository(db))
        sessions = SessionService(SessionLogRepository(db), routines, clock=lambda: _start(10))
        morning = routines.get_by_kind(RoutineKind.MORNING)

        session_id = sessions.start(morning.id)
        sessions.record_completion(session_id, "cat_cow", actual_reps=10)
        sessions.finish(session_id)

        stats = sessions.statistics()
        assert stats.total_sessions == 1
        assert stats.current_streak == 1
        assert stats.completion_rate == 100


# ======================================================================
# Settings
# ======================================================================


class TestSettingsRepository:
    def test_first_read_stores_defaults(self, db):
        repo = SettingsRepository(db)
        assert repo.get_all() == UserSettings()
        assert repo.get("evening_time") == "17:00"

    def test_values_persist(self, engine):
        with Session(engine) as session:
            SettingsRepository(session).set("disabled_exercises", ["plank", "cobra"])
        with Session(engine) as session:
            assert SettingsRepository(session).get("disabled_exercises") == ["plank", "cobra"]

    def test_reset(self, db):
        repo = SettingsRepository(db)
        repo.set("snooze_minutes", 45)
        assert repo.reset().snooze_minutes == 10
        assert repo.get("snooze_minutes") == 10


# ======================================================================
# Storage failures
# ======================================================================


class TestStorageFailure:
    def test_errors_are_wrapped(self):
        # Tables never created
        engine = create_db_engine("sqlite:///:memory:")
        try:
            with Session(engine) as session:
                with pytest.raises(StorageFailureError) as exc_info:
                    SessionLogRepository(session).get_all()
                assert exc_info.value.reason == "storage"

                with pytest.raises(StorageFailureError):
                    SettingsRepository(session).get_all()
        finally:
            engine.dispose()

    def test_create_tables_is_repeatable(self, engine):
        create_tables(engine)
        with Session(engine) as session:
            assert ExerciseRepository(session).count() == len(BUILTIN_EXERCISES)
