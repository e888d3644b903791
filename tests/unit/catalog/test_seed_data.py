"""Tests for the built-in exercise catalog and default routines."""

from lumbar.catalog import BUILTIN_EXERCISES, DEFAULT_ROUTINES, seed_catalog
from lumbar.db.repositories import InMemoryExerciseRepository, InMemoryRoutineRepository
from lumbar.schemas.exercise import ExerciseDefinition, MeasurementMode
from lumbar.schemas.routine import RoutineKind


class TestCatalogContents:
    """Verify the built-in exercise catalog is well-formed."""

    def test_twenty_exercises(self):
        assert len(BUILTIN_EXERCISES) == 20, (
            f"Expected 20 exercises, got {len(BUILTIN_EXERCISES)}"
        )

    def test_all_entries_are_definitions(self):
        for exercise in BUILTIN_EXERCISES:
            assert isinstance(exercise, ExerciseDefinition), (
                f"Catalog entry '{exercise}' is {type(exercise)}, expected ExerciseDefinition"
            )

    def test_no_duplicate_ids_or_names(self):
        ids = [e.exercise_id for e in BUILTIN_EXERCISES]
        names = [e.name for e in BUILTIN_EXERCISES]
        assert len(ids) == len(set(ids)), "Duplicate exercise ids"
        assert len(names) == len(set(names)), "Duplicate display names"

    def test_target_matches_mode(self):
        for e in BUILTIN_EXERCISES:
            if e.mode is MeasurementMode.REPS:
                assert e.reps and e.duration_seconds is None, f"{e.exercise_id}: bad rep target"
            else:
                assert e.duration_seconds and e.reps is None, f"{e.exercise_id}: bad hold target"

    def test_every_entry_has_guidance(self):
        for e in BUILTIN_EXERCISES:
            assert e.description.strip(), f"{e.exercise_id}: missing description"
            assert e.instructions, f"{e.exercise_id}: missing instructions"
            assert e.target_muscles, f"{e.exercise_id}: missing target muscles"


class TestDefaultRoutines:
    def test_morning_and_evening(self):
        kinds = [kind for _, kind, _ in DEFAULT_ROUTINES]
        assert kinds == [RoutineKind.MORNING, RoutineKind.EVENING]

    def test_routines_are_disjoint_and_cover_catalog(self):
        (_, _, morning), (_, _, evening) = DEFAULT_ROUTINES
        assert len(morning) == 10
        assert len(evening) == 10
        assert not set(morning) & set(evening)
        assert set(morning) | set(evening) == {e.exercise_id for e in BUILTIN_EXERCISES}


class TestSeedCatalog:
    def test_seeds_empty_stores(self):
        exercises, routines = InMemoryExerciseRepository(), InMemoryRoutineRepository()
        assert seed_catalog(exercises, routines) is True
        assert exercises.count() == 20
        assert routines.get_by_kind(RoutineKind.MORNING).name == "Morning Routine"
        assert routines.get_by_kind(RoutineKind.EVENING).name == "Evening Routine"

    def test_second_call_is_skipped(self):
        exercises, routines = InMemoryExerciseRepository(), InMemoryRoutineRepository()
        seed_catalog(exercises, routines)
        assert seed_catalog(exercises, routines) is False
        assert len(routines.get_all()) == 2
