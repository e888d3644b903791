"""Tests for catalog lookups and exercise draft validation."""

import pytest

from lumbar.core.errors import NotFoundError
from lumbar.schemas.exercise import ExerciseCategory, ExerciseDraft, ExerciseValidationIssue
from lumbar.services.exercise_service import ExerciseService


class TestValidate:
    def test_valid_rep_draft(self):
        draft = ExerciseDraft(name="Bridge", description="Lift hips.", category=ExerciseCategory.CORE, reps=10)
        assert ExerciseService.validate(draft) is None

    def test_valid_timed_draft(self):
        draft = ExerciseDraft(name="Plank", description="Hold.", category=ExerciseCategory.CORE,
                              duration_seconds=30)
        assert ExerciseService.validate(draft) is None

    def test_empty_draft_reports_name_first(self):
        assert ExerciseService.validate(ExerciseDraft()) is ExerciseValidationIssue.NAME_REQUIRED

    def test_description_checked_before_category(self):
        draft = ExerciseDraft(name="Bridge", description=" ")
        assert ExerciseService.validate(draft) is ExerciseValidationIssue.DESCRIPTION_REQUIRED

    def test_category_checked_before_target(self):
        draft = ExerciseDraft(name="Bridge", description="Lift hips.")
        assert ExerciseService.validate(draft) is ExerciseValidationIssue.CATEGORY_REQUIRED

    @pytest.mark.parametrize("reps, seconds", [
        (None, None), (10, 30), (0, None), (None, 0), (-5, None), (0, 0),
    ])
    def test_exactly_one_target(self, reps, seconds):
        draft = ExerciseDraft(name="Bridge", description="Lift hips.", category=ExerciseCategory.CORE,
                              reps=reps, duration_seconds=seconds)
        assert ExerciseService.validate(draft) is ExerciseValidationIssue.TARGET_REQUIRED


class TestLookups:
    def test_get_or_raise(self, exercise_service):
        assert exercise_service.get_or_raise("bird_dog").name == "Bird Dog"
        with pytest.raises(NotFoundError) as exc_info:
            exercise_service.get_or_raise("nope")
        assert exc_info.value.reason == "exercise_not_found"

    def test_category_filters(self, exercise_service):
        stretching = exercise_service.get_stretching_exercises()
        assert stretching
        assert all(e.category is ExerciseCategory.STRETCHING for e in stretching)
        core = exercise_service.get_core_exercises()
        assert all(e.category is ExerciseCategory.CORE for e in core)
        assert "bird_dog" in {e.exercise_id for e in core}
