"""Tests for the guided workout driver.

The scheduler is a manual fake: ticks happen only when the test fires
the pending callback, so timer behaviour is fully deterministic.
"""

import pytest

from lumbar.core.errors import InvalidArgumentError
from lumbar.workout import GuidedWorkout, WorkoutPhase


# ======================================================================
# Helpers
# ======================================================================


class FakeHandle:
    def __init__(self, scheduler, callback):
        self.scheduler = scheduler
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    def __init__(self):
        self.handles: list[FakeHandle] = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and h.callback is not None]

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            (handle,) = self.live
            callback, handle.callback = handle.callback, None
            callback()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def routine_id(routine_service):
    # timed, counted, timed
    return routine_service.create_routine("Desk break", ["plank", "cat_cow", "chest_stretch"]).id


@pytest.fixture
def workout(session_service, routine_id, scheduler):
    return GuidedWorkout.begin(session_service, routine_id, scheduler)


# ======================================================================
# Progression
# ======================================================================


class TestProgression:
    def test_begin_starts_session(self, workout, session_service, routine_id):
        session_log = session_service.get_or_raise(workout.session_id)
        assert session_log.routine_id == routine_id
        assert workout.phase is WorkoutPhase.CREATED
        assert workout.current_exercise.exercise_id == "plank"
        assert workout.progress_percent == 33

    def test_complete_advances_and_records(self, workout, session_service):
        assert workout.complete_current() is None
        assert workout.phase is WorkoutPhase.IN_PROGRESS
        assert workout.current_exercise.exercise_id == "cat_cow"
        ids = [c.exercise_id for c in session_service.get_or_raise(workout.session_id).completions]
        assert ids == ["plank"]

    def test_skip_does_not_record(self, workout, session_service):
        assert workout.skip()
        assert workout.current_exercise.exercise_id == "cat_cow"
        assert session_service.get_or_raise(workout.session_id).completions == []

    def test_skip_on_last_exercise_is_noop(self, workout):
        workout.skip()
        workout.skip()
        assert workout.is_last
        assert not workout.skip()
        assert workout.current_exercise.exercise_id == "chest_stretch"

    def test_last_completion_finishes_session(self, workout, session_service, clock):
        workout.complete_current()
        workout.skip()
        clock.advance(minutes=4)
        summary = workout.complete_current()

        assert summary is not None
        assert summary.session_id == workout.session_id
        assert summary.exercise_count == 3
        assert summary.exercises_completed == 2
        assert summary.duration_minutes == 4
        assert workout.phase is WorkoutPhase.FINISHED
        assert workout.current_exercise is None
        assert workout.progress_percent == 100
        assert session_service.get_or_raise(workout.session_id).completed

    def test_finished_workout_rejects_actions(self, workout):
        for _ in range(3):
            workout.complete_current()
        for action in (workout.complete_current, workout.skip, workout.pause):
            with pytest.raises(InvalidArgumentError) as exc_info:
                action()
            assert exc_info.value.reason == "session_finished"

    def test_negative_reps_keep_position(self, workout):
        with pytest.raises(InvalidArgumentError) as exc_info:
            workout.complete_current(actual_reps=-2)
        assert exc_info.value.reason == "invalid_completion"
        assert workout.current_exercise.exercise_id == "plank"

    def test_empty_exercise_list(self, session_service, scheduler):
        with pytest.raises(InvalidArgumentError) as exc_info:
            GuidedWorkout(session_service, 1, [], scheduler)
        assert exc_info.value.reason == "routine_empty"


# ======================================================================
# Timer
# ======================================================================


class TestTimer:
    def test_timed_exercise_ticks(self, workout, scheduler):
        assert workout.timer_running
        scheduler.fire(5)
        assert workout.elapsed_seconds == 5
        assert len(scheduler.live) == 1

    def test_counted_exercise_has_no_timer(self, workout, scheduler):
        scheduler.fire(3)
        workout.complete_current()
        assert workout.current_exercise.exercise_id == "cat_cow"
        assert not workout.timer_running
        assert scheduler.live == []
        assert workout.elapsed_seconds == 0

    def test_elapsed_is_recorded_for_timed_exercise(self, workout, scheduler, session_service):
        scheduler.fire(18)
        workout.complete_current()
        completion = session_service.get_or_raise(workout.session_id).completions[0]
        assert completion.actual_duration == 18

    def test_explicit_duration_wins(self, workout, scheduler, session_service):
        scheduler.fire(18)
        workout.complete_current(actual_duration=20)
        completion = session_service.get_or_raise(workout.session_id).completions[0]
        assert completion.actual_duration == 20

    def test_pause_freezes_and_resume_continues(self, workout, scheduler):
        scheduler.fire(4)
        workout.pause()
        assert workout.is_paused
        assert scheduler.live == []
        assert workout.elapsed_seconds == 4

        workout.resume()
        assert len(scheduler.live) == 1
        scheduler.fire(2)
        assert workout.elapsed_seconds == 6

    def test_toggle_pause(self, workout):
        assert workout.toggle_pause() is True
        assert workout.toggle_pause() is False
        assert workout.timer_running

    def test_pause_survives_advance(self, workout, scheduler):
        workout.pause()
        workout.skip()
        workout.skip()
        assert workout.current_exercise.is_timed
        assert not workout.timer_running
        workout.resume()
        assert workout.timer_running

    def test_advance_resets_elapsed_and_keeps_single_handle(self, workout, scheduler):
        scheduler.fire(7)
        workout.skip()
        workout.skip()
        assert workout.elapsed_seconds == 0
        assert len(scheduler.live) == 1

    def test_finish_and_close_cancel_timer(self, workout, scheduler):
        workout.complete_current()
        workout.complete_current()
        assert workout.timer_running
        workout.complete_current()
        assert scheduler.live == []

    def test_close_cancels_timer(self, workout, scheduler):
        workout.close()
        assert scheduler.live == []
        assert not workout.timer_running
