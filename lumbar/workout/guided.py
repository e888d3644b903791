"""
Guided workout driver.

Walks the user through one session's exercises in routine order:

* ``complete_current`` records a completion and advances; on the last
  exercise it finishes the session and returns a :class:`WorkoutSummary`.
* ``skip`` advances without recording anything (no-op on the last one).
* ``pause`` / ``resume`` freeze and continue the elapsed-time counter.

Timer
-----

While the current exercise is timed and the workout is not paused, the
elapsed counter advances by one every ``tick_seconds``.  Ticks come from
a *scheduler* exposing ``call_later(delay, callback)`` and returning a
handle with ``cancel()`` (an :mod:`asyncio` event loop qualifies), so the
timer runs cooperatively on the caller's loop.  Every state change
cancels the live handle before scheduling a new one: at most one tick
source exists at any time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from loguru import logger

from lumbar.core.errors import InvalidArgumentError
from lumbar.schemas.exercise import ExerciseDefinition
from lumbar.services.session_service import SessionService


class TimerHandle(Protocol):
    def cancel(self) -> Any: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class WorkoutPhase(str, Enum):
    CREATED = "created"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True)
class WorkoutSummary:
    """What the summary screen shows once the last exercise is done."""

    session_id: int
    exercise_count: int
    exercises_completed: int
    duration_minutes: int


class GuidedWorkout:
    """State machine for one in-progress guided workout."""

    def __init__(self, sessions: SessionService, session_id: int, exercises: list[ExerciseDefinition],
                 scheduler: Scheduler, tick_seconds: float = 1.0):
        if not exercises:
            raise InvalidArgumentError("A guided workout needs at least one exercise", reason="routine_empty")
        self.sessions = sessions
        self.session_id = session_id
        self.exercises = list(exercises)
        self.scheduler = scheduler
        self.tick_seconds = tick_seconds

        self.current_index = 0
        self.elapsed_seconds = 0
        self.is_paused = False
        self.phase = WorkoutPhase.CREATED
        self.summary: Optional[WorkoutSummary] = None
        self._handle: Optional[TimerHandle] = None

        self._restart_timer()

    @classmethod
    def begin(cls, sessions: SessionService, routine_id: int, scheduler: Scheduler,
              tick_seconds: float = 1.0) -> "GuidedWorkout":
        """Resolve *routine_id*, start a session and return its driver."""
        exercises = sessions.routines.resolve_exercises(routine_id)
        session_id = sessions.start(routine_id)
        return cls(sessions, session_id, exercises, scheduler, tick_seconds)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_exercise(self) -> Optional[ExerciseDefinition]:
        if self.phase is WorkoutPhase.FINISHED:
            return None
        return self.exercises[self.current_index]

    @property
    def is_last(self) -> bool:
        return self.current_index == len(self.exercises) - 1

    @property
    def progress_percent(self) -> int:
        if self.phase is WorkoutPhase.FINISHED:
            return 100
        return int((self.current_index + 1) * 100 / len(self.exercises))

    @property
    def timer_running(self) -> bool:
        return self._handle is not None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def complete_current(self, actual_reps: Optional[int] = None,
                         actual_duration: Optional[int] = None) -> Optional[WorkoutSummary]:
        """Record the current exercise and move on.

        Returns the summary when this completed the last exercise.
        """
        self._ensure_active()
        exercise = self.exercises[self.current_index]
        if actual_duration is None and exercise.is_timed and self.elapsed_seconds:
            actual_duration = self.elapsed_seconds

        session_log = self.sessions.record_completion(self.session_id, exercise.exercise_id, actual_reps,
                                                      actual_duration)
        self.phase = WorkoutPhase.IN_PROGRESS

        if not self.is_last:
            self._advance()
            return None

        finished = self.sessions.finish(self.session_id)
        self._cancel_timer()
        self.phase = WorkoutPhase.FINISHED
        self.summary = WorkoutSummary(session_id=self.session_id, exercise_count=len(self.exercises),
                                      exercises_completed=len(session_log.completions),
                                      duration_minutes=self.sessions.duration_minutes(finished), )
        return self.summary

    def skip(self) -> bool:
        """Advance without recording a completion.  Returns False on the last exercise."""
        self._ensure_active()
        if self.is_last:
            return False
        logger.debug(f"Session {self.session_id}: skipped '{self.exercises[self.current_index].exercise_id}'")
        self._advance()
        return True

    def pause(self) -> None:
        self._ensure_active()
        if not self.is_paused:
            self.is_paused = True
            self._cancel_timer()

    def resume(self) -> None:
        self._ensure_active()
        if self.is_paused:
            self.is_paused = False
            self._schedule_if_timed()

    def toggle_pause(self) -> bool:
        """Flip the paused state and return the new value."""
        if self.is_paused:
            self.resume()
        else:
            self.pause()
        return self.is_paused

    def close(self) -> None:
        """Stop ticking.  Call when the workout view goes away."""
        self._cancel_timer()

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def _advance(self) -> None:
        self.current_index += 1
        self._restart_timer()

    def _restart_timer(self) -> None:
        self._cancel_timer()
        self.elapsed_seconds = 0
        self._schedule_if_timed()

    def _schedule_if_timed(self) -> None:
        self._cancel_timer()
        exercise = self.current_exercise
        if exercise is not None and exercise.is_timed and not self.is_paused:
            self._handle = self.scheduler.call_later(self.tick_seconds, self._tick)

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self) -> None:
        self._handle = None
        if self.phase is WorkoutPhase.FINISHED or self.is_paused:
            return
        self.elapsed_seconds += 1
        self._schedule_if_timed()

    def _ensure_active(self) -> None:
        if self.phase is WorkoutPhase.FINISHED:
            raise InvalidArgumentError(f"Workout for session {self.session_id} is already finished",
                                       reason="session_finished", session_id=self.session_id)
