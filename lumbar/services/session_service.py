"""
Session service.

Owns the lifecycle of a workout session::

    created ──record_completion──▶ in progress ──finish──▶ finished

* ``start`` is the only way to create a session.
* ``record_completion`` upserts one completion per exercise id
  (last write wins) and accepts any exercise id.
* ``finish`` is idempotent: a finished session is returned unchanged.
* Finished sessions are never mutated again, only deleted.

Sessions that are started and never finished stay in history and count
towards the completion-rate denominator.
"""

import datetime
from typing import Callable, Optional

from loguru import logger
from pydantic import ValidationError

from lumbar.adherence.statistics import compute_statistics, round_half_up
from lumbar.core.errors import InvalidArgumentError, NotFoundError
from lumbar.db.repositories.interfaces import SessionStore
from lumbar.schemas.session_log import ExerciseCompletion, SessionLog, SessionLogResponse
from lumbar.schemas.statistics import Statistics
from lumbar.services.routine_service import RoutineService

Clock = Callable[[], datetime.datetime]


class SessionService:
    """Service for workout session business logic."""

    def __init__(self, sessions: SessionStore, routines: RoutineService, clock: Optional[Clock] = None):
        self.repository = sessions
        self.routines = routines
        # Local wall-clock time: calendar dates are derived from it
        self.clock: Clock = clock or datetime.datetime.now

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, routine_id: int) -> int:
        """Start a session for *routine_id* and return its id.

        Raises:
            NotFoundError: If the routine does not exist
            InvalidArgumentError: If the routine resolves to no exercises
        """
        exercises = self.routines.resolve_exercises(routine_id)
        if not exercises:
            raise InvalidArgumentError(f"Routine {routine_id} has no available exercises", reason="routine_empty",
                                       routine_id=routine_id)

        session_id = self.repository.save(SessionLog(routine_id=routine_id, start_time=self.clock()))
        logger.info(f"Started session {session_id} for routine {routine_id} ({len(exercises)} exercises)")
        return session_id

    def record_completion(self, session_id: int, exercise_id: str, actual_reps: Optional[int] = None,
                          actual_duration: Optional[int] = None, ) -> SessionLog:
        """Mark *exercise_id* complete within the session.

        Raises:
            NotFoundError: If the session does not exist
            InvalidArgumentError: If the session is already finished or a
                measured value is negative
        """
        session_log = self.get_or_raise(session_id)
        if session_log.completed:
            raise InvalidArgumentError(f"Session {session_id} is already finished", reason="session_finished",
                                       session_id=session_id)

        try:
            completion = ExerciseCompletion(exercise_id=exercise_id, completed=True, actual_reps=actual_reps,
                                            actual_duration=actual_duration)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid completion: {exc.errors()[0]['msg']}", reason="invalid_completion",
                                       session_id=session_id, exercise_id=exercise_id) from exc
        updated = self.repository.update(session_log.with_completion(completion))
        logger.debug(f"Session {session_id}: recorded completion of '{exercise_id}'")
        return updated

    def finish(self, session_id: int) -> SessionLog:
        """Finish the session, stamping the end time.

        Raises:
            NotFoundError: If the session does not exist
        """
        session_log = self.get_or_raise(session_id)
        if session_log.completed:
            logger.debug(f"Session {session_id} already finished")
            return session_log

        end_time = max(self.clock(), session_log.start_time)
        finished = self.repository.update(session_log.model_copy(update={"end_time": end_time, "completed": True}))
        logger.info(f"Finished session {session_id} ({len(finished.completions)} exercises completed, "
                    f"{self.duration_minutes(finished)} min)")
        return finished

    def delete(self, session_id: int) -> bool:
        """Remove a session from history.  Returns False if it did not exist."""
        deleted = self.repository.delete(session_id)
        if deleted:
            logger.info(f"Deleted session {session_id}")
        return deleted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_or_raise(self, session_id: int) -> SessionLog:
        session_log = self.repository.get_by_id(session_id)
        if session_log is None:
            raise NotFoundError(f"Session {session_id} not found", reason="session_not_found",
                                session_id=session_id)
        return session_log

    def history(self, limit: Optional[int] = None) -> list[SessionLog]:
        """All sessions, most recent first."""
        sessions = self.repository.get_all()
        return sessions[:limit] if limit else sessions

    def sessions_for_date(self, date: datetime.date) -> list[SessionLog]:
        return self.repository.get_by_date(date)

    def sessions_for_range(self, start: datetime.date, end: datetime.date) -> list[SessionLog]:
        if end < start:
            raise InvalidArgumentError("Range end precedes range start", reason="invalid_range")
        return self.repository.get_by_date_range(start, end)

    def has_completed_today(self) -> bool:
        """True if any session started today has been finished."""
        today = self.clock().date()
        return any(s.completed for s in self.repository.get_by_date(today))

    def statistics(self) -> Statistics:
        return compute_statistics(self.repository.get_all(), today=self.clock().date())

    @staticmethod
    def duration_minutes(session_log: SessionLog) -> int:
        """Elapsed minutes, rounded to nearest; 0 while in progress."""
        if session_log.end_time is None:
            return 0
        elapsed = (session_log.end_time - session_log.start_time).total_seconds()
        return round_half_up(elapsed / 60)

    def to_response(self, session_log: SessionLog) -> SessionLogResponse:
        return SessionLogResponse(id=session_log.id, routine_id=session_log.routine_id,
                                  session_date=session_log.session_date, start_time=session_log.start_time,
                                  end_time=session_log.end_time, completions=list(session_log.completions),
                                  completed=session_log.completed,
                                  duration_minutes=self.duration_minutes(session_log), )
