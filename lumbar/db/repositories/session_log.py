"""
Session log repository.

Handles database operations for :class:`SessionLog` history.  Lists are
returned most recent first except for date lookups, which follow start
order within the day / range.
"""

import datetime
from typing import Optional

from sqlmodel import select

from lumbar.db.repositories.base import SQLRepository
from lumbar.models.session_log import SessionLog as SessionLogRow
from lumbar.schemas.session_log import ExerciseCompletion, SessionLog


class SessionLogRepository(SQLRepository):
    """Repository for SessionLog database operations."""

    def get_all(self) -> list[SessionLog]:
        statement = select(SessionLogRow).order_by(SessionLogRow.start_time.desc(), SessionLogRow.id.desc())
        with self._storage("get_all"):
            rows = self.session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, session_id: int) -> Optional[SessionLog]:
        with self._storage("get_by_id"):
            row = self.session.get(SessionLogRow, session_id)
        return self._to_domain(row) if row else None

    def get_by_date(self, date: datetime.date) -> list[SessionLog]:
        statement = (select(SessionLogRow).where(SessionLogRow.session_date == date)
                     .order_by(SessionLogRow.start_time))
        with self._storage("get_by_date"):
            rows = self.session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    def get_by_date_range(self, start: datetime.date, end: datetime.date) -> list[SessionLog]:
        statement = (select(SessionLogRow).where(SessionLogRow.session_date >= start,
                                                 SessionLogRow.session_date <= end, )
                     .order_by(SessionLogRow.start_time))
        with self._storage("get_by_date_range"):
            rows = self.session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def save(self, session_log: SessionLog) -> int:
        """Insert *session_log* (its ``id`` is ignored) and return the new id."""
        row = SessionLogRow(routine_id=session_log.routine_id, session_date=session_log.session_date,
                            start_time=session_log.start_time, end_time=session_log.end_time,
                            completions=self._dump_completions(session_log), completed=session_log.completed, )
        with self._storage("save"):
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return row.id

    def update(self, session_log: SessionLog) -> SessionLog:
        with self._storage("update"):
            row = self.session.get(SessionLogRow, session_log.id)
            if row is None:
                return session_log
            row.routine_id = session_log.routine_id
            row.session_date = session_log.session_date
            row.start_time = session_log.start_time
            row.end_time = session_log.end_time
            # Reassign so the JSON column is flagged dirty
            row.completions = self._dump_completions(session_log)
            row.completed = session_log.completed
            row.updated_at = datetime.datetime.utcnow()
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return self._to_domain(row)

    def delete(self, session_id: int) -> bool:
        with self._storage("delete"):
            row = self.session.get(SessionLogRow, session_id)
            if row:
                self.session.delete(row)
                self.session.commit()
                return True
        return False

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _dump_completions(session_log: SessionLog) -> list[dict]:
        return [c.model_dump(mode="json") for c in session_log.completions]

    @staticmethod
    def _to_domain(row: SessionLogRow) -> SessionLog:
        return SessionLog(id=row.id, routine_id=row.routine_id, start_time=row.start_time, end_time=row.end_time,
                          completions=[ExerciseCompletion(**c) for c in row.completions or []],
                          completed=row.completed, )
