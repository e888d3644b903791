"""Routine repository."""

import datetime
from typing import Optional

from sqlmodel import select

from lumbar.db.repositories.base import SQLRepository
from lumbar.models.routine import Routine as RoutineRow
from lumbar.schemas.routine import Routine, RoutineKind


class RoutineRepository(SQLRepository):
    """Repository for Routine database operations."""

    def get_all(self) -> list[Routine]:
        with self._storage("get_all"):
            rows = self.session.exec(select(RoutineRow).order_by(RoutineRow.id)).all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, routine_id: int) -> Optional[Routine]:
        with self._storage("get_by_id"):
            row = self.session.get(RoutineRow, routine_id)
        return self._to_domain(row) if row else None

    def get_by_kind(self, kind: RoutineKind) -> Optional[Routine]:
        """Return the first routine of *kind*.

        Assumes at most one ``morning`` and one ``evening`` routine exist.
        """
        statement = select(RoutineRow).where(RoutineRow.kind == RoutineKind(kind).value).order_by(RoutineRow.id)
        with self._storage("get_by_kind"):
            row = self.session.exec(statement).first()
        return self._to_domain(row) if row else None

    def save(self, routine: Routine) -> Routine:
        """Insert *routine*; the store assigns a new id."""
        row = RoutineRow(name=routine.name, kind=routine.kind.value, exercise_ids=list(routine.exercise_ids))
        with self._storage("save"):
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return self._to_domain(row)

    def update(self, routine: Routine) -> Routine:
        with self._storage("update"):
            row = self.session.get(RoutineRow, routine.id)
            if row is None:
                return routine
            row.name = routine.name
            row.kind = routine.kind.value
            row.exercise_ids = list(routine.exercise_ids)
            row.updated_at = datetime.datetime.utcnow()
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return self._to_domain(row)

    def delete(self, routine_id: int) -> bool:
        with self._storage("delete"):
            row = self.session.get(RoutineRow, routine_id)
            if row:
                self.session.delete(row)
                self.session.commit()
                return True
        return False

    @staticmethod
    def _to_domain(row: RoutineRow) -> Routine:
        return Routine(id=row.id, name=row.name, kind=RoutineKind(row.kind),
                       exercise_ids=[str(i) for i in row.exercise_ids or []])
