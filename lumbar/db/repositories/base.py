"""Shared helpers for the SQL repositories."""

from contextlib import contextmanager
from typing import Iterator

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from lumbar.core.errors import StorageFailureError


class SQLRepository:
    """Base class holding the unit-of-work session."""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _storage(self, operation: str) -> Iterator[None]:
        """Wrap store errors into :class:`StorageFailureError`.

        The unit of work is rolled back; the failure is never retried.
        """
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"{type(self).__name__}.{operation} failed: {exc}")
            raise StorageFailureError(f"Storage failure during {operation}", reason="storage") from exc
