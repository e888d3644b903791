"""
Session log database model.

Stores one workout attempt.  ``session_date`` duplicates the local
calendar date of ``start_time`` so that per-day and date-range lookups
stay index-only.  Exercise completions are stored as a JSON list keyed
by exercise id.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class SessionLog(SQLModel, table=True):
    """A single guided workout attempt."""

    __tablename__ = "session_logs"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Not a foreign key: history survives deletion of a custom routine
    routine_id: int = Field(nullable=False, index=True)

    session_date: datetime.date = Field(nullable=False, index=True)
    # Naive local wall-clock time; session_date is derived from it
    start_time: datetime.datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_time: Optional[datetime.datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))

    completions: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    completed: bool = Field(default=False, nullable=False, index=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow,
                                          sa_column=Column(DateTime, nullable=False))
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow,
                                          sa_column=Column(DateTime, nullable=False))
