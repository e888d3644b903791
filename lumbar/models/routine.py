"""Routine database model."""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class Routine(SQLModel, table=True):
    """An ordered list of exercise ids.

    ``kind`` is ``morning``, ``evening`` or ``custom``; at most one
    routine of each default kind is expected.
    """

    __tablename__ = "routines"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    kind: str = Field(nullable=False, max_length=16, index=True)

    # Order matters: this is the order the guided workout walks through
    exercise_ids: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow,
                                          sa_column=Column(DateTime, nullable=False))
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow,
                                          sa_column=Column(DateTime, nullable=False))
