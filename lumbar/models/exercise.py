"""
Exercise database model.

List-valued attributes (muscles, instructions, cues ...) are stored as
JSON columns; the catalog is read-only reference data at runtime.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class Exercise(SQLModel, table=True):
    """A catalog exercise."""

    __tablename__ = "exercises"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(nullable=False, max_length=255)
    description: str = Field(nullable=False)
    category: str = Field(nullable=False, max_length=32, index=True)
    mode: str = Field(nullable=False, max_length=16)

    # Exactly one of these is set, depending on ``mode``
    reps: Optional[int] = Field(default=None)
    duration_seconds: Optional[int] = Field(default=None)

    sets: int = Field(default=1, nullable=False)
    rest_between_sets: int = Field(default=0, nullable=False)

    difficulty: str = Field(default="beginner", max_length=16)
    equipment: str = Field(default="none", max_length=64)
    image_url: Optional[str] = Field(default=None, max_length=500)

    target_muscles: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    instructions: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    form_cues: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    contraindications: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    modifications: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow,
                                          sa_column=Column(DateTime, nullable=False))
