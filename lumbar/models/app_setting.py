"""
Key-value preference storage.

One row per preference key; values are JSON so booleans, strings and
lists round-trip without per-key columns.
"""

import datetime
from typing import Any

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class AppSetting(SQLModel, table=True):
    __tablename__ = "app_settings"

    key: str = Field(primary_key=True, max_length=64)
    value: Any = Field(default=None, sa_column=Column(JSON, nullable=True))

    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow,
                                          sa_column=Column(DateTime, nullable=False))
