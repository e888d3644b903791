"""Adherence statistics schema (derived, never stored)."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Statistics(BaseModel):
    total_sessions: int = Field(0, ge=0, description="All sessions, finished or not")
    current_streak: int = Field(0, ge=0, description="Consecutive days ending today or yesterday")
    longest_streak: int = Field(0, ge=0)
    completion_rate: int = Field(0, ge=0, le=100, description="Percentage of sessions that were finished")
    last_session_date: Optional[datetime.date] = None
