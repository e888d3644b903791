"""
User preference schemas.

A single preference record per installation, created with defaults on
first access.  Reminder times are ``HH:mm`` strings.
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from lumbar.core.config import settings
from lumbar.core.errors import InvalidArgumentError

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class UserSettings(BaseModel):
    notifications_enabled: bool = settings.DEFAULT_NOTIFICATIONS_ENABLED
    morning_time: str = Field(settings.DEFAULT_MORNING_TIME, pattern=_TIME_PATTERN)
    evening_time: str = Field(settings.DEFAULT_EVENING_TIME, pattern=_TIME_PATTERN)
    snooze_minutes: int = Field(settings.DEFAULT_SNOOZE_MINUTES, ge=1, le=120)
    disabled_exercises: list[str] = Field(default_factory=list)


class UserSettingsUpdate(BaseModel):
    """Schema for a partial preference update."""

    notifications_enabled: Optional[bool] = None
    morning_time: Optional[str] = Field(None, pattern=_TIME_PATTERN)
    evening_time: Optional[str] = Field(None, pattern=_TIME_PATTERN)
    snooze_minutes: Optional[int] = Field(None, ge=1, le=120)
    disabled_exercises: Optional[list[str]] = None


def merge_settings(current: UserSettings, **changes) -> UserSettings:
    """Apply *changes* to *current*, re-validating the whole record.

    Raises :class:`InvalidArgumentError` on an unknown key or bad value.
    """
    for key in changes:
        check_setting_key(key)

    data = current.model_dump()
    data.update(changes)
    try:
        return UserSettings(**data)
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid settings: {exc.errors()[0]['msg']}", reason="invalid_setting") from exc


def check_setting_key(key: str) -> None:
    if key not in UserSettings.model_fields:
        raise InvalidArgumentError(f"Unknown setting '{key}'", reason="unknown_setting", key=key)
