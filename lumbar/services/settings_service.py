"""User preference service."""

from typing import Any

from loguru import logger

from lumbar.db.repositories.interfaces import SettingsStore
from lumbar.schemas.user_settings import UserSettings, UserSettingsUpdate, merge_settings


class SettingsService:
    """Load-or-initialise access to the single preference record."""

    def __init__(self, user_settings: SettingsStore):
        self.repository = user_settings

    def get_all(self) -> UserSettings:
        return self.repository.get_all()

    def get(self, key: str) -> Any:
        return self.repository.get(key)

    def set(self, key: str, value: Any) -> UserSettings:
        return self.repository.set(key, value)

    def update(self, data: UserSettingsUpdate) -> UserSettings:
        changes = data.model_dump(exclude_none=True)
        updated = merge_settings(self.repository.get_all(), **changes)
        return self.repository.save_all(updated)

    def reset(self) -> UserSettings:
        logger.info("User settings reset to defaults")
        return self.repository.reset()

    def disabled_exercise_ids(self) -> list[str]:
        return list(self.repository.get_all().disabled_exercises)
