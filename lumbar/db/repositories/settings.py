"""
User preference repository.

Key-value backed: each :class:`UserSettings` field is one row.  The
first read seeds the defaults.
"""

import datetime
from typing import Any

from sqlmodel import select

from lumbar.db.repositories.base import SQLRepository
from lumbar.models.app_setting import AppSetting
from lumbar.schemas.user_settings import UserSettings, check_setting_key, merge_settings


class SettingsRepository(SQLRepository):
    """Repository for the single user preference record."""

    def get_all(self) -> UserSettings:
        with self._storage("get_all"):
            rows = self.session.exec(select(AppSetting)).all()
        if not rows:
            return self.save_all(UserSettings())
        stored = {row.key: row.value for row in rows if row.key in UserSettings.model_fields}
        return merge_settings(UserSettings(), **stored)

    def get(self, key: str) -> Any:
        check_setting_key(key)
        return getattr(self.get_all(), key)

    def set(self, key: str, value: Any) -> UserSettings:
        return self.save_all(merge_settings(self.get_all(), **{key: value}))

    def save_all(self, user_settings: UserSettings) -> UserSettings:
        now = datetime.datetime.utcnow()
        with self._storage("save_all"):
            for key, value in user_settings.model_dump(mode="json").items():
                row = self.session.get(AppSetting, key)
                if row is None:
                    row = AppSetting(key=key)
                row.value = value
                row.updated_at = now
                self.session.add(row)
            self.session.commit()
        return user_settings

    def reset(self) -> UserSettings:
        return self.save_all(UserSettings())
