"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

from lumbar.models.exercise import Exercise  # noqa: F401
from lumbar.models.routine import Routine  # noqa: F401
from lumbar.models.session_log import SessionLog  # noqa: F401
from lumbar.models.app_setting import AppSetting  # noqa: F401
