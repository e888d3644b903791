"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Lumbar Routines"
    VERSION: str = "0.1.0"

    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./lumbar.db"
    SEED_ON_STARTUP: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Defaults for the user preference record
    DEFAULT_MORNING_TIME: str = "07:00"
    DEFAULT_EVENING_TIME: str = "17:00"
    DEFAULT_SNOOZE_MINUTES: int = 10
    DEFAULT_NOTIFICATIONS_ENABLED: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
