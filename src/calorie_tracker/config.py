"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_tracker.services.validation import MAX_HISTORY_DAYS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    timezone: str = "UTC"
    log_level: str = "INFO"
    max_history_days: int = Field(default=MAX_HISTORY_DAYS, ge=1, le=MAX_HISTORY_DAYS)

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
