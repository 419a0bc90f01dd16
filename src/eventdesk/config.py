"""Application settings, loaded from the environment and ``.env``."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EVENTDESK_",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    DATABASE_URL: str = "sqlite:///data/eventdesk.db"
    API_BASE_URL: str = "http://127.0.0.1:8000"

    # Dashboard windows, in days
    UPCOMING_WINDOW_DAYS: int = Field(default=30, ge=1)
    RSVP_WINDOW_DAYS: int = Field(default=7, ge=1)
    ACTIVITY_WINDOW_DAYS: int = Field(default=30, ge=1)

    LOG_LEVEL: str = "INFO"


settings = Settings()
