"""Application configuration management."""

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Persistence
    store_backend: Literal["database", "api"] = "database"
    database_url: str = "sqlite+aiosqlite:///./lifecycle.db"

    # Remote platform API (store_backend == "api")
    platform_api_base_url: str = "http://localhost:3000/api"
    platform_api_token: str | None = None
    request_timeout: float = Field(default=30.0, gt=0)

    # Notifications
    notification_enabled: bool = True
    notification_url: str | None = Field(
        default=None,
        description="Endpoint receiving application status notifications",
    )

    # Calendar
    calendar_week_start: Literal["sunday", "monday"] = "sunday"

    # Tasks
    default_task_color: str = "#3B82F6"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
