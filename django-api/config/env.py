"""
Environment Configuration - Pydantic Settings

Typed, validated view of the environment variables read by config.settings.
Loads from a .env file when present; bad values fail at startup.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    """
    Environment variables for the project.

    Priority: Environment variables > .env file > defaults
    """

    # === Django ===
    DJANGO_SECRET_KEY: str = "dev-only-insecure-key"
    DJANGO_DEBUG: bool = False
    DJANGO_ALLOWED_HOSTS: str = "localhost,127.0.0.1,testserver"

    # === Storage ===
    UPCOMING_EVENTS_DB_PATH: str | None = None

    # === Event list ===
    UPCOMING_EVENTS_RANGE_DAYS: int = Field(default=30, ge=0)

    # === Logging ===
    UPCOMING_EVENTS_LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.DJANGO_ALLOWED_HOSTS.split(",") if host.strip()]
