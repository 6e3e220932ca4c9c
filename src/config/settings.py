"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).

It enforces invariants the assistant relies on, such as locking the DB session timezone to UTC so
analytics periods line up with the stored `created_at` timestamps.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str = Field(alias="TELEGRAM_BOT_TOKEN")
    database_url: str = Field(alias="DATABASE_URL")
    db_timezone: str = Field(default="UTC", alias="DB_TIMEZONE")

    intent_log_enabled: bool = Field(default=True, alias="INTENT_LOG_ENABLED")
    confidence_threshold: float = Field(default=0.5, ge=0.0, le=1.0, alias="CONFIDENCE_THRESHOLD")
    default_locale: Literal["en", "hi"] = Field(default="en", alias="DEFAULT_LOCALE")
    admin_user_ids: Annotated[tuple[int, ...], NoDecode] = Field(
        default=(),
        alias="ADMIN_USER_IDS",
    )

    @field_validator("db_timezone")
    @classmethod
    def validate_db_timezone_is_utc(cls, value: str) -> str:
        """Validate that the DB timezone is locked to UTC.

        Intent log timestamps are written and filtered as UTC; any other timezone is rejected at
        startup.
        """

        if value.upper() != "UTC":
            raise ValueError("DB_TIMEZONE must be UTC")
        return "UTC"

    @field_validator("default_locale", mode="before")
    @classmethod
    def normalize_locale(cls, value: object) -> object:
        """Accept `HI`, ` en ` and similar spellings."""

        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("admin_user_ids", mode="before")
    @classmethod
    def parse_admin_user_ids(cls, value: object) -> object:
        """Parse a comma-separated list of Telegram user ids allowed to read `/stats`."""

        if isinstance(value, str):
            return tuple(int(item) for item in value.split(",") if item.strip())
        return value


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        # Raising here is fine: caller can decide how to handle startup errors.
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
