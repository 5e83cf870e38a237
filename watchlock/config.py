"""
Typed settings for the WatchLock position core.

Uses Pydantic Settings to load configuration from environment variables
with validation and type safety. Nothing in the codecs reads these values
implicitly: callers pass the relevant setting (display timezone, message
length limit) into the function that needs it.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .validate_env import validate_env, validate_environment_value, validate_timezone_name

DEFAULT_DISPLAY_TIMEZONE = "America/Indiana/Indianapolis"


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults for local development."""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="allow",
    )

    environment: str = Field("development", alias="ENVIRONMENT")
    log_level: str | None = Field(None, alias="LOG_LEVEL")
    display_timezone: str = Field(DEFAULT_DISPLAY_TIMEZONE, alias="WATCHLOCK_DISPLAY_TIMEZONE")
    message_max_length: int = Field(280, alias="WATCHLOCK_MESSAGE_MAX_LENGTH", ge=1)

    @field_validator("environment")
    @classmethod
    def _check_environment(cls, v: str) -> str:
        v = v.strip().lower()
        validate_environment_value(v)
        return v

    @field_validator("display_timezone")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        v = v.strip()
        validate_timezone_name("WATCHLOCK_DISPLAY_TIMEZONE", v)
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Settings are cached to avoid re-parsing environment variables
    on every access.
    """
    validate_env()
    return Settings()


settings = get_settings()
