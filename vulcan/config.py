import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_CONFIG_DIR, LOG_FORMAT

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def normalize_log_level(level: str) -> str:
    """Upper-case a logging level name, rejecting unknown levels."""
    normalized = level.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}"
        )
    return normalized


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VULCAN_",
        env_file=".env",
        extra="ignore",
        validate_assignment=True,
    )

    # Configuration loader
    config_dir: str = Field(
        default=DEFAULT_CONFIG_DIR,
        description="Directory configuration files are loaded from"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("config_dir")
    @classmethod
    def validate_config_dir(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("config_dir cannot be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return normalize_log_level(v)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts embedding the helpers."""
    logging.basicConfig(
        level=normalize_log_level(level or get_settings().log_level),
        format=LOG_FORMAT
    )
