"""Validator configuration model using pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validator settings loaded from IDCARD_* environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="IDCARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    area_codes_path: str | None = None
    log_level: str = "INFO"

    @field_validator("area_codes_path")
    @classmethod
    def validate_area_codes_path(cls, value: str | None) -> str | None:
        """Area code override must point at an existing file."""
        if value is None or not value.strip():
            return None
        if not Path(value).is_file():
            msg = f"area_codes_path does not exist: {value}"
            raise ValueError(msg)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value
