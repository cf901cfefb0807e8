"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file). The settings hold the defaults the command line applies when a flag is omitted.
"""

from __future__ import annotations

import logging

from dateparser.languages.loader import LocaleDataLoader
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    allow_equal_intervals: bool = Field(default=False, alias="ALLOW_EQUAL_INTERVALS")
    relative_languages: list[str] = Field(
        default_factory=lambda: ["en"],
        alias="RELATIVE_LANGUAGES",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is one of the standard `logging` level names."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return level

    @field_validator("relative_languages")
    @classmethod
    def validate_relative_languages(cls, value: list[str]) -> list[str]:
        """Validate the relative-expression languages against dateparser's known languages."""

        languages = [lang.strip() for lang in value if lang.strip()]
        if not languages:
            raise ValueError("RELATIVE_LANGUAGES must contain at least one language code")
        try:
            LocaleDataLoader().get_locale_map(languages=languages)
        except ValueError as exc:
            raise ValueError(f"RELATIVE_LANGUAGES is not supported: {exc}") from exc
        return languages


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
