# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.project import DEFAULT_DSL_VERSION


class Settings(BaseSettings):
    """
    Runtime configuration for exporting project settings.

    - Loads .env automatically (non-fatal if missing).
    - Accepts the TEAMCITY_* spellings via AliasChoices.
    """

    # Logging
    LOG_LEVEL: str = "INFO"

    # Output
    SETTINGS_DIR: Path = Field(
        default_factory=lambda: Path.cwd() / "build" / "teamcity",
        validation_alias=AliasChoices("SETTINGS_DIR", "TEAMCITY_SETTINGS_DIR"),
    )
    OVERWRITE_SETTINGS: bool = False

    # TeamCity Kotlin DSL version the settings target
    DSL_VERSION: str = Field(
        default=DEFAULT_DSL_VERSION,
        validation_alias=AliasChoices("DSL_VERSION", "TEAMCITY_DSL_VERSION"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper(cls, v: str) -> str:
        return (v or "INFO").strip().upper()
