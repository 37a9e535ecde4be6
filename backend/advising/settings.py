"""Runtime configuration for the advising tool."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdvisingSettings(BaseSettings):
    """Environment-aware settings for the advising CLI."""

    catalog_path: str | None = Field(
        default=None, description="Course catalog file loaded when no --catalog option is given."
    )
    source_encoding: str = Field(
        default="utf-8", description="Text encoding used when reading catalog files."
    )
    log_level: str = Field(
        default="WARNING", description="Logging level configured by the console entry point."
    )

    model_config = SettingsConfigDict(
        env_prefix="ABCU_ADVISING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
