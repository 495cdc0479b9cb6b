"""
Configuration management for Talent Compass.

Environment-driven settings built on Pydantic's `BaseSettings`. The CLI,
services and report builders read limits and defaults from the shared
`settings` instance.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    # General application settings
    APP_TITLE: str = "Talent Compass"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", pattern=r"^(development|staging|production)$")
    LOG_LEVEL: str = Field("INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # Record sources / outputs
    SNAPSHOT_PATH: Optional[Path] = None
    EXPORT_DIR: Path = Field(default_factory=lambda: Path("exports"))

    # Report sizing
    TOP_PERFORMERS_LIMIT: PositiveInt = 5
    RETENTION_SPOTLIGHT_LIMIT: PositiveInt = 4
    GRID_PREVIEW_NAMES: int = Field(2, ge=0)
    RECENT_ASSESSMENTS_LIMIT: PositiveInt = 10

    # Employee intake defaults
    EMPLOYEE_ID_PREFIX: str = "E"
    DEFAULT_JOB_CATEGORY: str = "Management"
    DEFAULT_LAST_3_YEARS_PERFORMANCE: int = Field(3, ge=1, le=3)

    # Organisational sections (directions) a user may be restricted to
    SECTIONS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["Operations", "Finance", "HR", "Sales & Marketing", "IT"]
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @field_validator("SECTIONS", mode="before")
    def _split_sections(cls, value: str | List[str]) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value or []

    @field_validator("LOG_LEVEL", mode="before")
    def _upper_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


settings = get_settings()
