"""
Central configuration for the Live Scoreboard.
Uses pydantic-settings for env-based config with validation.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.models.enums import DuplicateStartPolicy, Environment


class Settings(BaseSettings):
    """Root settings for the scoreboard library and its owners."""

    model_config = SettingsConfigDict(
        env_prefix="SB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── General ──────────────────────────────────────────────
    environment: Environment = Environment.DEV
    log_level: str = "INFO"

    # ── Registry ─────────────────────────────────────────────
    duplicate_start: DuplicateStartPolicy = Field(
        default=DuplicateStartPolicy.REJECT,
        description="reject: raise DuplicateMatch; overwrite: replace the active match with a fresh one",
    )

    # ── Observability ────────────────────────────────────────
    metrics_enabled: bool = True

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("environment", "duplicate_start", mode="before")
    @classmethod
    def _lower_enum_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton access to validated settings."""
    return Settings()
