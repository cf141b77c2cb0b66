"""
Scheduling configuration using Pydantic Settings.

Every constant can be overridden through environment variables prefixed
with AGENDA_ (e.g. AGENDA_DAILY_TASK_THRESHOLD=6) or a local .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchedulingSettings(BaseSettings):
    """Scheduling constants loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AGENDA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Slot search
    # ===========================================
    SNAP_MINUTES: int = Field(15, ge=1, le=60)
    SEARCH_STEP_MINUTES: int = Field(15, ge=1)
    SEARCH_HORIZON_HOURS: int = Field(24, ge=1)

    # ===========================================
    # Week reorganization
    # ===========================================
    # Moves of this size or smaller are not reported as changes
    MOVE_TOLERANCE_MINUTES: int = Field(15, ge=0)

    # ===========================================
    # Task rebalancing
    # ===========================================
    DAILY_TASK_THRESHOLD: int = Field(5, ge=1)
    REBALANCE_HOUR: int = Field(9, ge=0, le=23)

    # ===========================================
    # Task load / derived priority
    # ===========================================
    DAILY_HOURS_LIMIT: float = Field(8.0, gt=0)
    DEFAULT_TASK_HOURS: float = Field(1.0, gt=0)
    HIGH_PRIORITY_WITHIN_HOURS: int = 24
    MEDIUM_PRIORITY_WITHIN_HOURS: int = 72

    # ===========================================
    # Logging
    # ===========================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache()
def get_settings() -> SchedulingSettings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return SchedulingSettings()
