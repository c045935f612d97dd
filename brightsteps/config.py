"""
Configuration settings for the BrightSteps core.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from brightsteps.review.scheduler import SchedulerConfig


class Settings(BaseSettings):
    """Settings loaded from BRIGHTSTEPS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BRIGHTSTEPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Review Scheduling
    # ========================================
    review_ladder_days: tuple[int, ...] = Field(
        default=(1, 3, 7, 14, 30, 45, 60),
        description="Interval ladder in days, indexed by consecutive-correct streak",
    )
    initial_support_level: Literal[0, 1, 2, 3] = Field(
        default=3,
        description="Support level given to an item on first exposure",
    )

    # ========================================
    # Session Composition
    # ========================================
    due_ratio: float = Field(
        default=0.6,
        description="Share of session slots reserved for due items",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    @field_validator("review_ladder_days")
    @classmethod
    def _check_ladder(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        from brightsteps.review.scheduler import check_ladder_days

        return check_ladder_days(tuple(value))

    @field_validator("due_ratio")
    @classmethod
    def _check_due_ratio(cls, value: float) -> float:
        from brightsteps.review.composer import check_due_ratio

        return check_due_ratio(value)

    def scheduler_config(self) -> SchedulerConfig:
        """Build a scheduler config from these settings."""
        from brightsteps.review.scheduler import SchedulerConfig

        return SchedulerConfig(
            ladder_days=tuple(self.review_ladder_days),
            initial_support_level=self.initial_support_level,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Replace loguru's default sink with the configured stderr/file sinks."""
    settings = settings or get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {name} | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level=settings.log_level, rotation="10 MB")
