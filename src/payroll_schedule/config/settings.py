"""Configuration settings for payroll schedule generation."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from payroll_schedule.models import AdjustmentRule, ProcessingDayBasis


class ScheduleSettings(BaseSettings):
    """Defaults applied when a caller does not say otherwise."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generation
    default_max_count: int = Field(
        default=52, gt=0, validation_alias="PAYROLL_DEFAULT_MAX_COUNT"
    )
    adjustment_rule: AdjustmentRule = Field(
        default=AdjustmentRule.PREVIOUS, validation_alias="PAYROLL_ADJUSTMENT_RULE"
    )
    processing_basis: ProcessingDayBasis = Field(
        default=ProcessingDayBasis.CALENDAR,
        validation_alias="PAYROLL_PROCESSING_BASIS",
    )

    # Holiday calendar
    holiday_region: str = Field(
        default="national", validation_alias="PAYROLL_HOLIDAY_REGION"
    )
    holiday_file: Path | None = Field(
        default=None, validation_alias="PAYROLL_HOLIDAY_FILE"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", validation_alias="LOG_FORMAT"
    )


@lru_cache
def get_settings() -> ScheduleSettings:
    """Get cached settings instance."""
    return ScheduleSettings()
