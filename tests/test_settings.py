"""Tests for configuration settings and logging setup."""

from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

from payroll_schedule.config.logging import configure_logging, get_logger
from payroll_schedule.config.settings import get_settings
from payroll_schedule.models import AdjustmentRule, ProcessingDayBasis


def test_settings_has_defaults():
    """Test that settings has sensible defaults."""
    settings = get_settings()

    assert settings.default_max_count == 52
    assert settings.adjustment_rule is AdjustmentRule.PREVIOUS
    assert settings.processing_basis is ProcessingDayBasis.CALENDAR
    assert settings.holiday_region == "national"
    assert settings.holiday_file is None
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"


def test_settings_loads_from_env(monkeypatch):
    """Test that settings loads from environment variables."""
    monkeypatch.setenv("PAYROLL_DEFAULT_MAX_COUNT", "24")
    monkeypatch.setenv("PAYROLL_ADJUSTMENT_RULE", "next")
    monkeypatch.setenv("PAYROLL_PROCESSING_BASIS", "business")
    monkeypatch.setenv("PAYROLL_HOLIDAY_REGION", "vic")
    monkeypatch.setenv("PAYROLL_HOLIDAY_FILE", "/tmp/holidays.yaml")
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = get_settings()

    assert settings.default_max_count == 24
    assert settings.adjustment_rule is AdjustmentRule.NEXT
    assert settings.processing_basis is ProcessingDayBasis.BUSINESS
    assert settings.holiday_region == "vic"
    assert settings.holiday_file == Path("/tmp/holidays.yaml")
    assert settings.log_format == "json"


def test_settings_rejects_non_positive_max_count(monkeypatch):
    monkeypatch.setenv("PAYROLL_DEFAULT_MAX_COUNT", "0")

    with pytest.raises(ValidationError):
        get_settings()


def test_settings_are_cached():
    """Test that get_settings returns cached instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2


def test_configure_logging_json():
    """Test that logging can be configured for JSON output."""
    configure_logging(level="DEBUG", format="json")

    logger = get_logger("payroll_schedule.test")
    logger.debug("payroll_test_event", cycle="weekly")

    assert structlog.is_configured()


def test_configure_logging_processor_chain():
    """Test the renderer follows the shared processors."""
    configure_logging(level="INFO", format="console")

    processors = structlog.get_config()["processors"]

    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert not any(
        isinstance(
            processor,
            (
                structlog.stdlib.PositionalArgumentsFormatter,
                structlog.processors.UnicodeDecoder,
            ),
        )
        for processor in processors
    )
