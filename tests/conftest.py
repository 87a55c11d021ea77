"""Pytest configuration and fixtures."""

import pytest

from payroll_schedule.config.holidays import load_holiday_calendar
from payroll_schedule.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_cached_config(monkeypatch):
    """Isolate tests from the host environment and cached loaders."""
    for name in (
        "PAYROLL_DEFAULT_MAX_COUNT",
        "PAYROLL_ADJUSTMENT_RULE",
        "PAYROLL_PROCESSING_BASIS",
        "PAYROLL_HOLIDAY_REGION",
        "PAYROLL_HOLIDAY_FILE",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    load_holiday_calendar.cache_clear()
    yield
    get_settings.cache_clear()
    load_holiday_calendar.cache_clear()


@pytest.fixture
def holidays_yaml(tmp_path):
    """Write a small holiday file and return its path."""
    path = tmp_path / "holidays.yaml"
    path.write_text(
        """
holidays:
  - name: New Year's Day
    date_rule: "01-01"
  - name: Good Friday
    date: 2024-03-29
  - name: King's Birthday
    date_rule: second_monday_june
    regions: [nsw]
  - name: Melbourne Cup
    date_rule: first_tuesday_november
    regions: vic
""",
        encoding="utf-8",
    )
    return path
