"""Configuration module for payroll schedule generation."""

from payroll_schedule.config.holidays import holiday_calendar, load_holiday_calendar
from payroll_schedule.config.logging import configure_logging, get_logger
from payroll_schedule.config.settings import ScheduleSettings, get_settings

__all__ = [
    "ScheduleSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "holiday_calendar",
    "load_holiday_calendar",
]
