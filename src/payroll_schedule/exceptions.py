"""Errors raised by the payroll schedule engine."""

from typing import Any


class PayrollScheduleError(Exception):
    """Base error for schedule generation failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(PayrollScheduleError):
    """Unsupported cycle or an invalid cycle/date-type combination."""


class InputRangeError(PayrollScheduleError):
    """Invalid generation window or date count."""
