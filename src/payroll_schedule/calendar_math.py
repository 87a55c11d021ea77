"""Calendar arithmetic shared by the cycle generators."""

from __future__ import annotations

import calendar
from datetime import date, timedelta


def days_in_month(year: int, month: int) -> int:
    """Return the true length of a month (leap-year aware)."""
    return calendar.monthrange(year, month)[1]


def last_day_of_month(day: date) -> date:
    return day.replace(day=days_in_month(day.year, day.month))


def clamp_day(year: int, month: int, day_of_month: int) -> date:
    """Build a date, clamping the day down to the month length."""
    last_day = days_in_month(year, month)
    return date(year, month, min(max(1, day_of_month), last_day))


def add_months(day: date, months: int) -> date:
    """Shift by whole calendar months without rolling into the next month.

    Jan 31 + 1 month is Feb 28 (or 29), never Mar 2/3.
    """
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    return clamp_day(year, month + 1, day.day)


def first_of_next_month(day: date) -> date:
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def quarter_start_month(month: int) -> int:
    """First month (1-based) of the quarter containing ``month``."""
    return ((month - 1) // 3) * 3 + 1


def iso_weekday(day: date) -> int:
    """Monday=1 .. Sunday=7."""
    return day.isoweekday()


def first_sunday_of_year(year: int) -> date:
    jan1 = date(year, 1, 1)
    # weekday(): Monday=0 .. Sunday=6
    days_to_sunday = (6 - jan1.weekday()) % 7
    return jan1 + timedelta(days=days_to_sunday)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
