"""Human-readable descriptions of payroll schedules."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any

from payroll_schedule.cycles import week_parity_of
from payroll_schedule.models import DateType, PayrollConfig, PayrollCycle, WeekParity

CYCLE_LABELS: dict[PayrollCycle, str] = {
    PayrollCycle.WEEKLY: "Weekly",
    PayrollCycle.FORTNIGHTLY: "Fortnightly",
    PayrollCycle.BI_MONTHLY: "Bi-Monthly",
    PayrollCycle.MONTHLY: "Monthly",
    PayrollCycle.QUARTERLY: "Quarterly",
}

DATE_TYPE_LABELS: dict[DateType, str] = {
    DateType.DAY_OF_WEEK: "Day of Week",
    DateType.START_OF_MONTH: "Start of Month",
    DateType.END_OF_MONTH: "End of Month",
    DateType.FIXED_DATE: "Fixed Date",
    DateType.WEEK_A: "Week A",
    DateType.WEEK_B: "Week B",
}

WEEKDAY_LABELS: dict[int, str] = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}


def ordinal_suffix(number: int) -> str:
    """Return "st", "nd", "rd" or "th" for ``number``."""
    if number % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def ordinal(number: int) -> str:
    return f"{number}{ordinal_suffix(number)}"


def date_type_label(config: PayrollConfig) -> str:
    if config.date_type is None:
        if config.cycle in (PayrollCycle.WEEKLY, PayrollCycle.FORTNIGHTLY):
            return DATE_TYPE_LABELS[DateType.DAY_OF_WEEK]
        return "Not set"
    return DATE_TYPE_LABELS[config.date_type]


def _weekday_text(date_value: int | None) -> str:
    if not date_value:
        return "Day not selected"
    return WEEKDAY_LABELS.get(date_value, f"Day {date_value}")


def schedule_summary(config: PayrollConfig) -> str:
    """One-line summary, e.g. ``"Monthly - 15th of the Month"``."""
    cycle_name = CYCLE_LABELS[config.cycle]

    if config.cycle == PayrollCycle.WEEKLY:
        return f"{cycle_name} - {_weekday_text(config.date_value)}"

    if config.cycle == PayrollCycle.FORTNIGHTLY:
        week = "B" if config.date_type == DateType.WEEK_B else "A"
        return f"{cycle_name} - Week {week} - {_weekday_text(config.date_value)}"

    if config.cycle == PayrollCycle.BI_MONTHLY:
        if config.date_type == DateType.START_OF_MONTH:
            return f"{cycle_name} - 1st and 15th of the Month"
        if config.date_type == DateType.END_OF_MONTH:
            return f"{cycle_name} - 15th and last day of the Month"
        return f"{cycle_name} - {date_type_label(config)}"

    if config.date_type == DateType.FIXED_DATE:
        if config.date_value:
            return f"{cycle_name} - {ordinal(config.date_value)} of the Month"
        return f"{cycle_name} - Day not selected"
    if config.date_type == DateType.START_OF_MONTH:
        return f"{cycle_name} - Start of the Month"
    if config.date_type == DateType.END_OF_MONTH:
        return f"{cycle_name} - End of the Month"
    return f"{cycle_name} - {date_type_label(config)}"


def _short(day: date) -> str:
    return f"{day.day} {day.strftime('%b')}"


def fortnightly_week_options(reference_date: date) -> list[dict[str, Any]]:
    """Week A/B choices relative to the week containing ``reference_date``.

    The current week is listed first. Labels read like
    ``"Week A (Current: 7 Jan - 13 Jan)"``.
    """
    this_sunday = reference_date - timedelta(days=(reference_date.weekday() + 1) % 7)
    next_sunday = this_sunday + timedelta(days=7)
    current_label = f"{_short(this_sunday)} - {_short(this_sunday + timedelta(days=6))}"
    next_label = f"{_short(next_sunday)} - {_short(next_sunday + timedelta(days=6))}"

    current = week_parity_of(reference_date)
    other = WeekParity.B if current == WeekParity.A else WeekParity.A
    return [
        {
            "value": current.value,
            "label": f"Week {current.value} (Current: {current_label})",
            "description": "This week",
        },
        {
            "value": other.value,
            "label": f"Week {other.value} (Next: {next_label})",
            "description": "Next week",
        },
    ]
