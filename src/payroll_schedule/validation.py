"""Config and window checks run before any date is generated."""

from __future__ import annotations

from datetime import date

from payroll_schedule.exceptions import ConfigurationError, InputRangeError
from payroll_schedule.models import DateType, PayrollConfig, PayrollCycle

ALLOWED_DATE_TYPES: dict[PayrollCycle, frozenset[DateType]] = {
    PayrollCycle.WEEKLY: frozenset({DateType.DAY_OF_WEEK}),
    PayrollCycle.FORTNIGHTLY: frozenset({DateType.WEEK_A, DateType.WEEK_B}),
    PayrollCycle.BI_MONTHLY: frozenset(
        {DateType.START_OF_MONTH, DateType.END_OF_MONTH}
    ),
    PayrollCycle.MONTHLY: frozenset(
        {DateType.START_OF_MONTH, DateType.END_OF_MONTH, DateType.FIXED_DATE}
    ),
    PayrollCycle.QUARTERLY: frozenset(
        {DateType.START_OF_MONTH, DateType.END_OF_MONTH, DateType.FIXED_DATE}
    ),
}

# Cycles that may omit date_type
OPTIONAL_DATE_TYPE = frozenset({PayrollCycle.WEEKLY})

WEEKDAY_CYCLES = frozenset({PayrollCycle.WEEKLY, PayrollCycle.FORTNIGHTLY})


def check_cycle_date_type(config: PayrollConfig) -> None:
    """Raise ConfigurationError for unknown cycles or invalid combinations."""
    if not isinstance(config.cycle, PayrollCycle):
        raise ConfigurationError(
            f"Unsupported cycle: {config.cycle!r}", details={"cycle": config.cycle}
        )

    if config.date_type is None:
        if config.cycle in OPTIONAL_DATE_TYPE:
            return
        raise ConfigurationError(
            f"date_type is required for {config.cycle.value} payrolls",
            details={"cycle": config.cycle.value},
        )

    allowed = ALLOWED_DATE_TYPES[config.cycle]
    if config.date_type not in allowed:
        date_type = getattr(config.date_type, "value", config.date_type)
        raise ConfigurationError(
            f"date_type {date_type!r} is not valid for {config.cycle.value} payrolls",
            details={
                "cycle": config.cycle.value,
                "date_type": date_type,
                "allowed": sorted(item.value for item in allowed),
            },
        )


def check_window(start_date: date, end_date: date, max_count: int) -> None:
    """Raise InputRangeError for an inverted window or a non-positive count."""
    if start_date > end_date:
        raise InputRangeError(
            "start_date must be on or before end_date",
            details={
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
        )
    if isinstance(max_count, bool) or not isinstance(max_count, int):
        raise InputRangeError(
            f"max_count must be an integer, got {max_count!r}",
            details={"max_count": max_count},
        )
    if max_count <= 0:
        raise InputRangeError(
            "max_count must be positive", details={"max_count": max_count}
        )


def check_date_value(config: PayrollConfig, *, required: bool = True) -> None:
    """Raise ConfigurationError when ``date_value`` is outside its range.

    Weekday cycles take 1-7 and fixed dates 1-31. With ``required=False`` a
    missing value (None or 0) passes, leaving the generator's default.
    """
    if config.cycle in WEEKDAY_CYCLES:
        low, high, unit = 1, 7, "a weekday"
    elif config.date_type == DateType.FIXED_DATE:
        low, high, unit = 1, 31, "a day"
    else:
        return

    if not required and not config.date_value:
        return
    if config.date_value is None or not low <= config.date_value <= high:
        raise ConfigurationError(
            f"date_value for {config.cycle.value} payrolls must be {unit} {low}-{high}",
            details={"cycle": config.cycle.value, "date_value": config.date_value},
        )


def validate_config(config: PayrollConfig) -> None:
    """Strict validation for callers persisting a payroll config.

    Beyond the combination check this enforces the ``date_value`` ranges
    (1-7 for weekday cycles, 1-31 for fixed dates) and a non-negative lead
    time. The generator itself is more lenient and falls back to defaults
    for a missing ``date_value``.
    """
    check_cycle_date_type(config)

    if config.processing_days_before_eft < 0:
        raise ConfigurationError(
            "processing_days_before_eft cannot be negative",
            details={"processing_days_before_eft": config.processing_days_before_eft},
        )

    check_date_value(config)
