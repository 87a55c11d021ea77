"""Payroll date generation orchestrator.

Walks a cursor through the requested window, asking the cycle generator for
each theoretical pay date, rolling it onto a business day and deriving the
processing date.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime

import structlog

from payroll_schedule.business_days import BusinessDayCalendar, adjust_to_business_day
from payroll_schedule.cycles import next_step
from payroll_schedule.exceptions import ConfigurationError
from payroll_schedule.models import GeneratedPayrollDate, PayrollConfig
from payroll_schedule.processing import calculate_processing_date
from payroll_schedule.validation import (
    check_cycle_date_type,
    check_date_value,
    check_window,
)

logger = structlog.get_logger(__name__)

ADJUSTED_NOTE = "Adjusted for business day"


def _as_date(value: date) -> date:
    # datetime subclasses date but does not compare with it
    if isinstance(value, datetime):
        return value.date()
    return value


def _build_record(
    config: PayrollConfig,
    original: date,
    calendar: BusinessDayCalendar | None,
) -> GeneratedPayrollDate:
    adjusted = adjust_to_business_day(original, config.adjustment_rule, calendar)
    processing = calculate_processing_date(
        adjusted,
        config.processing_days_before_eft,
        config.processing_day_basis,
        calendar,
    )
    return GeneratedPayrollDate(
        original_date=original,
        adjusted_date=adjusted,
        processing_date=processing,
        cycle=config.cycle,
        notes=ADJUSTED_NOTE if original != adjusted else None,
    )


def _walk(
    config: PayrollConfig,
    start_date: date,
    end_date: date,
    max_count: int,
    calendar: BusinessDayCalendar | None,
) -> Iterator[GeneratedPayrollDate]:
    cursor = start_date
    produced = 0
    while cursor <= end_date and produced < max_count:
        step = next_step(config, cursor, continuing=produced > 0)
        if step.original_date > end_date:
            return
        yield _build_record(config, step.original_date, calendar)
        produced += 1
        cursor = step.next_cursor


def iter_payroll_dates(
    config: PayrollConfig,
    start_date: date,
    end_date: date,
    max_count: int,
    *,
    calendar: BusinessDayCalendar | None = None,
) -> Iterator[GeneratedPayrollDate]:
    """Lazily yield pay dates for ``config`` inside ``[start_date, end_date]``.

    Inputs are validated before the iterator is returned, so a bad config
    fails at call time rather than on first iteration.

    Raises:
        ConfigurationError: Unsupported cycle, cycle/date-type combination
            or a ``date_value`` outside its range.
        InputRangeError: ``start_date > end_date`` or ``max_count <= 0``.
    """
    start_date = _as_date(start_date)
    end_date = _as_date(end_date)
    check_window(start_date, end_date, max_count)
    check_cycle_date_type(config)
    check_date_value(config, required=False)
    if config.processing_days_before_eft < 0:
        raise ConfigurationError(
            "processing_days_before_eft cannot be negative",
            details={"processing_days_before_eft": config.processing_days_before_eft},
        )
    return _walk(config, start_date, end_date, max_count, calendar)


def generate_payroll_dates(
    config: PayrollConfig,
    start_date: date,
    end_date: date,
    max_count: int,
    *,
    calendar: BusinessDayCalendar | None = None,
) -> list[GeneratedPayrollDate]:
    """Generate the pay schedule for ``config`` as a list.

    Args:
        config: Payroll schedule configuration.
        start_date: First day of the window (inclusive).
        end_date: Last day of the window (inclusive). No record has an
            original date after it.
        max_count: Upper bound on the number of records. Required so an
            open-ended window can never loop unboundedly.
        calendar: Business-day calendar for adjustment. Defaults to
            weekend-only rolling.

    Returns:
        Records in chronological order of original date.
    """
    dates = list(
        iter_payroll_dates(config, start_date, end_date, max_count, calendar=calendar)
    )
    logger.debug(
        "payroll_dates_generated",
        cycle=config.cycle.value,
        date_type=config.date_type.value if config.date_type else None,
        start_date=start_date.isoformat(),
        end_date=end_date.isoformat(),
        max_count=max_count,
        count=len(dates),
        adjusted=sum(1 for record in dates if record.was_adjusted),
    )
    return dates


# Name used by the scheduling workflow that calls into this package
generate_payroll_dates_pattern = generate_payroll_dates
