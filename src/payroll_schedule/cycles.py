"""Per-cycle pay date generators.

Each generator takes the current cursor and the payroll config and returns a
``CycleStep``: the theoretical (unadjusted) pay date plus the cursor to use
for the following call. Generators never look at the wall clock.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta

from payroll_schedule.calendar_math import (
    add_months,
    clamp_day,
    first_of_next_month,
    first_sunday_of_year,
    iso_weekday,
    last_day_of_month,
    quarter_start_month,
)
from payroll_schedule.models import (
    CycleStep,
    DateType,
    PayrollConfig,
    PayrollCycle,
    WeekParity,
)

DEFAULT_WEEKDAY = 5  # Friday
DEFAULT_FIXED_DAY = 15

ONE_WEEK = timedelta(days=7)
ONE_FORTNIGHT = timedelta(days=14)

CycleGenerator = Callable[[date, PayrollConfig], CycleStep]


def _target_weekday(config: PayrollConfig) -> int:
    return config.date_value or DEFAULT_WEEKDAY


def _target_day_of_month(config: PayrollConfig) -> int:
    return config.date_value or DEFAULT_FIXED_DAY


def next_weekday_on_or_after(cursor: date, weekday: int) -> date:
    """Return the first ``weekday`` (Monday=1..Sunday=7) on or after ``cursor``."""
    days_to_add = (weekday - iso_weekday(cursor) + 7) % 7
    return cursor + timedelta(days=days_to_add)


def week_parity_of(day: date) -> WeekParity:
    """Week A/B label for a date, derived from the date's own calendar year.

    Weeks run Sunday to Saturday; the week starting on the first Sunday of
    the year is Week A. Days in January before that Sunday belong to week
    -1, which is Week B.
    """
    weeks_since_first_sunday = (day - first_sunday_of_year(day.year)).days // 7
    return WeekParity.A if weeks_since_first_sunday % 2 == 0 else WeekParity.B


def _split_day(year: int, month: int) -> date:
    # February always splits on the 14th, leap year or not
    return date(year, month, 14 if month == 2 else 15)


def weekly_date(cursor: date, config: PayrollConfig) -> CycleStep:
    original = next_weekday_on_or_after(cursor, _target_weekday(config))
    return CycleStep(original_date=original, next_cursor=cursor + ONE_WEEK)


def fortnightly_date(
    cursor: date, config: PayrollConfig, *, align: bool = True
) -> CycleStep:
    """Next fortnightly pay date.

    With ``align`` the candidate is pushed one week forward when its week
    parity does not match the configured Week A/B. Continuation calls pass
    ``align=False`` so the cadence stays exactly 14 days across years whose
    parity restarts mid-fortnight.
    """
    candidate = next_weekday_on_or_after(cursor, _target_weekday(config))
    if align:
        wanted = WeekParity.B if config.date_type == DateType.WEEK_B else WeekParity.A
        if week_parity_of(candidate) != wanted:
            candidate += ONE_WEEK
    return CycleStep(original_date=candidate, next_cursor=candidate + ONE_FORTNIGHT)


def bi_monthly_date(cursor: date, config: PayrollConfig) -> CycleStep:
    """Two pay dates per month: 1st/15th (SOM) or 15th/last day (EOM)."""
    first = cursor.replace(day=1)
    split = _split_day(cursor.year, cursor.month)
    next_first = first_of_next_month(cursor)
    next_split = _split_day(next_first.year, next_first.month)

    if config.date_type == DateType.START_OF_MONTH:
        if cursor <= first:
            return CycleStep(original_date=first, next_cursor=split)
        if cursor <= split:
            return CycleStep(original_date=split, next_cursor=next_first)
        return CycleStep(original_date=next_first, next_cursor=next_split)

    last_day = last_day_of_month(cursor)
    if cursor <= split:
        return CycleStep(original_date=split, next_cursor=last_day)
    return CycleStep(original_date=last_day, next_cursor=next_split)


def monthly_date(cursor: date, config: PayrollConfig) -> CycleStep:
    if config.date_type == DateType.START_OF_MONTH:
        original = cursor.replace(day=1)
    elif config.date_type == DateType.END_OF_MONTH:
        original = last_day_of_month(cursor)
    else:
        original = clamp_day(cursor.year, cursor.month, _target_day_of_month(config))
    return CycleStep(original_date=original, next_cursor=add_months(cursor, 1))


def quarterly_date(cursor: date, config: PayrollConfig) -> CycleStep:
    start_month = quarter_start_month(cursor.month)
    if config.date_type == DateType.START_OF_MONTH:
        original = date(cursor.year, start_month, 1)
    elif config.date_type == DateType.END_OF_MONTH:
        original = last_day_of_month(date(cursor.year, start_month + 2, 1))
    else:
        # Fixed dates land in the middle month: Feb, May, Aug, Nov
        original = clamp_day(
            cursor.year, start_month + 1, _target_day_of_month(config)
        )
    return CycleStep(original_date=original, next_cursor=add_months(cursor, 3))


CYCLE_GENERATORS: dict[PayrollCycle, CycleGenerator] = {
    PayrollCycle.WEEKLY: weekly_date,
    PayrollCycle.FORTNIGHTLY: fortnightly_date,
    PayrollCycle.BI_MONTHLY: bi_monthly_date,
    PayrollCycle.MONTHLY: monthly_date,
    PayrollCycle.QUARTERLY: quarterly_date,
}

_unmapped = set(PayrollCycle) - set(CYCLE_GENERATORS)
if _unmapped:
    raise RuntimeError(f"No generator registered for cycles: {sorted(_unmapped)}")


def next_step(
    config: PayrollConfig, cursor: date, *, continuing: bool = False
) -> CycleStep:
    """Dispatch to the generator for ``config.cycle``.

    ``continuing`` marks every call after the first in a run.
    """
    if config.cycle == PayrollCycle.FORTNIGHTLY:
        return fortnightly_date(cursor, config, align=not continuing)
    return CYCLE_GENERATORS[config.cycle](cursor, config)
