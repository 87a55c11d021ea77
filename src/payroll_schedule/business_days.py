"""Business-day rolling for pay dates."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta

import structlog

from payroll_schedule.calendar_math import is_weekend
from payroll_schedule.exceptions import ConfigurationError
from payroll_schedule.models import AdjustmentRule

logger = structlog.get_logger(__name__)

ONE_DAY = timedelta(days=1)

# A calendar with no business day inside a year is misconfigured
MAX_ROLL_DAYS = 366


@dataclass(frozen=True)
class BusinessDayCalendar:
    """Decides which dates are working days.

    ``is_business_day`` can be any predicate, so holiday sources plug in
    without touching the generators. ``holidays`` is an optional extra set of
    closed dates checked on top of the predicate.
    """

    predicate: Callable[[date], bool] = lambda day: not is_weekend(day)
    holidays: frozenset[date] = field(default_factory=frozenset)
    name: str = "weekend_only"

    def is_business_day(self, day: date) -> bool:
        return day not in self.holidays and self.predicate(day)

    def with_holidays(self, extra: Iterable[date]) -> BusinessDayCalendar:
        """Return a copy that also closes the given dates."""
        return BusinessDayCalendar(
            predicate=self.predicate,
            holidays=self.holidays | frozenset(extra),
            name=self.name,
        )

    def roll(self, day: date, step: timedelta) -> date:
        """Move from ``day`` in ``step`` direction to the first business day."""
        current = day
        for _ in range(MAX_ROLL_DAYS):
            if self.is_business_day(current):
                return current
            current += step
        raise ConfigurationError(
            f"No business day within {MAX_ROLL_DAYS} days of {day.isoformat()}",
            details={"calendar": self.name, "date": day.isoformat()},
        )

    def add_business_days(self, day: date, count: int) -> date:
        """Step ``count`` business days away from ``day`` (negative goes back)."""
        step = ONE_DAY if count >= 0 else -ONE_DAY
        current = day
        remaining = abs(count)
        while remaining:
            current = self.roll(current + step, step)
            remaining -= 1
        return current


WEEKEND_ONLY = BusinessDayCalendar()


def weekend_only() -> BusinessDayCalendar:
    """Calendar that treats Saturday and Sunday as the only closed days."""
    return WEEKEND_ONLY


def adjust_to_business_day(
    day: date,
    rule: AdjustmentRule | str = AdjustmentRule.PREVIOUS,
    calendar: BusinessDayCalendar | None = None,
) -> date:
    """Roll ``day`` onto a business day following ``rule``.

    With the default weekend-only calendar a Saturday moves to Friday
    (previous) or Monday (next), and a Sunday to Friday or Monday likewise.
    Business days pass through unchanged.
    """
    cal = calendar or WEEKEND_ONLY
    if cal.is_business_day(day):
        return day

    try:
        rule = AdjustmentRule(rule)
    except ValueError as exc:
        raise ConfigurationError(
            f"Unsupported adjustment rule: {rule!r}", details={"rule": rule}
        ) from exc

    if rule == AdjustmentRule.PREVIOUS:
        adjusted = cal.roll(day, -ONE_DAY)
    elif rule == AdjustmentRule.NEXT:
        adjusted = cal.roll(day, ONE_DAY)
    else:
        earlier = cal.roll(day, -ONE_DAY)
        later = cal.roll(day, ONE_DAY)
        # Ties go to the earlier date
        adjusted = earlier if (day - earlier) <= (later - day) else later

    logger.debug(
        "payroll_date_adjusted",
        original=day.isoformat(),
        adjusted=adjusted.isoformat(),
        rule=rule.value,
        calendar=cal.name,
    )
    return adjusted
