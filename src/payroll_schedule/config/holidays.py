"""Public holiday calendar loader."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
import yaml  # type: ignore[import-untyped]
from dateutil.easter import easter

from payroll_schedule.business_days import BusinessDayCalendar
from payroll_schedule.calendar_math import is_weekend

logger = structlog.get_logger(__name__)

DEFAULT_HOLIDAY_FILE = Path(__file__).resolve().parent / "holidays.yaml"

NATIONAL = "national"

WEEKDAY_NAME_TO_INDEX = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

MONTH_NAME_TO_INDEX = {
    name.lower(): index for index, name in enumerate(calendar.month_name) if name
}

ORDINAL_NAME_TO_INDEX = {
    "first": 1,
    "second": 2,
    "third": 3,
    "fourth": 4,
    "fifth": 5,
}

RuleType = Literal["fixed", "nth_weekday", "last_weekday", "easter", "once"]


@dataclass(frozen=True)
class HolidayRule:
    """Date matching rule for a holiday."""

    rule_type: RuleType
    month: int | None = None
    day: int | None = None
    weekday: int | None = None
    nth: int | None = None
    on: date | None = None
    offset: int = 0

    def matches(self, target_date: date) -> bool:
        """Return True if the rule matches the target date."""
        if self.rule_type == "once":
            return self.on == target_date

        if self.rule_type == "fixed":
            return self.month == target_date.month and self.day == target_date.day

        if self.rule_type == "easter":
            # Offset in days from Easter Sunday: Good Friday is -2
            return target_date == easter(target_date.year) + timedelta(days=self.offset)

        if self.month is None or self.weekday is None:
            return False
        if target_date.month != self.month:
            return False

        if self.rule_type == "nth_weekday":
            if self.nth is None:
                return False
            match_day = _nth_weekday_of_month(
                target_date.year, self.month, self.weekday, self.nth
            )
            return match_day == target_date.day

        if self.rule_type == "last_weekday":
            match_day = _last_weekday_of_month(
                target_date.year, self.month, self.weekday
            )
            return match_day == target_date.day

        return False


@dataclass(frozen=True)
class HolidayDefinition:
    """A named holiday observed in one or more regions."""

    name: str
    rule: HolidayRule
    regions: frozenset[str] = frozenset({NATIONAL})

    def matches(self, target_date: date) -> bool:
        return self.rule.matches(target_date)

    def applies_to(self, region: str) -> bool:
        """National holidays apply everywhere; others only in their regions."""
        return NATIONAL in self.regions or region.lower() in self.regions


def _weekday_days(year: int, month: int, weekday: int) -> list[int]:
    month_weeks = calendar.monthcalendar(year, month)
    return [week[weekday] for week in month_weeks if week[weekday] != 0]


def _nth_weekday_of_month(year: int, month: int, weekday: int, nth: int) -> int | None:
    weekday_days = _weekday_days(year, month, weekday)
    if nth < 1 or nth > len(weekday_days):
        return None
    return weekday_days[nth - 1]


def _last_weekday_of_month(year: int, month: int, weekday: int) -> int | None:
    weekday_days = _weekday_days(year, month, weekday)
    if not weekday_days:
        return None
    return weekday_days[-1]


def _parse_month(value: Any) -> int | None:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip().lower()
        if stripped.isdigit():
            return int(stripped)
        return MONTH_NAME_TO_INDEX.get(stripped)
    return None


def _parse_month_day(value: Any) -> tuple[int, int] | None:
    if isinstance(value, str):
        parts = value.strip().split("-")
        if len(parts) == 2 and all(part.isdigit() for part in parts):
            return int(parts[0]), int(parts[1])
    return None


def _parse_rule_from_string(rule: str) -> HolidayRule:
    """Parse shorthand rules.

    ``MM-DD``, ``<ordinal>_<weekday>_<month>``, or ``easter`` with an
    optional day offset such as ``easter-2`` (Good Friday).
    """
    normalized = rule.strip().lower()

    if normalized.startswith("easter"):
        offset = normalized[len("easter"):]
        if not offset:
            return HolidayRule(rule_type="easter")
        if offset[0] in "+-" and offset[1:].isdigit():
            return HolidayRule(rule_type="easter", offset=int(offset))
        raise ValueError(f"Invalid date_rule {rule!r}")

    month_day = _parse_month_day(normalized)
    if month_day:
        month, day = month_day
        if not (1 <= month <= 12) or not (1 <= day <= 31):
            raise ValueError(f"Invalid date_rule {rule!r}")
        return HolidayRule(rule_type="fixed", month=month, day=day)

    parts = normalized.split("_")
    if len(parts) != 3:
        raise ValueError(f"Invalid date_rule {rule!r}")

    ordinal, weekday_name, month_name = parts
    weekday = WEEKDAY_NAME_TO_INDEX.get(weekday_name)
    month = _parse_month(month_name)
    if weekday is None or month is None:
        raise ValueError(f"Invalid date_rule {rule!r}")

    if ordinal == "last":
        return HolidayRule(rule_type="last_weekday", month=month, weekday=weekday)

    nth = ORDINAL_NAME_TO_INDEX.get(ordinal)
    if nth is None:
        raise ValueError(f"Invalid date_rule {rule!r}")
    return HolidayRule(rule_type="nth_weekday", month=month, weekday=weekday, nth=nth)


def _parse_rule(item: dict[str, Any]) -> HolidayRule:
    # One-off holidays (Easter and proclaimed days) carry an explicit date
    if "date" in item:
        raw_date = item["date"]
        if isinstance(raw_date, date):
            return HolidayRule(rule_type="once", on=raw_date)
        try:
            return HolidayRule(rule_type="once", on=date.fromisoformat(str(raw_date)))
        except ValueError as exc:
            raise ValueError(f"invalid holiday date {raw_date!r}") from exc

    rule_value = item.get("date_rule")
    if not rule_value:
        raise ValueError("holiday missing date_rule or date")
    if not isinstance(rule_value, str):
        raise ValueError("holiday date_rule must be a string")

    if rule_value.strip().lower() == "fixed":
        month = _parse_month(item.get("month"))
        day = item.get("day")
        if month is None or not isinstance(day, int):
            raise ValueError("fixed date_rule requires month (1-12) and day (1-31)")
        if not (1 <= month <= 12) or not (1 <= day <= 31):
            raise ValueError("fixed date_rule month/day out of range")
        return HolidayRule(rule_type="fixed", month=month, day=day)

    return _parse_rule_from_string(rule_value)


def _parse_regions(item: dict[str, Any], idx: int) -> frozenset[str]:
    raw = item.get("regions", [NATIONAL])
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not raw:
        raise ValueError(f"holidays[{idx}] regions must be a non-empty list")
    return frozenset(str(region).strip().lower() for region in raw)


def parse_holidays(data: Any) -> list[HolidayDefinition]:
    """Build holiday definitions from parsed YAML data."""
    if data is None:
        return []

    if isinstance(data, list):
        items = data
    elif isinstance(data, dict):
        items = data.get("holidays") or []
    else:
        raise ValueError("holiday file must be a list or mapping with 'holidays'")

    if not isinstance(items, list):
        raise ValueError("holidays must be a list")

    results: list[HolidayDefinition] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"holidays[{idx}] must be a mapping")
        name = item.get("name")
        if not name:
            raise ValueError(f"holidays[{idx}] missing name")
        try:
            rule = _parse_rule(item)
        except ValueError as exc:
            raise ValueError(f"holidays[{idx}] ({name}): {exc}") from exc

        results.append(
            HolidayDefinition(
                name=str(name),
                rule=rule,
                regions=_parse_regions(item, idx),
            )
        )
    return results


@lru_cache
def load_holiday_calendar(path: Path | None = None) -> tuple[HolidayDefinition, ...]:
    """Load holiday definitions from YAML (the bundled file by default)."""
    holidays_path = path or DEFAULT_HOLIDAY_FILE
    if not holidays_path.exists():
        logger.warning("holiday_file_missing", path=str(holidays_path))
        return ()

    raw = holidays_path.read_text(encoding="utf-8")
    holidays = tuple(parse_holidays(yaml.safe_load(raw)))
    logger.debug("holiday_calendar_loaded", path=str(holidays_path), count=len(holidays))
    return holidays


def holidays_for_region(
    holidays: tuple[HolidayDefinition, ...] | list[HolidayDefinition], region: str
) -> tuple[HolidayDefinition, ...]:
    return tuple(holiday for holiday in holidays if holiday.applies_to(region))


def holiday_names_on(
    target_date: date, holidays: tuple[HolidayDefinition, ...] | list[HolidayDefinition]
) -> list[str]:
    return [holiday.name for holiday in holidays if holiday.matches(target_date)]


def holiday_calendar(
    region: str = NATIONAL,
    holidays: tuple[HolidayDefinition, ...] | list[HolidayDefinition] | None = None,
) -> BusinessDayCalendar:
    """Build a business-day calendar closed on weekends and regional holidays."""
    if holidays is None:
        holidays = load_holiday_calendar()
    observed = holidays_for_region(holidays, region)

    def is_business_day(day: date) -> bool:
        if is_weekend(day):
            return False
        return not any(holiday.matches(day) for holiday in observed)

    return BusinessDayCalendar(predicate=is_business_day, name=f"holidays:{region.lower()}")
