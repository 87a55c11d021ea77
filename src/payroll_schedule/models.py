"""Payroll schedule value types.

These mirror the enum values stored against a payroll record so configs can
be built straight from persisted rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from payroll_schedule.exceptions import ConfigurationError


class PayrollCycle(str, Enum):
    """How often a payroll is paid."""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    BI_MONTHLY = "bi_monthly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


class DateType(str, Enum):
    """Qualifies which day within the cycle is the pay date."""

    DAY_OF_WEEK = "dow"
    START_OF_MONTH = "som"
    END_OF_MONTH = "eom"
    FIXED_DATE = "fixed_date"
    WEEK_A = "week_a"
    WEEK_B = "week_b"


class AdjustmentRule(str, Enum):
    """Direction to roll a non-business day."""

    PREVIOUS = "previous"
    NEXT = "next"
    NEAREST = "nearest"


class ProcessingDayBasis(str, Enum):
    """Unit for the processing lead time."""

    CALENDAR = "calendar"
    BUSINESS = "business"


class WeekParity(str, Enum):
    """Fortnightly week label, anchored to the first Sunday of the year."""

    A = "A"
    B = "B"


# Long-form spellings seen in older payroll records
_DATE_TYPE_ALIASES = {
    "day_of_week": DateType.DAY_OF_WEEK,
    "start_of_month": DateType.START_OF_MONTH,
    "end_of_month": DateType.END_OF_MONTH,
    "fixed": DateType.FIXED_DATE,
}

_CYCLE_ALIASES = {
    "bi-monthly": PayrollCycle.BI_MONTHLY,
    "bimonthly": PayrollCycle.BI_MONTHLY,
    "semi_monthly": PayrollCycle.BI_MONTHLY,
}


def _parse_enum(
    enum_cls: type[Enum],
    value: Any,
    field_name: str,
    aliases: dict[str, Any] | None = None,
) -> Any:
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(
            f"{field_name} must be a string, got {value!r}",
            details={"field": field_name, "value": value},
        )
    normalized = value.strip().lower()
    if aliases and normalized in aliases:
        return aliases[normalized]
    try:
        return enum_cls(normalized)
    except ValueError as exc:
        raise ConfigurationError(
            f"Unsupported {field_name}: {value!r}",
            details={"field": field_name, "value": value},
        ) from exc


def _pick(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def _int_or_none(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"{field_name} must be an integer, got {value!r}",
            details={"field": field_name, "value": value},
        ) from exc


@dataclass(frozen=True)
class PayrollConfig:
    """Schedule configuration for one payroll."""

    cycle: PayrollCycle
    date_type: DateType | None = None
    date_value: int | None = None
    processing_days_before_eft: int = 0
    adjustment_rule: AdjustmentRule = AdjustmentRule.PREVIOUS
    processing_day_basis: ProcessingDayBasis = ProcessingDayBasis.CALENDAR

    def __post_init__(self) -> None:
        # Stored rows carry plain strings; normalise them to the enums
        object.__setattr__(
            self, "cycle", _parse_enum(PayrollCycle, self.cycle, "cycle", _CYCLE_ALIASES)
        )
        if self.date_type is not None:
            object.__setattr__(
                self,
                "date_type",
                _parse_enum(DateType, self.date_type, "date_type", _DATE_TYPE_ALIASES),
            )
        object.__setattr__(
            self,
            "adjustment_rule",
            _parse_enum(AdjustmentRule, self.adjustment_rule, "adjustment_rule"),
        )
        object.__setattr__(
            self,
            "processing_day_basis",
            _parse_enum(
                ProcessingDayBasis, self.processing_day_basis, "processing_day_basis"
            ),
        )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> PayrollConfig:
        """Build a config from a payroll row or API payload.

        Accepts both camelCase and snake_case keys. Enum fields may be given
        as their stored string values.
        """
        cycle = _pick(data, "cycle", "cycle_id", "cycleId")
        if cycle is None:
            raise ConfigurationError("payroll config missing cycle")

        return cls(
            cycle=cycle,
            date_type=_pick(data, "date_type", "dateType", "date_type_id", "dateTypeId"),
            date_value=_int_or_none(_pick(data, "date_value", "dateValue"), "date_value"),
            processing_days_before_eft=_int_or_none(
                _pick(data, "processing_days_before_eft", "processingDaysBeforeEft"),
                "processing_days_before_eft",
            )
            or 0,
            adjustment_rule=_pick(data, "adjustment_rule", "adjustmentRule")
            or AdjustmentRule.PREVIOUS,
            processing_day_basis=_pick(
                data, "processing_day_basis", "processingDayBasis"
            )
            or ProcessingDayBasis.CALENDAR,
        )


@dataclass(frozen=True)
class CycleStep:
    """One generator result: the pay date and where the cursor moves next."""

    original_date: date
    next_cursor: date


@dataclass(frozen=True)
class GeneratedPayrollDate:
    """A single pay cycle occurrence."""

    original_date: date
    adjusted_date: date
    processing_date: date
    cycle: PayrollCycle
    notes: str | None = None

    @property
    def was_adjusted(self) -> bool:
        return self.original_date != self.adjusted_date

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "original_date": self.original_date.isoformat(),
            "adjusted_date": self.adjusted_date.isoformat(),
            "processing_date": self.processing_date.isoformat(),
            "cycle": self.cycle.value,
            "notes": self.notes,
        }
