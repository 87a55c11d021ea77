"""Processing (cutoff) date calculation."""

from __future__ import annotations

from datetime import date, timedelta

from payroll_schedule.business_days import WEEKEND_ONLY, BusinessDayCalendar
from payroll_schedule.exceptions import ConfigurationError
from payroll_schedule.models import ProcessingDayBasis


def calculate_processing_date(
    adjusted_date: date,
    processing_days_before_eft: int = 0,
    basis: ProcessingDayBasis | str = ProcessingDayBasis.CALENDAR,
    calendar: BusinessDayCalendar | None = None,
) -> date:
    """Return the date payroll must be finalised for an EFT date.

    Calendar basis subtracts plain days. Business basis steps back over
    non-business days of ``calendar`` (weekends only by default).
    """
    if processing_days_before_eft < 0:
        raise ConfigurationError(
            "processing_days_before_eft cannot be negative",
            details={"processing_days_before_eft": processing_days_before_eft},
        )
    try:
        basis = ProcessingDayBasis(basis)
    except ValueError as exc:
        raise ConfigurationError(
            f"Unsupported processing day basis: {basis!r}", details={"basis": basis}
        ) from exc

    if basis == ProcessingDayBasis.BUSINESS:
        cal = calendar or WEEKEND_ONLY
        return cal.add_business_days(adjusted_date, -processing_days_before_eft)
    return adjusted_date - timedelta(days=processing_days_before_eft)
