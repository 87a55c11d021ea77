"""Payroll schedule - pay date generation for payroll cycles."""

__version__ = "0.1.0"

from payroll_schedule.business_days import (
    BusinessDayCalendar,
    adjust_to_business_day,
    weekend_only,
)
from payroll_schedule.cycles import (
    bi_monthly_date,
    fortnightly_date,
    monthly_date,
    quarterly_date,
    week_parity_of,
    weekly_date,
)
from payroll_schedule.exceptions import (
    ConfigurationError,
    InputRangeError,
    PayrollScheduleError,
)
from payroll_schedule.generator import (
    generate_payroll_dates,
    generate_payroll_dates_pattern,
    iter_payroll_dates,
)
from payroll_schedule.models import (
    AdjustmentRule,
    CycleStep,
    DateType,
    GeneratedPayrollDate,
    PayrollConfig,
    PayrollCycle,
    ProcessingDayBasis,
    WeekParity,
)
from payroll_schedule.processing import calculate_processing_date
from payroll_schedule.summary import schedule_summary
from payroll_schedule.validation import validate_config

__all__ = [
    # Version
    "__version__",
    # Models
    "PayrollConfig",
    "PayrollCycle",
    "DateType",
    "AdjustmentRule",
    "ProcessingDayBasis",
    "WeekParity",
    "CycleStep",
    "GeneratedPayrollDate",
    # Generation
    "generate_payroll_dates",
    "generate_payroll_dates_pattern",
    "iter_payroll_dates",
    "weekly_date",
    "fortnightly_date",
    "bi_monthly_date",
    "monthly_date",
    "quarterly_date",
    "week_parity_of",
    # Adjustment & processing
    "BusinessDayCalendar",
    "adjust_to_business_day",
    "weekend_only",
    "calculate_processing_date",
    # Validation & errors
    "validate_config",
    "PayrollScheduleError",
    "ConfigurationError",
    "InputRangeError",
    # Display
    "schedule_summary",
]
