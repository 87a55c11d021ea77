"""Preview a payroll schedule from the command line."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

import structlog

from payroll_schedule.calendar_math import add_months
from payroll_schedule.config import (
    configure_logging,
    get_settings,
    holiday_calendar,
    load_holiday_calendar,
)
from payroll_schedule.config.holidays import holiday_names_on, holidays_for_region
from payroll_schedule.exceptions import PayrollScheduleError
from payroll_schedule.generator import generate_payroll_dates
from payroll_schedule.models import (
    AdjustmentRule,
    DateType,
    PayrollConfig,
    PayrollCycle,
    ProcessingDayBasis,
)
from payroll_schedule.summary import schedule_summary

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="python -m payroll_schedule",
        description="Preview generated payroll EFT and processing dates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --cycle weekly --date-value 5 --start 2024-01-01 --end 2024-03-31
  %(prog)s --cycle bi_monthly --date-type eom --start 2024-01-01 --end 2024-03-31
  %(prog)s --cycle monthly --date-type fixed_date --date-value 31 --holidays --region nsw
        """,
    )
    parser.add_argument(
        "--cycle",
        required=True,
        choices=[cycle.value for cycle in PayrollCycle],
        help="Payroll cycle",
    )
    parser.add_argument(
        "--date-type",
        choices=[date_type.value for date_type in DateType],
        default=None,
        help="Date type (required for all cycles except weekly)",
    )
    parser.add_argument(
        "--date-value", type=int, default=None, help="Weekday 1-7 or day of month 1-31"
    )
    parser.add_argument(
        "--start",
        type=date.fromisoformat,
        default=None,
        help="Window start, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--end",
        type=date.fromisoformat,
        default=None,
        help="Window end, YYYY-MM-DD (default: one year after start)",
    )
    parser.add_argument(
        "--max-count",
        type=int,
        default=settings.default_max_count,
        help=f"Maximum dates to generate (default: {settings.default_max_count})",
    )
    parser.add_argument(
        "--processing-days",
        type=int,
        default=0,
        help="Processing lead time before the EFT date (default: 0)",
    )
    parser.add_argument(
        "--rule",
        choices=[rule.value for rule in AdjustmentRule],
        default=settings.adjustment_rule.value,
        help=f"Business day adjustment (default: {settings.adjustment_rule.value})",
    )
    parser.add_argument(
        "--basis",
        choices=[basis.value for basis in ProcessingDayBasis],
        default=settings.processing_basis.value,
        help=f"Lead time unit (default: {settings.processing_basis.value})",
    )
    parser.add_argument(
        "--holidays",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Roll dates over public holidays as well as weekends",
    )
    parser.add_argument(
        "--region",
        default=settings.holiday_region,
        help=f"Holiday region (default: {settings.holiday_region})",
    )
    parser.add_argument(
        "--holiday-file",
        type=Path,
        default=settings.holiday_file,
        help="Holiday YAML file (default: bundled calendar)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON records")
    return parser


def main(argv: list[str] | None = None, today: date | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    start = args.start or today or date.today()
    end = args.end or add_months(start, 12)

    try:
        config = PayrollConfig.from_mapping(
            {
                "cycle": args.cycle,
                "date_type": args.date_type,
                "date_value": args.date_value,
                "processing_days_before_eft": args.processing_days,
                "adjustment_rule": args.rule,
                "processing_day_basis": args.basis,
            }
        )
        holidays = (
            holidays_for_region(load_holiday_calendar(args.holiday_file), args.region)
            if args.holidays
            else ()
        )
        calendar = holiday_calendar(args.region, holidays) if args.holidays else None
        records = generate_payroll_dates(
            config, start, end, args.max_count, calendar=calendar
        )
    except (PayrollScheduleError, ValueError) as exc:
        logger.error("schedule_preview_failed", error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps([record.to_dict() for record in records], indent=2))
        return 0

    print(schedule_summary(config))
    print(f"{'Original':<12} {'EFT':<12} {'Processing':<12} Notes")
    for record in records:
        notes = record.notes or ""
        names = holiday_names_on(record.original_date, holidays)
        if names:
            notes = f"{notes} ({', '.join(names)})"
        print(
            f"{record.original_date.isoformat():<12} "
            f"{record.adjusted_date.isoformat():<12} "
            f"{record.processing_date.isoformat():<12} {notes}".rstrip()
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
