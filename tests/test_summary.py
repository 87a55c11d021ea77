"""Tests for schedule descriptions."""

from datetime import date

import pytest

from payroll_schedule.models import DateType, PayrollConfig, PayrollCycle
from payroll_schedule.summary import (
    date_type_label,
    fortnightly_week_options,
    ordinal,
    schedule_summary,
)


class TestOrdinal:
    """Tests for ordinal suffixes."""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (31, "31st"),
        ],
    )
    def test_ordinal(self, number, expected):
        assert ordinal(number) == expected


class TestScheduleSummary:
    """Tests for one-line schedule summaries."""

    @pytest.mark.parametrize(
        "config,expected",
        [
            (PayrollConfig(cycle="weekly", date_value=5), "Weekly - Friday"),
            (PayrollConfig(cycle="weekly"), "Weekly - Day not selected"),
            (
                PayrollConfig(cycle="fortnightly", date_type="week_b", date_value=2),
                "Fortnightly - Week B - Tuesday",
            ),
            (
                PayrollConfig(cycle="bi_monthly", date_type="som"),
                "Bi-Monthly - 1st and 15th of the Month",
            ),
            (
                PayrollConfig(cycle="bi_monthly", date_type="eom"),
                "Bi-Monthly - 15th and last day of the Month",
            ),
            (
                PayrollConfig(cycle="monthly", date_type="fixed_date", date_value=21),
                "Monthly - 21st of the Month",
            ),
            (
                PayrollConfig(cycle="monthly", date_type="fixed_date"),
                "Monthly - Day not selected",
            ),
            (
                PayrollConfig(cycle="quarterly", date_type="som"),
                "Quarterly - Start of the Month",
            ),
            (
                PayrollConfig(cycle="quarterly", date_type="eom"),
                "Quarterly - End of the Month",
            ),
        ],
    )
    def test_summary(self, config, expected):
        assert schedule_summary(config) == expected

    def test_date_type_label(self):
        assert date_type_label(PayrollConfig(cycle=PayrollCycle.WEEKLY)) == "Day of Week"
        assert date_type_label(PayrollConfig(cycle=PayrollCycle.MONTHLY)) == "Not set"
        assert (
            date_type_label(
                PayrollConfig(cycle=PayrollCycle.MONTHLY, date_type=DateType.END_OF_MONTH)
            )
            == "End of Month"
        )


class TestFortnightlyWeekOptions:
    """Tests for Week A/B choices."""

    def test_current_week_a(self):
        options = fortnightly_week_options(date(2024, 1, 10))

        assert options == [
            {
                "value": "A",
                "label": "Week A (Current: 7 Jan - 13 Jan)",
                "description": "This week",
            },
            {
                "value": "B",
                "label": "Week B (Next: 14 Jan - 20 Jan)",
                "description": "Next week",
            },
        ]

    def test_current_week_b_on_sunday(self):
        options = fortnightly_week_options(date(2024, 1, 14))

        assert options[0]["value"] == "B"
        assert options[0]["label"] == "Week B (Current: 14 Jan - 20 Jan)"
        assert options[1]["value"] == "A"
