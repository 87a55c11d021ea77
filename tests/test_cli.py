"""Tests for the schedule preview command."""

import json
from datetime import date

import pytest

from payroll_schedule.__main__ import build_parser, main


class TestSchedulePreview:
    """Tests for ``python -m payroll_schedule``."""

    def test_json_output(self, capsys):
        exit_code = main(
            [
                "--cycle", "bi_monthly",
                "--date-type", "eom",
                "--start", "2024-01-01",
                "--end", "2024-03-31",
                "--json",
            ]
        )

        records = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert len(records) == 6
        assert records[-1]["original_date"] == "2024-03-31"
        assert records[-1]["adjusted_date"] == "2024-03-29"
        assert records[-1]["cycle"] == "bi_monthly"

    def test_table_names_holidays(self, capsys):
        exit_code = main(
            [
                "--cycle", "monthly",
                "--date-type", "fixed_date",
                "--date-value", "25",
                "--start", "2024-12-01",
                "--end", "2024-12-31",
                "--holidays",
            ]
        )

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert lines[0] == "Monthly - 25th of the Month"
        assert lines[1].split() == ["Original", "EFT", "Processing", "Notes"]
        assert lines[2].split() == [
            "2024-12-25",
            "2024-12-24",
            "2024-12-24",
            "Adjusted", "for", "business", "day", "(Christmas", "Day)",
        ]

    def test_defaults_to_one_year_from_today(self, capsys):
        exit_code = main(
            ["--cycle", "weekly", "--date-value", "5", "--json"],
            today=date(2024, 1, 1),
        )

        records = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert records[0]["original_date"] == "2024-01-05"
        # Fridays from Jan 5 to Dec 27 2024
        assert len(records) == 52

    def test_processing_days_and_basis(self, capsys):
        main(
            [
                "--cycle", "weekly",
                "--date-value", "1",
                "--start", "2024-01-08",
                "--end", "2024-01-08",
                "--processing-days", "3",
                "--basis", "business",
                "--json",
            ]
        )

        records = json.loads(capsys.readouterr().out)
        assert records[0]["processing_date"] == "2024-01-03"

    def test_invalid_config_exits_with_error(self, capsys):
        exit_code = main(
            ["--cycle", "monthly", "--start", "2024-01-01", "--end", "2024-02-01"]
        )

        assert exit_code == 2
        assert "error:" in capsys.readouterr().err

    def test_inverted_window_exits_with_error(self, capsys):
        exit_code = main(
            [
                "--cycle", "weekly",
                "--start", "2024-02-01",
                "--end", "2024-01-01",
            ]
        )

        assert exit_code == 2
        assert "start_date must be on or before end_date" in capsys.readouterr().err

    def test_parser_uses_settings_defaults(self, monkeypatch):
        monkeypatch.setenv("PAYROLL_ADJUSTMENT_RULE", "next")
        monkeypatch.setenv("PAYROLL_DEFAULT_MAX_COUNT", "12")

        args = build_parser().parse_args(["--cycle", "weekly"])

        assert args.rule == "next"
        assert args.max_count == 12

    def test_unknown_cycle_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--cycle", "annually"])
