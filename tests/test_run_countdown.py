# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Command line countdown: text and JSON output, exit codes."""

from __future__ import annotations

import json
from datetime import date, datetime

from tradingdays.core.calendar import compute_trading_day_report
from tradingdays.run_countdown import (
    EXIT_INVALID_INPUT,
    format_display_date,
    format_total,
    main,
    render_report,
)


def test_format_display_date() -> None:
    assert format_display_date(date(2026, 11, 26)) == "Thu, Nov 26"
    assert format_display_date(date(2024, 1, 1)) == "Mon, Jan 1"


def test_format_total_one_decimal() -> None:
    assert format_total(250.0) == "250.0"
    assert format_total(4.5) == "4.5"


def test_json_countdown_naive_asof(capsys) -> None:
    assert main(["--asof", "2026-10-21T15:59:00", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["year"] == 2026
    assert data["total_trading_days"] == 49.0
    assert data["asof"].startswith("2026-10-21T15:59:00")
    assert [e["date"] for e in data["upcoming_events"]] == [
        "2026-11-26",
        "2026-11-27",
        "2026-12-24",
        "2026-12-25",
    ]


def test_json_countdown_utc_asof_after_close(capsys) -> None:
    """20:01 UTC on Oct 21 2026 is 16:01 EDT: today no longer counts."""
    assert main(["--asof", "2026-10-21T20:01:00Z", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["total_trading_days"] == 48.0


def test_text_countdown(capsys) -> None:
    assert main(["--asof", "2026-12-24T10:00:00"]) == 0
    out = capsys.readouterr().out
    assert "Trading days left in 2026: 4.5" in out
    assert "Christmas Eve (early close)" in out
    assert "HALF DAY (closes 13:00 ET)" in out
    assert "CLOSED" in out


def test_render_report_without_events() -> None:
    report = compute_trading_day_report(date(2026, 12, 28))
    lines = render_report(report, asof=datetime(2026, 12, 28))
    assert lines[0] == "Trading days left in 2026: 4.0"
    assert "No remaining NYSE/Nasdaq holidays or half days" in lines[-1]


def test_year_calendar_json(capsys) -> None:
    assert main(["--year", "2022", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["full_closure_count"] == 9
    assert data["half_day_count"] == 1


def test_year_calendar_text(capsys) -> None:
    assert main(["--year", "2026"]) == 0
    out = capsys.readouterr().out
    assert "US equity market calendar 2026: 10 closures, 2 half days" in out
    assert "Good Friday" in out


def test_invalid_asof_exit_code(capsys) -> None:
    assert main(["--asof", "not-a-date"]) == EXIT_INVALID_INPUT
    assert "ERROR" in capsys.readouterr().err


def test_out_of_range_year_exit_code(capsys) -> None:
    assert main(["--year", "1800"]) == EXIT_INVALID_INPUT
    assert "outside supported range" in capsys.readouterr().err


def test_asof_at_datetime_min_exit_code(capsys) -> None:
    assert main(["--asof", "0001-01-01T00:00:00+00:00"]) == EXIT_INVALID_INPUT
    assert "ERROR" in capsys.readouterr().err
