#!/usr/bin/env python3
# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""
Trading days left in the year (US equities).

Usage:
    python -m tradingdays.run_countdown
    python -m tradingdays.run_countdown --asof 2026-11-27T12:00:00
    python -m tradingdays.run_countdown --asof 2026-12-24T21:30:00+00:00 --json
    python -m tradingdays.run_countdown --year 2027
    python -m tradingdays.run_countdown --help

Environment variables:
    MARKET_TIMEZONE     - Market zone (default: America/New_York)
    MARKET_CLOSE_TIME   - Regular close, HH:MM (default: 16:00)
    LOG_LEVEL           - Logging level (default: INFO)

A naive --asof is read as market wall-clock time; an offset-aware one is
converted to the market zone first.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import List, Optional

from tradingdays.core.calendar import (
    HolidayEvent,
    InvalidDateError,
    TradingDayReport,
    YearCalendar,
    build_holiday_calendar,
    compute_trading_day_report,
)
from tradingdays.core.settings import load_config
from tradingdays.market.market_time import market_now, parse_instant, to_market_local_time

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def format_display_date(d: date) -> str:
    """Short label, e.g. 'Thu, Nov 26'."""
    return f"{d.strftime('%a')}, {d.strftime('%b')} {d.day}"


def format_total(total: float) -> str:
    """One decimal place, as shown on the countdown card."""
    return f"{total:.1f}"


def _event_line(event: HolidayEvent, tz_label: str) -> str:
    if event.is_half_day:
        status = f"HALF DAY (closes {event.close_time.strftime('%H:%M')} {tz_label})"
    else:
        status = "CLOSED"
    return f"  {format_display_date(event.date):<12} {event.name:<44} {status}"


def render_report(report: TradingDayReport, asof: datetime, tz_label: str = "ET") -> List[str]:
    lines = [
        f"Trading days left in {report.year}: {format_total(report.total_trading_days)}",
        f"  full days: {report.full_day_count}",
        f"  half days: {report.half_day_count}",
        f"  as of: {asof.isoformat()}",
        "",
        "Upcoming market holidays & half days:",
    ]
    if not report.upcoming_events:
        lines.append("  No remaining NYSE/Nasdaq holidays or half days for the rest of the year.")
    for event in report.upcoming_events:
        lines.append(_event_line(event, tz_label))
    return lines


def render_calendar(calendar: YearCalendar, tz_label: str = "ET") -> List[str]:
    lines = [
        f"US equity market calendar {calendar.year}: "
        f"{len(calendar.full_closures())} closures, {len(calendar.half_days())} half days",
    ]
    for event in calendar:
        lines.append(_event_line(event, tz_label))
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tradingdays",
        description="US equity trading days left in the year",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--asof",
        default="now",
        help="Observation instant: 'now' or ISO-8601 timestamp (default: now)",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Print the full holiday calendar for YEAR instead of the countdown",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    tz_name = config.market.timezone
    try:
        if args.year is not None:
            calendar = build_holiday_calendar(args.year)
            if args.json:
                print(json.dumps(calendar.to_dict(), indent=2))
            else:
                print("\n".join(render_calendar(calendar)))
            return 0

        if args.asof.strip().lower() == "now":
            asof = market_now(tz_name)
        else:
            asof = to_market_local_time(parse_instant(args.asof), tz_name)
        logger.debug("Observation instant in %s: %s", tz_name, asof.isoformat())

        report = compute_trading_day_report(asof, market_close=config.market.regular_close)
    except InvalidDateError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        out = report.to_dict()
        out["asof"] = asof.isoformat()
        print(json.dumps(out, indent=2))
    else:
        print("\n".join(render_report(report, asof)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
