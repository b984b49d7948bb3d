# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Trading sessions remaining in the calendar year.

The observation instant must already be in market local time; this module
never reads the clock and never converts time zones.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import List, Union

from tradingdays.core.calendar.date_math import (
    add_days,
    date_key,
    is_weekend,
    make_date,
    strip_to_date,
)
from tradingdays.core.calendar.market_calendar import MARKET_CLOSE, build_holiday_calendar
from tradingdays.core.calendar.models import HolidayEvent, HolidayKind, TradingDayReport

logger = logging.getLogger(__name__)

Instant = Union[datetime, date]


def is_after_close(observation_instant: Instant, market_close: time = MARKET_CLOSE) -> bool:
    """True iff the instant is strictly later than market_close on its own date.

    Aware datetimes are compared on their wall-clock reading. A bare date has no
    time of day and is never after close.
    """
    if not isinstance(observation_instant, datetime):
        return False
    wall_clock = observation_instant.replace(tzinfo=None)
    return wall_clock > datetime.combine(wall_clock.date(), market_close)


def compute_trading_day_report(
    observation_instant: Instant,
    *,
    market_close: time = MARKET_CLOSE,
) -> TradingDayReport:
    """Count full and half trading days from the observation date through Dec 31.

    Today counts unless the market has already closed (strictly after
    ``market_close``). Weekends and full closures count 0, half-days 0.5.

    Parameters
    ----------
    observation_instant : datetime or date
        "Now" in market local time.
    market_close : time
        Regular session close used for the same-day cutoff.

    Returns
    -------
    TradingDayReport
        Counts plus every closure/half-day from today to year end, ascending.
    """
    today = strip_to_date(observation_instant)
    year = today.year
    calendar = build_holiday_calendar(year)
    after_close = is_after_close(observation_instant, market_close)
    end_of_year = make_date(year, 12, 31)

    full_days = 0
    half_days = 0
    upcoming: List[HolidayEvent] = []

    cursor = today
    while cursor <= end_of_year:
        event = calendar.get(cursor)
        if event is not None:
            upcoming.append(event)

        if not is_weekend(cursor) and not (cursor == today and after_close):
            if event is None:
                full_days += 1
            elif event.kind is HolidayKind.HALF_DAY:
                half_days += 1

        if cursor == end_of_year:
            break
        cursor = add_days(cursor, 1)

    upcoming.sort(key=lambda e: date_key(e.date))

    report = TradingDayReport(
        year=year,
        total_trading_days=full_days + half_days * 0.5,
        full_day_count=full_days,
        half_day_count=half_days,
        upcoming_events=tuple(upcoming),
    )
    logger.debug(
        "Trading days left from %s (after_close=%s): %.1f (%d full, %d half, %d events)",
        date_key(today),
        after_close,
        report.total_trading_days,
        full_days,
        half_days,
        len(upcoming),
    )
    return report


__all__ = ["is_after_close", "compute_trading_day_report"]
