# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""US equity market calendar (NYSE/Nasdaq schedule).

Builds the full-day closures and scheduled early-close sessions of one year.
Full closures are placed first; a half-day is dropped, never promoted, when a
full closure already holds its date.
"""

from __future__ import annotations

import logging
from datetime import date, time, timedelta
from typing import Dict, Optional

from tradingdays.core.calendar.date_math import (
    MONDAY,
    THURSDAY,
    InvalidDateError,
    date_key,
    is_weekend,
    make_date,
)
from tradingdays.core.calendar.models import HolidayEvent, HolidayKind, YearCalendar
from tradingdays.core.calendar.movable_dates import (
    good_friday,
    last_weekday_of_month,
    nth_weekday_of_month,
    observed_fixed_holiday,
)

logger = logging.getLogger(__name__)

MIN_YEAR = 1900
MAX_YEAR = 2200

MARKET_CLOSE = time(16, 0)
EARLY_CLOSE = time(13, 0)

NEW_YEARS_DAY = "New Year's Day"
MLK_DAY = "Martin Luther King Jr. Day"
PRESIDENTS_DAY = "Presidents' Day"
GOOD_FRIDAY = "Good Friday"
MEMORIAL_DAY = "Memorial Day"
JUNETEENTH = "Juneteenth National Independence Day"
INDEPENDENCE_DAY = "Independence Day"
LABOR_DAY = "Labor Day"
THANKSGIVING_DAY = "Thanksgiving Day"
CHRISTMAS_DAY = "Christmas Day"

DAY_BEFORE_INDEPENDENCE_DAY = "Day Before Independence Day (early close)"
DAY_AFTER_THANKSGIVING = "Day After Thanksgiving (early close)"
CHRISTMAS_EVE = "Christmas Eve (early close)"


def validate_year(year: int) -> int:
    """Return year as int, or raise InvalidDateError outside MIN_YEAR..MAX_YEAR."""
    if isinstance(year, bool):
        raise InvalidDateError(f"Year must be an integer, got {year!r}", value=year)
    try:
        y = int(year)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(f"Year must be an integer, got {year!r}", value=year) from e
    if y != year:
        raise InvalidDateError(f"Year must be an integer, got {year!r}", value=year)
    if not MIN_YEAR <= y <= MAX_YEAR:
        raise InvalidDateError(f"Year {y} outside supported range {MIN_YEAR}-{MAX_YEAR}", value=year)
    return y


def _add_closure(events: Dict[date, HolidayEvent], d: Optional[date], name: str) -> None:
    if d is None:
        logger.debug("%s not observed this year (weekend shift leaves the year)", name)
        return
    events[d] = HolidayEvent(date=d, name=name, kind=HolidayKind.FULL_CLOSURE)


def _add_half_day(
    events: Dict[date, HolidayEvent],
    d: date,
    name: str,
    close_time: time,
    *,
    skip_weekend: bool = True,
) -> None:
    if skip_weekend and is_weekend(d):
        logger.debug("%s falls on a weekend (%s); no early close", name, date_key(d))
        return
    existing = events.get(d)
    if existing is not None:
        logger.debug("%s on %s suppressed by %s", name, date_key(d), existing.name)
        return
    events[d] = HolidayEvent(date=d, name=name, kind=HolidayKind.HALF_DAY, close_time=close_time)


def build_holiday_calendar(year: int, *, early_close: time = EARLY_CLOSE) -> YearCalendar:
    """Return the closures and early-close sessions of the US equity market for ``year``.

    Parameters
    ----------
    year : int
        Calendar year, MIN_YEAR..MAX_YEAR.
    early_close : time
        Close time attached to half-day sessions (13:00 market time).

    Returns
    -------
    YearCalendar
        Ten full closures (nine when New Year's Day falls on a Saturday) and up
        to three half-days.
    """
    year = validate_year(year)
    events: Dict[date, HolidayEvent] = {}

    _add_closure(events, observed_fixed_holiday(year, 1, 1), NEW_YEARS_DAY)
    _add_closure(events, nth_weekday_of_month(year, 1, MONDAY, 3), MLK_DAY)
    _add_closure(events, nth_weekday_of_month(year, 2, MONDAY, 3), PRESIDENTS_DAY)
    _add_closure(events, good_friday(year), GOOD_FRIDAY)
    _add_closure(events, last_weekday_of_month(year, 5, MONDAY), MEMORIAL_DAY)
    _add_closure(events, observed_fixed_holiday(year, 6, 19), JUNETEENTH)
    _add_closure(events, observed_fixed_holiday(year, 7, 4), INDEPENDENCE_DAY)
    _add_closure(events, nth_weekday_of_month(year, 9, MONDAY, 1), LABOR_DAY)
    thanksgiving = nth_weekday_of_month(year, 11, THURSDAY, 4)
    _add_closure(events, thanksgiving, THANKSGIVING_DAY)
    _add_closure(events, observed_fixed_holiday(year, 12, 25), CHRISTMAS_DAY)

    # Half days
    _add_half_day(events, make_date(year, 7, 3), DAY_BEFORE_INDEPENDENCE_DAY, early_close)
    # Thanksgiving is a Thursday, so the day after is always a Friday
    _add_half_day(
        events,
        thanksgiving + timedelta(days=1),
        DAY_AFTER_THANKSGIVING,
        early_close,
        skip_weekend=False,
    )
    _add_half_day(events, make_date(year, 12, 24), CHRISTMAS_EVE, early_close)

    calendar = YearCalendar(year=year, events=events)
    logger.debug(
        "Built %d market calendar: %d closures, %d half-days",
        year,
        len(calendar.full_closures()),
        len(calendar.half_days()),
    )
    return calendar


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MARKET_CLOSE",
    "EARLY_CLOSE",
    "validate_year",
    "build_holiday_calendar",
]
