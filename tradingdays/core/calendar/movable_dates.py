# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Resolvers for holidays that move from year to year.

Weekday arguments use the 0 = Sunday numbering from date_math.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from tradingdays.core.calendar.date_math import (
    SATURDAY,
    SUNDAY,
    day_of_week,
    last_day_of_month,
    make_date,
)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Return the nth occurrence of weekday (0=Sun) in the given month.

    The result is not checked against the month boundary; callers only ask for
    occurrences that exist (1st, 3rd, 4th).
    """
    first = make_date(year, month, 1)
    offset = (weekday - day_of_week(first)) % 7
    return first + timedelta(days=offset, weeks=n - 1)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Return the last occurrence of weekday (0=Sun) in the given month."""
    current = last_day_of_month(year, month)
    while day_of_week(current) != weekday:
        current -= timedelta(days=1)
    return current


def easter_sunday(year: int) -> date:
    """Return Easter Sunday for the given year (Anonymous Gregorian algorithm)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    L = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * L) // 451
    month = (h + L - 7 * m + 114) // 31
    day = ((h + L - 7 * m + 114) % 31) + 1
    return make_date(year, month, day)


def observed_fixed_holiday(year: int, month: int, day: int) -> Optional[date]:
    """Return the weekday on which a fixed-date holiday is observed.

    Saturday holidays move to the preceding Friday, Sunday holidays to the
    following Monday. If the move crosses into another year the holiday is not
    observed in ``year`` and None is returned (New Year's Day on a Saturday).
    """
    holiday = make_date(year, month, day)
    dow = day_of_week(holiday)
    if dow == SATURDAY:
        observed = holiday - timedelta(days=1)
    elif dow == SUNDAY:
        observed = holiday + timedelta(days=1)
    else:
        observed = holiday
    if observed.year != year:
        return None
    return observed


def good_friday(year: int) -> date:
    """Return Good Friday (Friday before Easter) for the given year."""
    return easter_sunday(year) - timedelta(days=2)


__all__ = [
    "nth_weekday_of_month",
    "last_weekday_of_month",
    "easter_sunday",
    "observed_fixed_holiday",
    "good_friday",
]
