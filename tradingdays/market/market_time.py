# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Market local time (US/Eastern).

The calendar engine works on civil time in the market's zone. This module is
the one place that reads the clock and converts instants into that zone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytz

from tradingdays.core.calendar.date_math import InvalidDateError
from tradingdays.core.calendar.market_calendar import EARLY_CLOSE, MARKET_CLOSE

MARKET_TIMEZONE = "America/New_York"


def to_market_local_time(instant: datetime, tz_name: str = MARKET_TIMEZONE) -> datetime:
    """Express ``instant`` as wall-clock time in the market's zone.

    Parameters
    ----------
    instant:
        Aware datetimes are converted. Naive datetimes are taken to already be
        market wall-clock time and are only localized.
    tz_name:
        IANA zone name (default America/New_York).

    Returns
    -------
    datetime
        Aware datetime in ``tz_name``.

    Raises
    ------
    InvalidDateError
        If the converted instant falls outside the representable datetime range.
    """
    tz = pytz.timezone(tz_name)
    try:
        if instant.tzinfo is None:
            return tz.localize(instant)
        return instant.astimezone(tz)
    except (OverflowError, ValueError) as e:
        raise InvalidDateError(
            f"Instant {instant.isoformat()} is out of range in {tz_name}: {e}", value=instant
        ) from e


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant ('Z' suffix allowed). Raises InvalidDateError."""
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateError(f"Invalid instant {value!r}: {e}", value=value) from e


def market_now(tz_name: str = MARKET_TIMEZONE, *, utc_now: Optional[datetime] = None) -> datetime:
    """Current instant in market time. ``utc_now`` pins the clock for callers that need to."""
    if utc_now is None:
        utc_now = datetime.now(pytz.UTC)
    elif utc_now.tzinfo is None:
        utc_now = pytz.UTC.localize(utc_now)
    return to_market_local_time(utc_now, tz_name)


__all__ = [
    "MARKET_TIMEZONE",
    "MARKET_CLOSE",
    "EARLY_CLOSE",
    "to_market_local_time",
    "market_now",
    "parse_instant",
]
