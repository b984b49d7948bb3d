# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Calendar arithmetic for the holiday engine.

Dates are plain ``datetime.date`` values. Day-of-week numbering follows the
0 = Sunday convention used by every resolver in this package (Python's own
``date.weekday()`` is 0 = Monday, so never mix the two).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

WEEKEND_DAYS = frozenset({SUNDAY, SATURDAY})


class InvalidDateError(ValueError):
    """Raised for malformed or out-of-range calendar input."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, raising InvalidDateError instead of a bare ValueError."""
    try:
        return date(int(year), int(month), int(day))
    except (TypeError, ValueError) as e:
        raise InvalidDateError(
            f"Invalid calendar date {year!r}-{month!r}-{day!r}: {e}",
            value=(year, month, day),
        ) from e


def strip_to_date(instant: Any) -> date:
    """Drop the time of day. No zone conversion is applied."""
    # datetime is a date subclass, check it first
    if isinstance(instant, datetime):
        return instant.date()
    if isinstance(instant, date):
        return instant
    raise InvalidDateError(f"Expected date or datetime, got {type(instant).__name__}", value=instant)


def add_days(d: date, n: int) -> date:
    try:
        return d + timedelta(days=n)
    except OverflowError as e:
        raise InvalidDateError(f"{d.isoformat()} + {n} days is out of range", value=d) from e


def date_key(d: date) -> str:
    """Canonical sortable key (YYYY-MM-DD)."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(key: str) -> date:
    """Inverse of date_key."""
    if not isinstance(key, str):
        raise InvalidDateError(f"Date key must be a string, got {type(key).__name__}", value=key)
    parts = key.strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts) or len(parts[0]) != 4:
        raise InvalidDateError(f"Malformed date key {key!r} (expected YYYY-MM-DD)", value=key)
    return make_date(int(parts[0]), int(parts[1]), int(parts[2]))


def day_of_week(d: date) -> int:
    """Return 0..6 with 0 = Sunday."""
    return (d.weekday() + 1) % 7


def is_weekend(d: date) -> bool:
    return day_of_week(d) in WEEKEND_DAYS


def compare(a: date, b: date) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def last_day_of_month(year: int, month: int) -> date:
    if month == 12:
        first_next = make_date(year + 1, 1, 1)
    else:
        first_next = make_date(year, month + 1, 1)
    return first_next - timedelta(days=1)


__all__ = [
    "SUNDAY",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "WEEKEND_DAYS",
    "InvalidDateError",
    "make_date",
    "strip_to_date",
    "add_days",
    "date_key",
    "parse_date_key",
    "day_of_week",
    "is_weekend",
    "compare",
    "last_day_of_month",
]
