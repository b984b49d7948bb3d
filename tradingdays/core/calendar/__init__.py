# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""US equity holiday calendar and trading-days-remaining engine."""

from tradingdays.core.calendar.date_math import InvalidDateError
from tradingdays.core.calendar.market_calendar import (
    EARLY_CLOSE,
    MARKET_CLOSE,
    MAX_YEAR,
    MIN_YEAR,
    build_holiday_calendar,
)
from tradingdays.core.calendar.models import HolidayEvent, HolidayKind, TradingDayReport, YearCalendar
from tradingdays.core.calendar.trading_days import compute_trading_day_report

__all__ = [
    "InvalidDateError",
    "EARLY_CLOSE",
    "MARKET_CLOSE",
    "MAX_YEAR",
    "MIN_YEAR",
    "build_holiday_calendar",
    "compute_trading_day_report",
    "HolidayEvent",
    "HolidayKind",
    "TradingDayReport",
    "YearCalendar",
]
