# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""FastAPI server: trading days left, full-year holiday calendar, health."""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv


# Load .env first so MARKET_TIMEZONE, UI_CORS_ORIGINS, etc. are visible to load_config
def _load_env() -> None:
    # 1) Repo root .env; override so file wins over empty shell vars
    env_file = Path(__file__).resolve().parents[2] / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=True)
    # 2) Current working directory .env
    load_dotenv()


_load_env()

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from tradingdays import __version__
from tradingdays.core.calendar import (
    InvalidDateError,
    YearCalendar,
    build_holiday_calendar,
    compute_trading_day_report,
)
from tradingdays.core.calendar.market_calendar import validate_year
from tradingdays.core.settings import load_config
from tradingdays.market.market_time import market_now, parse_instant, to_market_local_time

logger = logging.getLogger(__name__)

app = FastAPI(title="Trading Days API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(load_config().api.cors_origins),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@lru_cache(maxsize=16)
def cached_holiday_calendar(year: int) -> YearCalendar:
    """Per-process memo of build_holiday_calendar; the calendar depends only on year."""
    return build_holiday_calendar(year)


@app.get("/health")
def health() -> Dict[str, Any]:
    """Health check. No auth."""
    return {"ok": True, "status": "healthy"}


@app.get("/api/trading-days")
def api_trading_days(
    asof: Optional[str] = Query(None, description="ISO-8601 instant; default is now in market time"),
) -> Dict[str, Any]:
    """Trading days left in the observation year, with remaining closures and half days."""
    config = load_config()
    tz_name = config.market.timezone
    try:
        if asof is None or asof.strip().lower() == "now":
            instant: datetime = market_now(tz_name)
        else:
            instant = to_market_local_time(parse_instant(asof), tz_name)
        report = compute_trading_day_report(instant, market_close=config.market.regular_close)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    out = report.to_dict()
    out["asof"] = instant.isoformat()
    return out


@app.get("/api/holidays/{year}")
def api_holidays(year: int) -> Dict[str, Any]:
    """Every closure and half day of ``year``."""
    try:
        calendar = cached_holiday_calendar(validate_year(year))
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return calendar.to_dict()
