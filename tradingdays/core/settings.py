# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Centralized configuration loader for tradingdays.

Loads config.yaml from the repository root and provides typed access to settings.
Falls back to sensible defaults if config.yaml is missing or incomplete.
Environment variables override config.yaml values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import time
from pathlib import Path
from typing import Optional, Tuple

import pytz
import yaml

logger = logging.getLogger(__name__)

_CONFIG_CACHE: Optional["TradingDaysConfig"] = None

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_REGULAR_CLOSE = "16:00"
DEFAULT_CORS_ORIGIN = "http://localhost:5173"


def _repo_root() -> Path:
    """Return the repository root."""
    # tradingdays/core/settings.py -> repo root
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class MarketConfig:
    """Market zone and regular session close."""
    timezone: str
    regular_close: time


@dataclass(frozen=True)
class ApiConfig:
    """REST API bind address and CORS."""
    host: str
    port: int
    cors_origins: Tuple[str, ...]


@dataclass(frozen=True)
class TradingDaysConfig:
    """Root configuration object."""
    market: MarketConfig
    api: ApiConfig
    log_level: str


def _config_path() -> Path:
    override = os.getenv("TRADINGDAYS_CONFIG")
    if override:
        return Path(override)
    return _repo_root() / "config.yaml"


def _load_yaml_config() -> dict:
    """Load config.yaml. Returns empty dict if not found or unreadable."""
    config_path = _config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read %s, using defaults: %s", config_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level is not a mapping", config_path)
        return {}
    return data


def parse_hhmm(value: str) -> time:
    """Parse 'HH:MM' (24h). Raises ValueError on bad input."""
    # unquoted 16:00 in YAML 1.1 loads as base-60 int (960)
    if isinstance(value, int) and not isinstance(value, bool):
        hh, mm = divmod(value, 60)
        try:
            return time(hh, mm)
        except ValueError as e:
            raise ValueError(f"Invalid time {value!r} (expected HH:MM)") from e
    try:
        hh, mm = str(value).strip().split(":")
        return time(int(hh), int(mm))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid time {value!r} (expected HH:MM)") from e


def _validate_timezone(name: str) -> str:
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError as e:
        raise ValueError(f"Unknown market timezone {name!r}") from e
    return name


def load_config(*, reload: bool = False) -> TradingDaysConfig:
    """Load and return the tradingdays configuration.

    Priority order (highest to lowest):
    1. Environment variables (MARKET_TIMEZONE, MARKET_CLOSE_TIME, API_HOST, API_PORT,
       UI_CORS_ORIGINS, LOG_LEVEL)
    2. config.yaml values
    3. Built-in defaults

    Parameters
    ----------
    reload : bool
        If True, force reload from disk. Otherwise use cached config.

    Returns
    -------
    TradingDaysConfig
        The loaded configuration.
    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None and not reload:
        return _CONFIG_CACHE

    raw = _load_yaml_config()

    market_raw = raw.get("market", {}) or {}
    market_tz = _validate_timezone(os.getenv(
        "MARKET_TIMEZONE",
        market_raw.get("timezone", DEFAULT_TIMEZONE)
    ))
    regular_close = parse_hhmm(os.getenv(
        "MARKET_CLOSE_TIME",
        market_raw.get("regular_close", DEFAULT_REGULAR_CLOSE)
    ))
    market_config = MarketConfig(timezone=market_tz, regular_close=regular_close)

    api_raw = raw.get("api", {}) or {}
    api_host = os.getenv("API_HOST", api_raw.get("host", "0.0.0.0"))
    api_port = int(os.getenv("API_PORT", str(api_raw.get("port", 8000))))
    cors_raw = os.getenv("UI_CORS_ORIGINS")
    if cors_raw is not None:
        origins = [o.strip() for o in cors_raw.split(",")]
    else:
        origins = [str(o).strip() for o in (api_raw.get("cors_origins") or [])]
    cors_origins = tuple(o for o in origins if o) or (DEFAULT_CORS_ORIGIN,)
    api_config = ApiConfig(host=api_host, port=api_port, cors_origins=cors_origins)

    log_level = os.getenv("LOG_LEVEL", raw.get("log_level", "INFO")).upper()

    config = TradingDaysConfig(
        market=market_config,
        api=api_config,
        log_level=log_level,
    )

    _CONFIG_CACHE = config
    return config


def get_regular_close() -> time:
    """Convenience: return the regular session close from config."""
    return load_config().market.regular_close
