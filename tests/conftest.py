# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Shared fixtures: isolate every test from a local config.yaml and the config cache."""

from __future__ import annotations

import pytest

from tradingdays.core import settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config loading at a missing file and start from an empty cache."""
    monkeypatch.setenv("TRADINGDAYS_CONFIG", str(tmp_path / "missing-config.yaml"))
    for var in ("MARKET_TIMEZONE", "MARKET_CLOSE_TIME", "API_HOST", "API_PORT", "UI_CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(settings, "_CONFIG_CACHE", None)
    yield
