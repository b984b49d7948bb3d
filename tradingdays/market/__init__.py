# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Market clock: converts instants to US/Eastern wall-clock time."""

from tradingdays.market.market_time import MARKET_TIMEZONE, market_now, to_market_local_time

__all__ = ["MARKET_TIMEZONE", "market_now", "to_market_local_time"]
