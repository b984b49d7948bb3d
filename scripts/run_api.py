#!/usr/bin/env python3
# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Run the trading days REST API. Serves /health, /api/trading-days, /api/holidays/{year}."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

repo_root = Path(__file__).resolve().parent.parent
load_dotenv(repo_root / ".env")


def main() -> int:
    from tradingdays.core.settings import load_config

    config = load_config()
    parser = argparse.ArgumentParser(description="Run trading days API server")
    parser.add_argument("--host", default=config.api.host, help="Bind host")
    parser.add_argument("--port", type=int, default=config.api.port, help="Port")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    import uvicorn
    from tradingdays.api.server import app

    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
