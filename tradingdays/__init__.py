# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Trading days left in the year for US equity markets."""

__version__ = "0.1.0"
