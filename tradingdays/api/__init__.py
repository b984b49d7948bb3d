# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""REST API: trading days left in the year and the holiday calendar."""
