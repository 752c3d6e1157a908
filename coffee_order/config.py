"""Runtime configuration defaults for rendering and logging."""

from __future__ import annotations

import os

CURRENCY_SYMBOL = "$"
ORDER_HEADER = "Order of"
ORDER_LINE_PREFIX = "  - "

LOG_LEVEL_ENV = "COFFEE_ORDER_LOG_LEVEL"
LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
