"""Runtime configuration defaults for pricing, checkout, receipts and logging."""

from __future__ import annotations

import os
from pathlib import Path

TAX_RATE = 0.08
CURRENCY_SYMBOL = "$"
PAYMENT_DELAY_SECONDS = 1.5

# A4 page in millimetres; receipt layout coordinates use these units.
RECEIPT_PAGE_WIDTH_MM = 210
RECEIPT_PAGE_HEIGHT_MM = 297
RECEIPT_DPI = 150
RECEIPT_FONT_PATH = "/System/Library/Fonts/Helvetica.ttc"
RECEIPT_OUTPUT_DIR = "receipts"

DEBUG_LOG_PATH = "/tmp/restaurant-order-debug.log"

FONT_PATH_ENV = "RESTAURANT_ORDER_FONT_PATH"
RECEIPT_DIR_ENV = "RESTAURANT_ORDER_RECEIPT_DIR"
DEBUG_LOG_ENV = "RESTAURANT_ORDER_DEBUG_LOG"


def receipt_output_dir() -> Path:
    """Directory receipts are saved into, honouring the env override."""
    override = os.environ.get(RECEIPT_DIR_ENV, "").strip()
    return Path(override or RECEIPT_OUTPUT_DIR)


def debug_log_path() -> Path:
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return Path(override or DEBUG_LOG_PATH)
