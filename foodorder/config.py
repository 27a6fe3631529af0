"""Runtime configuration defaults for billing, order logs and printing."""

from __future__ import annotations

import os
from decimal import Decimal

# Billing.
TAX_RATE = Decimal("0.05")
DISCOUNT_RATE = Decimal("0.10")
DISCOUNT_THRESHOLD = Decimal("500")
CURRENCY = "Rs."

# Daily order log.
LOG_DIR = os.environ.get("FOOD_ORDER_LOG_DIR", ".")
LOG_FILE_PREFIX = "orders_"
LOG_FILE_SUFFIX = ".txt"
LOG_SEPARATOR = "-" * 30
# Checkout proceeds when the order log cannot be written unless this is set.
ABORT_ON_LOG_FAILURE = False

# Application debug log. The terminal belongs to the UI, so log to a file.
DEBUG_LOG_PATH = os.environ.get("FOOD_ORDER_DEBUG_LOG", "/tmp/food-order-debug.log")

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 28
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_FONT_OVERRIDE_ENV = "FOOD_ORDER_PRINTER_FONT_PATH"
PRINTER_LEFT_INDENT_PX = 16
PRINTER_TAIL_SPACER_PX = 70
