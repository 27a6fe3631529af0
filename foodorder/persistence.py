"""Append-only daily text log of finalized orders."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from foodorder.config import CURRENCY, LOG_DIR, LOG_FILE_PREFIX, LOG_FILE_SUFFIX, LOG_SEPARATOR
from foodorder.errors import LogWriteFailure
from foodorder.models import CartLine, Order

logger = logging.getLogger(__name__)


def log_file_name(day: datetime) -> str:
    return f"{LOG_FILE_PREFIX}{day:%Y-%m-%d}{LOG_FILE_SUFFIX}"


def format_record(lines: Iterable[CartLine], total: Decimal, now: datetime) -> str:
    """Render one order block, including the trailing blank line."""
    out = [
        LOG_SEPARATOR,
        f"Date: {now:%d-%m-%Y %I:%M %p}",
        "Items:",
    ]
    for line in lines:
        out.append(f"- {line.name} x {line.quantity} : {CURRENCY} {line.line_total:.2f}")
    out.append(f"Total: {CURRENCY} {total:.2f}")
    out.append(LOG_SEPARATOR)
    return "\n".join(out) + "\n\n"


class OrderLogger:
    """Writes one block per checkout to `<log_dir>/orders_<YYYY-MM-DD>.txt`."""

    def __init__(self, log_dir: str | Path = LOG_DIR) -> None:
        self.log_dir = Path(log_dir)

    def path_for(self, day: datetime) -> Path:
        return self.log_dir / log_file_name(day)

    def append_record(self, lines: Iterable[CartLine], order: Order, now: datetime | None = None) -> Path:
        """Append the order block and return the file written to."""
        now = now or order.placed_at
        path = self.path_for(now)
        record = format_record(lines, order.total_amount, now)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as fh:
                fh.write(record)
        except OSError as exc:
            raise LogWriteFailure(path, exc) from exc

        logger.info("order %d logged to %s", order.order_id, path)
        return path
