"""Unit tests for the daily order log."""

from datetime import datetime
from decimal import Decimal

import pytest

from foodorder.errors import LogWriteFailure
from foodorder.models import CartLine, Order, OrderStatus
from foodorder.persistence import OrderLogger, format_record, log_file_name


def _order(now, lines):
    items = tuple(line.name for line in lines for _ in range(line.quantity))
    total = sum((line.line_total for line in lines), Decimal("0"))
    return Order(
        order_id=1,
        items=items,
        lines=tuple(lines),
        total_amount=total,
        status=OrderStatus.COMPLETED,
        placed_at=now,
    )


LINES = [
    CartLine("Coke", 2, Decimal("50")),
    CartLine("Paneer Tikka", 1, Decimal("180")),
]

EXPECTED_BLOCK = (
    "------------------------------\n"
    "Date: 18-10-2026 02:05 PM\n"
    "Items:\n"
    "- Coke x 2 : Rs. 100.00\n"
    "- Paneer Tikka x 1 : Rs. 180.00\n"
    "Total: Rs. 280.00\n"
    "------------------------------\n"
    "\n"
)


class TestFormatting:
    """Test file naming and block layout."""

    def test_log_file_name(self, fixed_now):
        assert log_file_name(fixed_now) == "orders_2026-10-18.txt"

    def test_format_record(self, fixed_now):
        assert format_record(LINES, Decimal("280"), fixed_now) == EXPECTED_BLOCK

    def test_morning_time(self):
        record = format_record(LINES, Decimal("280"), datetime(2026, 1, 2, 9, 30))
        assert "Date: 02-01-2026 09:30 AM\n" in record


class TestOrderLogger:
    """Test appending records to the per-day file."""

    def test_append_creates_directory_and_file(self, order_logger, fixed_now):
        path = order_logger.append_record(LINES, _order(fixed_now, LINES), fixed_now)

        assert path == order_logger.log_dir / "orders_2026-10-18.txt"
        assert path.read_text(encoding="utf-8") == EXPECTED_BLOCK

    def test_records_are_appended(self, order_logger, fixed_now):
        order = _order(fixed_now, LINES)
        order_logger.append_record(LINES, order, fixed_now)
        path = order_logger.append_record(LINES, order, fixed_now)

        assert path.read_text(encoding="utf-8") == EXPECTED_BLOCK * 2

    def test_one_file_per_day(self, order_logger, fixed_now):
        next_day = datetime(2026, 10, 19, 10, 0)
        first = order_logger.append_record(LINES, _order(fixed_now, LINES), fixed_now)
        second = order_logger.append_record(LINES, _order(next_day, LINES), next_day)

        assert first != second
        assert second.name == "orders_2026-10-19.txt"

    def test_defaults_to_order_timestamp(self, order_logger, fixed_now):
        path = order_logger.append_record(LINES, _order(fixed_now, LINES))
        assert path.name == "orders_2026-10-18.txt"

    def test_write_failure_is_wrapped(self, tmp_path, fixed_now):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        order_logger = OrderLogger(blocker / "logs")

        with pytest.raises(LogWriteFailure) as exc_info:
            order_logger.append_record(LINES, _order(fixed_now, LINES), fixed_now)

        assert exc_info.value.path == blocker / "logs" / "orders_2026-10-18.txt"
        assert isinstance(exc_info.value.reason, OSError)
