"""One interactive ordering session: catalog, running order and checkout."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from foodorder.billing import compute_bill
from foodorder.cart import OrderAccumulator
from foodorder.catalog import MenuCatalog, default_catalog, parse_category
from foodorder.config import ABORT_ON_LOG_FAILURE
from foodorder.errors import EmptyCartOnCheckout, LogWriteFailure
from foodorder.models import CartSnapshot, Category, CheckoutResult, MenuItem, Order, OrderStatus
from foodorder.persistence import OrderLogger

logger = logging.getLogger(__name__)


class OrderSession:
    """
    Everything the UI needs to take orders.

    Checkout freezes the running order into an immutable `Order` and starts
    a fresh accumulator, so a finalized order is never mutated afterwards.
    """

    def __init__(
        self,
        catalog: MenuCatalog | None = None,
        order_logger: OrderLogger | None = None,
        abort_on_log_failure: bool = ABORT_ON_LOG_FAILURE,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.order_logger = order_logger if order_logger is not None else OrderLogger()
        self.abort_on_log_failure = abort_on_log_failure
        self.accumulator = OrderAccumulator(self.catalog)
        self.last_order: Order | None = None
        self._next_order_id = 1

    def list_categories(self) -> list[Category]:
        return self.catalog.categories()

    def list_items_in_category(self, category: Category | str) -> list[MenuItem]:
        return self.catalog.get_by_category(parse_category(category))

    def available_combos(self) -> list[MenuItem]:
        return self.catalog.available_combos()

    def most_popular(self, limit: int = 5) -> list[MenuItem]:
        return self.catalog.most_popular(limit)

    def add_unit(self, name: str) -> MenuItem:
        """Add one unit of `name`. Raises ItemNotFound or ItemUnavailable."""
        item = self.catalog.get(name)
        self.accumulator.add_unit(item)
        return item

    def remove_unit(self, name: str) -> None:
        self.accumulator.remove_unit(name)

    def get_total(self) -> Decimal:
        return self.accumulator.get_total()

    def get_cart_snapshot(self) -> CartSnapshot:
        return self.accumulator.snapshot()

    def checkout(self, now: datetime | None = None) -> CheckoutResult:
        """
        Bill, log and finalize the current order.

        An empty cart raises EmptyCartOnCheckout and changes nothing. A failed
        log write is returned as `warning` unless `abort_on_log_failure` is
        set, in which case LogWriteFailure propagates and the cart is kept.
        """
        if self.accumulator.is_empty():
            raise EmptyCartOnCheckout()

        now = now or datetime.now()
        lines = self.accumulator.lines()
        bill = compute_bill(self.accumulator.get_total())
        order = Order(
            order_id=self._next_order_id,
            items=tuple(item.name for item in self.accumulator.items),
            lines=lines,
            total_amount=self.accumulator.get_total(),
            status=OrderStatus.COMPLETED,
            placed_at=now,
        )

        log_path: str | None = None
        warning: str | None = None
        try:
            log_path = str(self.order_logger.append_record(lines, order, now))
        except LogWriteFailure as exc:
            if self.abort_on_log_failure:
                logger.error("checkout aborted: %s", exc)
                raise
            logger.warning("checkout continuing without order log: %s", exc)
            warning = str(exc)

        self._next_order_id += 1
        self.last_order = order
        self.accumulator = OrderAccumulator(self.catalog)
        logger.info(
            "checkout order_id=%d units=%d subtotal=%s final=%s",
            order.order_id,
            len(order.items),
            bill.subtotal,
            bill.final_amount,
        )
        return CheckoutResult(order=order, bill=bill, log_path=log_path, warning=warning)

    def reset(self) -> None:
        """Drop the running order without billing it."""
        self.accumulator.clear()
