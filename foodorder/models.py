"""Domain models for food-order."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from foodorder.config import CURRENCY


class Category(str, Enum):
    """Menu categories, valued by their display label."""

    STARTERS = "Starters"
    MAIN_COURSE = "Main Course"
    BEVERAGES = "Beverages"
    COMBOS = "Combos"


class OrderStatus(str, Enum):
    PLACED = "PLACED"
    COMPLETED = "COMPLETED"


@dataclass(eq=False)
class MenuItem:
    """An orderable catalog entry. Popularity counts units ever added."""

    name: str
    price: Decimal
    category: Category
    available: bool = True
    popularity: int = 0

    @property
    def is_combo(self) -> bool:
        return self.category is Category.COMBOS


@dataclass(frozen=True)
class CartLine:
    """One cart row: an item name with its unit count."""

    name: str
    quantity: int
    unit_price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only view of the cart handed to the UI."""

    lines: tuple[CartLine, ...]
    total: Decimal
    status: OrderStatus

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class Order:
    """A finalized order produced by checkout."""

    order_id: int
    items: tuple[str, ...]
    lines: tuple[CartLine, ...]
    total_amount: Decimal
    status: OrderStatus
    placed_at: datetime

    def summary(self) -> str:
        """Plain-text summary: id, item names in add order, total and status."""
        return (
            f"Order ID: {self.order_id}\n"
            f"{' '.join(self.items)}\n"
            f"Total: {CURRENCY} {self.total_amount:.2f}\n"
            f"Status: {self.status.value}\n"
        )


@dataclass(frozen=True)
class Bill:
    subtotal: Decimal
    tax: Decimal
    discount: Decimal
    final_amount: Decimal


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a checkout. `warning` is set when the order log failed."""

    order: Order
    bill: Bill
    log_path: str | None = None
    warning: str | None = None
