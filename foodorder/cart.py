"""Cart quantities and the running order accumulator."""

from __future__ import annotations

import logging
from decimal import Decimal

from foodorder.catalog import MenuCatalog
from foodorder.errors import ItemNotFound, ItemUnavailable
from foodorder.models import CartLine, CartSnapshot, MenuItem, OrderStatus

logger = logging.getLogger(__name__)


class Cart:
    """Item name -> quantity, in first-added order."""

    def __init__(self) -> None:
        self._quantities: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._quantities)

    def __contains__(self, name: object) -> bool:
        return name in self._quantities

    def quantity(self, name: str) -> int:
        return self._quantities.get(name, 0)

    def increment(self, name: str) -> int:
        qty = self._quantities.get(name, 0) + 1
        self._quantities[name] = qty
        return qty

    def decrement(self, name: str) -> int:
        qty = self._quantities.get(name, 0)
        if qty <= 0:
            raise ItemNotFound(name)
        qty -= 1
        if qty == 0:
            del self._quantities[name]
        else:
            self._quantities[name] = qty
        return qty

    def items(self) -> list[tuple[str, int]]:
        return list(self._quantities.items())

    def clear(self) -> None:
        self._quantities.clear()


class OrderAccumulator:
    """
    Units added so far, one entry per unit, with their running total.

    The total always equals the sum of prices in `items`, and the cart holds
    the per-name counts of the same units.
    """

    def __init__(self, catalog: MenuCatalog) -> None:
        self.catalog = catalog
        self.cart = Cart()
        self.items: list[MenuItem] = []
        self.total = Decimal("0")
        self.status = OrderStatus.PLACED

    def add_unit(self, item: MenuItem) -> None:
        if not item.available:
            raise ItemUnavailable(item.name)

        qty = self.cart.increment(item.name)
        self.items.append(item)
        self.total += item.price
        self.catalog.mark_popularity(item.name)
        logger.debug("add_unit name=%r qty=%d total=%s", item.name, qty, self.total)

    def remove_unit(self, name: str) -> None:
        idx = self._last_index(name)
        if idx is None:
            raise ItemNotFound(name)

        item = self.items.pop(idx)
        self.cart.decrement(name)
        self.total -= item.price
        logger.debug("remove_unit name=%r qty=%d total=%s", name, self.cart.quantity(name), self.total)

    def get_total(self) -> Decimal:
        return self.total

    def is_empty(self) -> bool:
        return not self.items

    def lines(self) -> tuple[CartLine, ...]:
        prices = {item.name: item.price for item in self.items}
        return tuple(CartLine(name=name, quantity=qty, unit_price=prices[name]) for name, qty in self.cart.items())

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(lines=self.lines(), total=self.total, status=self.status)

    def clear(self) -> None:
        self.cart.clear()
        self.items.clear()
        self.total = Decimal("0")
        self.status = OrderStatus.PLACED

    def _last_index(self, name: str) -> int | None:
        for idx in range(len(self.items) - 1, -1, -1):
            if self.items[idx].name == name:
                return idx
        return None
