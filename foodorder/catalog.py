"""Static menu catalog."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Iterator

from foodorder.constant import CATEGORY_LABELS, MENU_ROWS_BY_CATEGORY
from foodorder.errors import ItemNotFound
from foodorder.models import Category, MenuItem

logger = logging.getLogger(__name__)


def parse_category(value: Category | str) -> Category:
    """Accept a Category or its display label."""
    if isinstance(value, Category):
        return value
    return Category(value)


class MenuCatalog:
    """Name-keyed menu items, grouped by category in insertion order."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        self._items: dict[str, MenuItem] = {}
        for item in items:
            if item.name in self._items:
                raise ValueError(f"Duplicate menu item name: {item.name!r}")
            self._items[item.name] = item

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items.values())

    def categories(self) -> list[Category]:
        seen: list[Category] = []
        for item in self._items.values():
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def get_by_category(self, category: Category | str) -> list[MenuItem]:
        wanted = parse_category(category)
        return [item for item in self._items.values() if item.category is wanted]

    def lookup(self, name: str) -> MenuItem | None:
        return self._items.get(name)

    def get(self, name: str) -> MenuItem:
        item = self._items.get(name)
        if item is None:
            raise ItemNotFound(name)
        return item

    def mark_popularity(self, name: str) -> None:
        item = self._items.get(name)
        if item is None:
            logger.debug("mark_popularity ignored unknown item %r", name)
            return
        item.popularity += 1

    def available_combos(self) -> list[MenuItem]:
        """Combos that can be offered in place of an unavailable item."""
        return [item for item in self.get_by_category(Category.COMBOS) if item.available]

    def most_popular(self, limit: int = 5) -> list[MenuItem]:
        """Items ordered at least once, most popular first; ties keep menu order."""
        ordered = [item for item in self._items.values() if item.popularity > 0]
        ordered.sort(key=lambda item: item.popularity, reverse=True)
        return ordered[: max(0, limit)]


def default_catalog() -> MenuCatalog:
    """Build a fresh catalog from the static menu table."""
    items = [
        MenuItem(
            name=name,
            price=Decimal(price),
            category=Category(CATEGORY_LABELS[category_id]),
            available=available,
        )
        for category_id, rows in MENU_ROWS_BY_CATEGORY.items()
        for name, price, available in rows
    ]
    return MenuCatalog(items)
