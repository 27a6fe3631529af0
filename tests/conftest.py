"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from foodorder.catalog import MenuCatalog
from foodorder.models import Category, MenuItem
from foodorder.persistence import OrderLogger
from foodorder.session import OrderSession


@pytest.fixture
def small_catalog():
    """A compact menu with one unavailable dish and one unavailable combo."""
    return MenuCatalog(
        [
            MenuItem("Paneer Tikka", Decimal("180"), Category.STARTERS),
            MenuItem("Spring Roll", Decimal("120"), Category.STARTERS),
            MenuItem("Pasta", Decimal("200"), Category.MAIN_COURSE, available=False),
            MenuItem("Veg Biryani", Decimal("220"), Category.MAIN_COURSE),
            MenuItem("Coke", Decimal("50"), Category.BEVERAGES),
            MenuItem("Chinese Combo (Gobi Manchurian + Veg Noodles)", Decimal("330"), Category.COMBOS),
            MenuItem("Lunch Box Combo (Veg Pulao + Dal Tadka + Plain Rice)", Decimal("340"), Category.COMBOS, available=False),
        ]
    )


@pytest.fixture
def order_logger(tmp_path):
    return OrderLogger(tmp_path / "logs")


@pytest.fixture
def session(small_catalog, order_logger):
    return OrderSession(catalog=small_catalog, order_logger=order_logger)


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 18, 14, 5)
