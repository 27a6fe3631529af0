"""Rendering helpers for menu rows, cart rows and totals."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from foodorder.config import CURRENCY
from foodorder.models import CartLine, Category, MenuItem

AVAILABLE_STYLE = "#27ae60"
UNAVAILABLE_STYLE = "dim #95a5a6"


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tabs."""
    if category is Category.STARTERS:
        return "bold #ffffff on #b23a48"
    if category is Category.MAIN_COURSE:
        return "bold #ffffff on #2f6db5"
    if category is Category.BEVERAGES:
        return "bold #0b1f0f on #5fbf72"
    return "bold #1f1400 on #f39c12"


def format_category_tabs(categories: list[Category], active: Category) -> Text:
    text = Text()
    for idx, category in enumerate(categories):
        if idx > 0:
            text.append(" ")
        label = f" {idx + 1} {category.value} "
        if category is active:
            text.append(label, style=badge_style(category))
        else:
            text.append(label, style="dim")
    return text


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY} {amount:.2f}"


def format_menu_item(item: MenuItem) -> Text:
    """Name, price and an availability tag; unavailable rows are dimmed."""
    text = Text()
    if item.available:
        text.append(item.name)
        text.append(f"  {format_money(item.price)}", style="bold")
        text.append("  [Available]", style=AVAILABLE_STYLE)
    else:
        text.append(item.name, style=UNAVAILABLE_STYLE)
        text.append(f"  {format_money(item.price)}", style=UNAVAILABLE_STYLE)
        text.append("  [Unavailable]", style=UNAVAILABLE_STYLE)
    return text


def format_cart_line(line: CartLine) -> Text:
    text = Text()
    text.append(line.name)
    text.append(f"  x  {line.quantity}", style="bold")
    text.append(f"  {format_money(line.line_total)}", style="dim")
    return text


def format_total(total: Decimal) -> Text:
    return Text(f"Total: {format_money(total)}", style="bold #e74c3c")
