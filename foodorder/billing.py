"""Tax and discount computation for a cart subtotal."""

from __future__ import annotations

from decimal import Decimal

from foodorder.config import CURRENCY, DISCOUNT_RATE, DISCOUNT_THRESHOLD, TAX_RATE
from foodorder.models import Bill


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert without picking up binary float noise (500.01 stays 500.01)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_bill(subtotal: Decimal | int | float | str) -> Bill:
    """Apply tax, and the bulk discount when the subtotal exceeds the threshold."""
    amount = to_decimal(subtotal)
    tax = amount * TAX_RATE
    discount = amount * DISCOUNT_RATE if amount > DISCOUNT_THRESHOLD else Decimal("0")
    return Bill(subtotal=amount, tax=tax, discount=discount, final_amount=amount + tax - discount)


def _percent(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"


def format_bill(bill: Bill) -> str:
    """Render the bill summary shown after checkout."""
    rule = "=" * 23
    lines = [
        "Order Summary",
        rule,
        f"Subtotal: {CURRENCY} {bill.subtotal:.2f}",
        f"Tax ({_percent(TAX_RATE)}): {CURRENCY} {bill.tax:.2f}",
    ]
    if bill.discount > 0:
        lines.append(f"Discount ({_percent(DISCOUNT_RATE)}): {CURRENCY} {bill.discount:.2f}")
    lines.append(rule)
    lines.append(f"Final Amount: {CURRENCY} {bill.final_amount:.2f}")
    return "\n".join(lines)
