"""ESC/POS bill printout for completed orders."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from foodorder.billing import format_bill
from foodorder.config import (
    CURRENCY,
    PRINTER_FONT_OVERRIDE_ENV,
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from foodorder.models import Bill, Order

logger = logging.getLogger(__name__)

# Extra vertical headroom so descenders are not clipped on thermal output.
_LINE_EXTRA_PX = 10
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)


def receipt_lines(order: Order, bill: Bill) -> list[str]:
    """Text lines of a printed bill, top to bottom."""
    lines = [
        f"Order #{order.order_id}",
        f"{order.placed_at:%d-%m-%Y %I:%M %p}",
        "",
    ]
    for line in order.lines:
        lines.append(f"{line.name} x {line.quantity}")
        lines.append(f"    {CURRENCY} {line.line_total:.2f}")
    lines.append("")
    # Skip the on-screen title; the order number heads the ticket.
    lines.extend(format_bill(bill).splitlines()[1:])
    return lines


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. FOOD_ORDER_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(PRINTER_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {PRINTER_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies and a font are usable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer unavailable: {exc}")
    return (True, "Printer ready")


def _fit_text_to_px(text: str, font: object, max_width_px: int) -> str:
    from PIL import Image, ImageDraw

    probe = Image.new("1", (1, 1), color=1)
    draw = ImageDraw.Draw(probe)
    if draw.textbbox((0, 0), text, font=font)[2] <= max_width_px:
        return text
    ellipsis = "..."
    trimmed = text
    while trimmed:
        candidate = f"{trimmed}{ellipsis}"
        if draw.textbbox((0, 0), candidate, font=font)[2] <= max_width_px:
            return candidate
        trimmed = trimmed[:-1]
    return ellipsis


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    probe = ImageDraw.Draw(Image.new("1", (1, 1), color=1))
    max_width = PRINTER_WIDTH_PX - PRINTER_LEFT_INDENT_PX
    fitted = _fit_text_to_px(text, font, max_width)
    bbox = probe.textbbox((0, 0), fitted or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(12, text_height + _LINE_EXTRA_PX)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so the glyphs sit inside the canvas.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), fitted, font=font, fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def print_bill(order: Order, bill: Bill, printer: object | None = None, font: object | None = None) -> None:
    """Print the bill for `order` and cut the ticket."""
    try:
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    if printer is None:
        try:
            from escpos.printer import Usb
        except Exception as exc:
            raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc
        printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    if font is None:
        font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)

    for text in receipt_lines(order, bill):
        printer.image(_render_line(text, font))
    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
    logger.info("order %d printed", order.order_id)
