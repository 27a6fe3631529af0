"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from foodorder.bill_modal import BillModal
from foodorder.combo_modal import ComboModal
from foodorder.constant import (
    STATUS_COMBO_ADDED,
    STATUS_COMPLETED,
    STATUS_ITEMS_ADDED,
    STATUS_PROCESSING,
    STATUS_READY,
)
from foodorder.errors import EmptyCartOnCheckout, ItemNotFound, ItemUnavailable, LogWriteFailure
from foodorder.models import Category, MenuItem
from foodorder.printer import check_printer_dependencies, print_bill
from foodorder.rendering import format_cart_line, format_category_tabs, format_menu_item, format_total
from foodorder.session import OrderSession

logger = logging.getLogger(__name__)


class FoodOrderApp(App):
    """A Textual app for browsing the menu, filling a cart and checking out."""

    TITLE = "Food Order"
    SUB_TITLE = "Menu / Cart / Bill"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #category-bar {
        height: 1;
        margin-bottom: 1;
    }

    #items-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #total {
        border: heavy $primary;
        padding: 0 1;
        height: 3;
    }

    #status-bar {
        height: 2;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    category_index = reactive(0)
    selected_index = reactive(0)
    cart_selected_index = reactive(None)

    BINDINGS = [
        ("left", "cycle_category(-1)", "Previous category"),
        ("right", "cycle_category(1)", "Next category"),
        ("up", "cycle_items(-1)", "Previous item"),
        ("down", "cycle_items(1)", "Next item"),
        ("enter", "add_selected", "Add item"),
        ("c", "show_combos", "Combos"),
        ("j", "move_cart_selection(1)", "Next cart row"),
        ("k", "move_cart_selection(-1)", "Previous cart row"),
        ("d", "remove_selected", "Remove one"),
        Binding("ctrl+s", "checkout", "Place order", priority=True),
        ("ctrl+r", "reset_order", "Reset order"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: OrderSession | None = None, printer_enabled: bool | None = None) -> None:
        super().__init__()
        self.session = session if session is not None else OrderSession()
        self.categories: list[Category] = self.session.list_categories()
        self.printer_enabled = printer_enabled
        self.status_message = STATUS_READY

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Menu", classes="pane-title")
                yield Static(id="category-bar")
                yield Static(id="items-list")
            with Vertical(id="cart-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static("(cart is empty)", id="cart-list")
                yield Static(id="total")
                yield Static(id="status-bar")

    def on_mount(self) -> None:
        if self.printer_enabled is None:
            ready, msg = check_printer_dependencies()
            self.printer_enabled = ready
            logger.info("printer status: %s", msg)
        self._refresh_all()

    @property
    def current_category(self) -> Category:
        return self.categories[self.category_index]

    def visible_items(self) -> list[MenuItem]:
        return self.session.list_items_in_category(self.current_category)

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return
        if not event.is_printable or not event.character or not event.character.isdigit():
            return

        idx = int(event.character) - 1
        if 0 <= idx < len(self.categories):
            self._select_category(idx)
            event.stop()

    def action_cycle_category(self, delta: int) -> None:
        if self._modal_open():
            return
        self._select_category((self.category_index + delta) % len(self.categories))

    def action_cycle_items(self, delta: int) -> None:
        if self._modal_open():
            return
        items = self.visible_items()
        if not items:
            self.selected_index = 0
            return
        self.selected_index = (self.selected_index + delta) % len(items)
        self._refresh_items()

    def action_add_selected(self) -> None:
        if self._modal_open():
            return
        items = self.visible_items()
        if not items:
            return
        self._add_item(items[self.selected_index].name)

    def action_show_combos(self) -> None:
        if self._modal_open():
            return
        self._open_combo_picker(None)

    def action_move_cart_selection(self, delta: int) -> None:
        if self._modal_open():
            return
        lines = self.session.get_cart_snapshot().lines
        if not lines:
            return

        if self.cart_selected_index is None:
            self.cart_selected_index = 0 if delta > 0 else len(lines) - 1
        else:
            self.cart_selected_index = (self.cart_selected_index + delta) % len(lines)
        self._refresh_cart()

    def action_remove_selected(self) -> None:
        if self._modal_open():
            return
        lines = self.session.get_cart_snapshot().lines
        if not lines or self.cart_selected_index is None:
            return
        if not (0 <= self.cart_selected_index < len(lines)):
            self.cart_selected_index = None
            self._refresh_cart()
            return

        self.session.remove_unit(lines[self.cart_selected_index].name)
        self._refresh_cart()

    def action_checkout(self) -> None:
        if self._modal_open():
            return

        self.status_message = STATUS_PROCESSING
        self._refresh_status()
        try:
            result = self.session.checkout()
        except EmptyCartOnCheckout:
            self.status_message = "Your cart is empty! Add items before placing the order."
            self._refresh_status()
            return
        except LogWriteFailure as exc:
            self.status_message = f"Order not placed: {exc}"
            self._refresh_status()
            return

        status = STATUS_COMPLETED
        if result.warning:
            status = f"{STATUS_COMPLETED} (log not written)"
        if self.printer_enabled:
            try:
                print_bill(result.order, result.bill)
            except Exception as exc:
                logger.warning("print failed for order %d: %s", result.order.order_id, exc)
                status = f"{status}, print failed: {exc}"

        self.status_message = status
        self.cart_selected_index = None
        self._refresh_all()
        self.push_screen(BillModal(result))

    def action_reset_order(self) -> None:
        if self._modal_open():
            return
        self.session.reset()
        self.cart_selected_index = None
        self.status_message = STATUS_READY
        self._refresh_all()

    def _select_category(self, idx: int) -> None:
        self.category_index = idx
        self.selected_index = 0
        self._refresh_menu()

    def _add_item(self, name: str) -> None:
        try:
            item = self.session.add_unit(name)
        except ItemNotFound:
            return
        except ItemUnavailable:
            self._open_combo_picker(name)
            return

        names = [line.name for line in self.session.get_cart_snapshot().lines]
        self.cart_selected_index = names.index(item.name)
        self.status_message = STATUS_COMBO_ADDED if item.is_combo else STATUS_ITEMS_ADDED
        self._refresh_cart()
        self._refresh_status()

    def _open_combo_picker(self, unavailable_name: str | None) -> None:
        combos = self.session.available_combos()
        self.push_screen(ComboModal(combos, unavailable_name), self._on_combo_chosen)

    def _on_combo_chosen(self, name: str | None) -> None:
        if name is None:
            return
        self._add_item(name)

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_cart()
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            bar = self.query_one("#category-bar", Static)
        except NoMatches:
            return
        bar.update(format_category_tabs(self.categories, self.current_category))
        self._refresh_items()

    def _refresh_items(self) -> None:
        items_widget = self.query_one("#items-list", Static)
        items = self.visible_items()
        if not items:
            items_widget.update("No items")
            return

        if self.selected_index >= len(items):
            self.selected_index = 0

        visible_rows = self._visible_rows(items_widget)
        start, end = self._window_bounds(len(items), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_menu_item(items[idx]))

        if end < len(items):
            lines.append("\n⋮", style="dim")

        items_widget.update(lines)

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
            total_widget = self.query_one("#total", Static)
        except NoMatches:
            return

        snapshot = self.session.get_cart_snapshot()
        total_widget.update(format_total(snapshot.total))
        if snapshot.is_empty:
            self.cart_selected_index = None
            cart_widget.update("(cart is empty)")
            return

        if self.cart_selected_index is not None and self.cart_selected_index >= len(snapshot.lines):
            self.cart_selected_index = len(snapshot.lines) - 1

        visible_rows = self._visible_rows(cart_widget)
        start, end = self._window_bounds(len(snapshot.lines), visible_rows, self.cart_selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.cart_selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_cart_line(snapshot.lines[idx]))

        if end < len(snapshot.lines):
            lines.append("\n⋮", style="dim")

        cart_widget.update(lines)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        text = Text()
        text.append(f"Status: {self.status_message}", style="bold")
        popular = self.session.most_popular(3)
        if popular:
            text.append("\nPopular: ", style="dim")
            text.append(", ".join(item.name for item in popular), style="dim")
        bar.update(text)
