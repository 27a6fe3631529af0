"""Bill summary modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from foodorder.billing import format_bill
from foodorder.models import CheckoutResult


class BillModal(ModalScreen[None]):
    """Show the bill for a completed checkout."""

    BINDINGS = [
        ("enter", "close", "Close"),
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
    ]

    CSS = """
    BillModal {
        align: center middle;
        background: $background 60%;
    }

    #bill-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #bill-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #bill-body {
        color: white;
        margin-bottom: 1;
    }

    #bill-warning {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #bill-help {
        color: #dddddd;
    }
    """

    def __init__(self, result: CheckoutResult) -> None:
        super().__init__()
        self.result = result

    def compose(self) -> ComposeResult:
        with Container(id="bill-dialog"):
            yield Static(f"Bill Summary - Order #{self.result.order.order_id}", id="bill-title")
            yield Static(Text(format_bill(self.result.bill)), id="bill-body")
            yield Static(Text(self.result.warning or ""), id="bill-warning")
            yield Static("Enter/Esc/q close.", id="bill-help")

    def action_close(self) -> None:
        self.dismiss(None)
