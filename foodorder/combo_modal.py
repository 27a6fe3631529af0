"""Combo picker modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from foodorder.models import MenuItem
from foodorder.rendering import format_money


class ComboModal(ModalScreen[str | None]):
    """Offer the available combos; dismisses with the chosen combo name or None."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "choose", "Add combo"),
    ]

    CSS = """
    ComboModal {
        align: center middle;
        background: $background 60%;
    }

    #combo-dialog {
        width: 84;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #combo-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #combo-body {
        margin-bottom: 1;
        color: white;
    }

    #combo-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, combos: list[MenuItem], unavailable_name: str | None = None) -> None:
        super().__init__()
        self.combos = combos
        self.unavailable_name = unavailable_name

    def compose(self) -> ComposeResult:
        with Container(id="combo-dialog"):
            yield Static("Select a Combo", id="combo-title")
            yield Static(id="combo-body")
            yield Static("J/K/↑/↓ move, Enter add, Esc/q/Ctrl+C close", id="combo-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        if not self.combos:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.combos)
        self._refresh_content()

    def action_choose(self) -> None:
        if not self.combos:
            self.dismiss(None)
            return
        self.dismiss(self.combos[self.cursor_index].name)

    def _refresh_content(self) -> None:
        body = self.query_one("#combo-body", Static)

        content = Text(style="white")
        if self.unavailable_name:
            content.append(f"{self.unavailable_name} is currently unavailable.\n", style="bold #e74c3c")
            content.append("Would you like one of our combos instead?\n\n")

        if not self.combos:
            content.append("No combo meals available.")
            body.update(content)
            return

        for idx, combo in enumerate(self.combos):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            style = "bold white" if idx == self.cursor_index else "white"
            content.append(f"{pointer}{combo.name} - {format_money(combo.price)}", style=style)
        body.update(content)
