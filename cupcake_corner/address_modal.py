"""Delivery details modal screen."""

from __future__ import annotations

import httpx
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from cupcake_corner.checkout_modal import CheckoutModal
from cupcake_corner.debug_log import log_debug
from cupcake_corner.models import Order

ADDRESS_FIELDS: list[tuple[str, str]] = [
    ("name", "Name"),
    ("street_address", "Street name and house number"),
    ("city", "City"),
    ("zip_code", "ZIP code"),
]


class AddressModal(ModalScreen[None]):
    """Centered modal to type delivery details and continue to checkout."""

    CSS = """
    AddressModal {
        align: center middle;
        background: $background 60%;
    }

    #address-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #address-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #address-body {
        margin-bottom: 1;
        color: white;
    }

    #address-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        order: Order,
        *,
        order_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__()
        self.order = order
        self.order_url = order_url
        self.http_client = http_client

    def compose(self) -> ComposeResult:
        with Container(id="address-dialog"):
            yield Static("Delivery Details", id="address-title")
            yield Static(id="address-body")
            yield Static(
                "Type to edit. ↑/↓/Tab move. Enter next / check out. Backspace delete. Esc close.",
                id="address-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key == "escape":
            self.dismiss()
            event.stop()
            return

        if event.key in {"up", "shift+tab"}:
            self._move_cursor(-1)
            event.stop()
            return

        if event.key in {"down", "tab"}:
            self._move_cursor(1)
            event.stop()
            return

        if event.key == "enter":
            if self._on_checkout_row():
                self._check_out()
            else:
                self._move_cursor(1)
            event.stop()
            return

        if self._on_checkout_row():
            return

        attr = ADDRESS_FIELDS[self.cursor_index][0]
        if event.key == "backspace":
            value = getattr(self.order, attr)
            if value:
                setattr(self.order, attr, value[:-1])
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            setattr(self.order, attr, getattr(self.order, attr) + event.character)
            self._refresh_content()
            event.stop()

    def _on_checkout_row(self) -> bool:
        return self.cursor_index == len(ADDRESS_FIELDS)

    def _move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % (len(ADDRESS_FIELDS) + 1)
        self._refresh_content()

    def _check_out(self) -> None:
        if not self.order.has_valid_address:
            log_debug("checkout_blocked reason=invalid_address")
            return
        log_debug("open_checkout")
        self.app.push_screen(CheckoutModal(self.order, order_url=self.order_url, http_client=self.http_client))

    def _refresh_content(self) -> None:
        body = self.query_one("#address-body", Static)

        content = Text(style="white")
        for idx, (attr, label) in enumerate(ADDRESS_FIELDS):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            value = getattr(self.order, attr)
            cursor = "|" if idx == self.cursor_index else ""
            content.append(f"{pointer}{label}: ", style="bold white" if idx == self.cursor_index else "white")
            content.append(f"{value}{cursor}")

        content.append("\n\n")
        pointer = "➤ " if self._on_checkout_row() else "  "
        if self.order.has_valid_address:
            content.append(f"{pointer}Check out", style="bold white")
        else:
            content.append(f"{pointer}Check out (name, street and ZIP required)", style="dim")
        body.update(content)
