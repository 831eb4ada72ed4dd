"""Main Textual app class."""

from __future__ import annotations

import httpx
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import ModalScreen, Screen
from textual.widgets import Header, Static

from cupcake_corner.address_modal import AddressModal
from cupcake_corner.constant import QUANTITY_MAX, QUANTITY_MIN
from cupcake_corner.data import clamp_quantity, cycle_cake_type_index
from cupcake_corner.debug_log import log_debug
from cupcake_corner.models import Order
from cupcake_corner.rendering import checkbox, format_cost, format_order_summary

_CAKE_TYPE_ROW = "cake_type"
_QUANTITY_ROW = "quantity"
_TOPPINGS_ROW = "toppings"
_FROSTING_ROW = "frosting"
_SPRINKLES_ROW = "sprinkles"
_DELIVERY_ROW = "delivery"


class CupcakeCornerApp(App):
    """A Textual order form for configuring and submitting one cupcake order."""

    TITLE = "Cupcake Corner"
    SUB_TITLE = "Order form"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #form-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #summary-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #form-rows {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    cursor_index = reactive(0)

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("j", "move_cursor(1)", "Next"),
        ("left", "adjust(-1)", "Decrease"),
        ("right", "adjust(1)", "Increase"),
        ("minus", "adjust(-1)", "Decrease"),
        ("plus", "adjust(1)", "Increase"),
        ("enter", "activate", "Select"),
        ("space", "activate", "Select"),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        order: Order | None = None,
        *,
        order_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__()
        self.order = order if order is not None else Order()
        self.order_url = order_url
        self.http_client = http_client
        self._unsubscribe = self.order.subscribe(self._on_order_changed)
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="form-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static(id="form-rows")
            with Vertical(id="summary-pane"):
                yield Static("Summary", classes="pane-title")
                yield Static(id="summary")
                yield Static(id="status-bar")

    def on_mount(self) -> None:
        log_debug(f"on_mount order={self.order!r}")
        self._refresh_all()

    def on_unmount(self) -> None:
        self._unsubscribe()

    def action_move_cursor(self, delta: int) -> None:
        if self._modal_open():
            return
        rows = self._rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_form()

    def action_adjust(self, delta: int) -> None:
        if self._modal_open():
            return
        row = self._current_row()
        if row == _CAKE_TYPE_ROW:
            self.order.cake_type_index = cycle_cake_type_index(self.order.cake_type_index, delta)
            return
        if row == _QUANTITY_ROW:
            self.order.quantity = clamp_quantity(self.order.quantity + delta)
            return
        if row in {_TOPPINGS_ROW, _FROSTING_ROW, _SPRINKLES_ROW}:
            self.action_activate()

    def action_activate(self) -> None:
        if self._modal_open():
            return
        row = self._current_row()
        if row == _CAKE_TYPE_ROW:
            self.order.cake_type_index = cycle_cake_type_index(self.order.cake_type_index, 1)
            return
        if row == _TOPPINGS_ROW:
            self.order.set_showing_toppings(not self.order.is_showing_cake_toppings)
            return
        if row == _FROSTING_ROW:
            self.order.has_extra_frosting = not self.order.has_extra_frosting
            return
        if row == _SPRINKLES_ROW:
            self.order.has_sprinkles = not self.order.has_sprinkles
            return
        if row == _DELIVERY_ROW:
            log_debug("open_address")
            self.push_screen(AddressModal(self.order, order_url=self.order_url, http_client=self.http_client))

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def _form_screen(self) -> Screen | None:
        # Order changes made inside a modal still refresh the form underneath.
        stack = self.screen_stack
        return stack[0] if stack else None

    def _rows(self) -> list[str]:
        rows = [_CAKE_TYPE_ROW, _QUANTITY_ROW, _TOPPINGS_ROW]
        if self.order.is_showing_cake_toppings:
            rows.extend([_FROSTING_ROW, _SPRINKLES_ROW])
        rows.append(_DELIVERY_ROW)
        return rows

    def _current_row(self) -> str:
        rows = self._rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1
        return rows[self.cursor_index]

    def _on_order_changed(self, field_name: str) -> None:
        log_debug(f"order_changed field={field_name}")
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_form()
        self._refresh_summary()

    def _row_label(self, row: str) -> str:
        order = self.order
        if row == _CAKE_TYPE_ROW:
            return f"Flavor: ◀ {order.cake_type or '?'} ▶"
        if row == _QUANTITY_ROW:
            return f"Quantity: {order.quantity} cupcakes ({QUANTITY_MIN}-{QUANTITY_MAX})"
        if row == _TOPPINGS_ROW:
            return f"{checkbox(order.is_showing_cake_toppings)} Show cake toppings"
        if row == _FROSTING_ROW:
            return f"    {checkbox(order.has_extra_frosting)} Frosting"
        if row == _SPRINKLES_ROW:
            return f"    {checkbox(order.has_sprinkles)} Sprinkles"
        return "Delivery details ›"

    def _refresh_form(self) -> None:
        form_screen = self._form_screen()
        if form_screen is None:
            return
        try:
            rows_widget = form_screen.query_one("#form-rows", Static)
        except NoMatches:
            return

        rows = self._rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1

        lines = Text()
        for idx, row in enumerate(rows):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            style = "bold" if idx == self.cursor_index else ""
            lines.append(f"{pointer}{self._row_label(row)}", style=style)
        rows_widget.update(lines)

    def _refresh_summary(self) -> None:
        form_screen = self._form_screen()
        if form_screen is None:
            return
        try:
            summary = form_screen.query_one("#summary", Static)
            status_bar = form_screen.query_one("#status-bar", Static)
        except NoMatches:
            return
        summary.update(format_order_summary(self.order))
        status_bar.update(
            f"Total {format_cost(self.order.total_cost)}. J/K/↑/↓ move, ←/→ change, Enter select. Ctrl+Q quit."
        )
