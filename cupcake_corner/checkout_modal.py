"""Checkout modal screen."""

from __future__ import annotations

import httpx
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from cupcake_corner.debug_log import log_debug
from cupcake_corner.models import Order
from cupcake_corner.rendering import format_cost, format_order_summary, format_submission
from cupcake_corner.submission import OrderSubmission, SubmissionError


class CheckoutModal(ModalScreen[None]):
    """Show the order total and place the order with the configured endpoint."""

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #checkout-total {
        color: white;
        margin-bottom: 1;
    }

    #checkout-status {
        margin-bottom: 1;
    }

    #checkout-help {
        color: #dddddd;
    }
    """

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
        self.submission: OrderSubmission | None = None

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Checkout", id="checkout-title")
            yield Static(id="checkout-total")
            yield Static(id="checkout-status")
            yield Static("Enter / Ctrl+S place order. Esc/q back.", id="checkout-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q"}:
            self.dismiss()
            event.stop()
            return

        if event.key in {"enter", "ctrl+s"}:
            self.place_order()
            event.stop()

    def place_order(self) -> None:
        if self.submission is not None and not self.submission.is_finished:
            log_debug("place_order_blocked reason=sending")
            return
        self.submission = OrderSubmission(self.order, url=self.order_url, client=self.http_client)
        log_debug(f"place_order total={self.order.total_cost}")
        # Owned by the app so dismissing this modal does not cancel the request.
        self.app.run_worker(self._run_submission(self.submission))
        self._refresh_content()

    async def _run_submission(self, submission: OrderSubmission) -> None:
        # Worker coroutines run on the app event loop, so the outcome is
        # applied on the UI flow of control.
        try:
            confirmation = await submission.run()
        except SubmissionError as exc:
            self.app.notify(str(exc), title="Order failed", severity="error")
        else:
            self.app.notify(confirmation.message, title="Thank you!")
        self._refresh_content()

    def _refresh_content(self) -> None:
        try:
            total_widget = self.query_one("#checkout-total", Static)
            status_widget = self.query_one("#checkout-status", Static)
        except NoMatches:
            return

        total = Text()
        total.append_text(format_order_summary(self.order))
        total.append(f"\nYour total order is {format_cost(self.order.total_cost)}")
        total_widget.update(total)

        if self.submission is None:
            status_widget.update("Press Enter to place order.")
            return
        if not self.submission.is_finished:
            status_widget.update("Placing order...")
            return
        status_widget.update(format_submission(self.submission))
