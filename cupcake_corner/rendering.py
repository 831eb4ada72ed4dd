"""Rendering helpers for orders and submission outcomes."""

from __future__ import annotations

from rich.text import Text

from cupcake_corner.models import Order
from cupcake_corner.submission import OrderSubmission, SubmissionState


def format_cost(amount: float) -> str:
    """Format a currency amount with two decimals."""
    return f"${amount:.2f}"


def checkbox(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def state_style(state: SubmissionState) -> str:
    """Return a consistent style for submission state badges."""
    if state is SubmissionState.CONFIRMED:
        return "bold #0b1f0f on #5fbf72"
    if state is SubmissionState.FAILED:
        return "bold #ffffff on #b23a48"
    if state is SubmissionState.SENDING:
        return "bold #ffffff on #2f6db5"
    return "bold #ffffff on #555555"


def format_order_summary(order: Order) -> Text:
    """Render a one-block summary of flavour, quantity, extras and total."""
    text = Text()
    text.append(f"{order.quantity}x ", style="bold")
    text.append(order.cake_type or f"Unknown cake #{order.cake_type_index}")

    extras = []
    if order.has_extra_frosting:
        extras.append("extra frosting")
    if order.has_sprinkles:
        extras.append("sprinkles")
    if extras:
        text.append(f" with {' and '.join(extras)}")

    text.append("\nTotal: ")
    text.append(format_cost(order.total_cost), style="bold")
    return text


def format_submission(submission: OrderSubmission) -> Text:
    """Render a submission badge followed by the confirmation or failure message."""
    text = Text()
    text.append(f" {submission.state.value.upper()} ", style=state_style(submission.state))
    if submission.confirmation is not None:
        text.append(f" {submission.confirmation.message}")
    elif submission.error is not None:
        text.append(f" {submission.error}")
    return text
