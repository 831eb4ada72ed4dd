from cupcake_corner.models import Order
from cupcake_corner.rendering import format_cost, format_order_summary, format_submission
from cupcake_corner.submission import OrderSubmission, SubmissionState, TransportError


def test_format_cost_two_decimals():
    assert format_cost(6.0) == "$6.00"
    assert format_cost(10.5) == "$10.50"


def test_order_summary_lists_extras_and_total():
    order = Order(cake_type_index=1, quantity=4)
    order.set_showing_toppings(True)
    order.has_extra_frosting = True
    order.has_sprinkles = True
    text = format_order_summary(order).plain
    assert "4x Chocolate with extra frosting and sprinkles" in text
    assert "Total: $14.50" in text


def test_order_summary_unknown_cake():
    text = format_order_summary(Order(cake_type_index=7)).plain
    assert "Unknown cake #7" in text


def test_submission_failure_rendering():
    submission = OrderSubmission(Order(), url="http://example.test/orders")
    submission.state = SubmissionState.FAILED
    submission.error = TransportError("No data returned")
    text = format_submission(submission).plain
    assert "FAILED" in text
    assert "No data returned" in text
