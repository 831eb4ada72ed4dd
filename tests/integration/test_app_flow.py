import asyncio
import json

import httpx
import pytest

from cupcake_corner.address_modal import AddressModal
from cupcake_corner.checkout_modal import CheckoutModal
from cupcake_corner.cupcake_app import CupcakeCornerApp
from cupcake_corner.models import Order
from cupcake_corner.submission import SubmissionState


def _echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=json.loads(request.content))


@pytest.mark.asyncio
async def test_form_edits_update_order():
    app = CupcakeCornerApp()
    async with app.run_test() as pilot:
        await pilot.press("right")
        assert app.order.cake_type_index == 1

        await pilot.press("down", "right", "right", "right")
        assert app.order.quantity == 5

        await pilot.press("down", "enter")
        assert app.order.is_showing_cake_toppings is True

        await pilot.press("down", "enter", "down", "enter")
        assert app.order.has_extra_frosting is True
        assert app.order.has_sprinkles is True

        await pilot.press("up", "up", "enter")
        assert app.order.is_showing_cake_toppings is False
        assert app.order.has_extra_frosting is False
        assert app.order.has_sprinkles is False


@pytest.mark.asyncio
async def test_address_entry_and_checkout_gate():
    app = CupcakeCornerApp()
    async with app.run_test() as pilot:
        await pilot.press("up", "enter")
        assert isinstance(app.screen, AddressModal)

        await pilot.press("d", "o", "t")
        assert app.order.name == "dot"

        await pilot.press("down", "down", "down", "down", "enter")
        assert isinstance(app.screen, AddressModal)

        await pilot.press("up", "up", "up", "1", "down", "down", "9", "backspace", "1")
        assert app.order.street_address == "1"
        assert app.order.zip_code == "1"

        await pilot.press("down", "enter")
        assert isinstance(app.screen, CheckoutModal)


@pytest.mark.asyncio
async def test_checkout_places_order():
    order = Order(name="Dot", street_address="1 Main St", zip_code="12345")
    async with httpx.AsyncClient(transport=httpx.MockTransport(_echo)) as client:
        app = CupcakeCornerApp(order, order_url="http://cupcakes.test/api/cupcakes", http_client=client)
        async with app.run_test() as pilot:
            app.push_screen(CheckoutModal(order, order_url=app.order_url, http_client=client))
            await pilot.pause()
            await pilot.press("enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            checkout = app.screen
            assert isinstance(checkout, CheckoutModal)
            assert checkout.submission.state is SubmissionState.CONFIRMED
            assert checkout.submission.confirmation.cake_type == "Apple Cinnamon"


@pytest.mark.asyncio
async def test_closing_checkout_does_not_cancel_order_in_flight():
    """Dismissing checkout mid-send still lets the order finish."""
    handled = []

    async def slow_echo(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(0.3)
        handled.append(request)
        return _echo(request)

    order = Order(name="Dot", street_address="1 Main St", zip_code="12345")
    async with httpx.AsyncClient(transport=httpx.MockTransport(slow_echo)) as client:
        app = CupcakeCornerApp(order, order_url="http://cupcakes.test/api/cupcakes", http_client=client)
        async with app.run_test() as pilot:
            checkout = CheckoutModal(order, order_url=app.order_url, http_client=client)
            app.push_screen(checkout)
            await pilot.pause()
            await pilot.press("enter")
            await pilot.press("escape")
            assert not isinstance(app.screen, CheckoutModal)

            await app.workers.wait_for_complete()
            await pilot.pause()

            assert len(handled) == 1
            assert checkout.submission.is_finished
            assert checkout.submission.state is SubmissionState.CONFIRMED
