import pytest

from cupcake_corner.models import Order, compute_total_cost


def test_default_order_values():
    """A fresh order starts with the first flavour, three cakes and no extras."""
    order = Order()
    assert order.cake_type_index == 0
    assert order.quantity == 3
    assert order.is_showing_cake_toppings is False
    assert order.has_extra_frosting is False
    assert order.has_sprinkles is False
    assert order.name == order.street_address == order.city == order.zip_code == ""


def test_total_cost_base():
    """Three plain cakes of the first flavour cost 6."""
    assert Order().total_cost == 6.0


def test_total_cost_with_toppings():
    """Frosting adds 1 per cake, sprinkles add 0.5 per cake.

    Toppings have to be shown before a topping can be switched on.
    """
    order = Order()
    order.set_showing_toppings(True)
    order.has_extra_frosting = True
    assert order.total_cost == 9.0
    order.has_sprinkles = True
    assert order.total_cost == 10.5


def test_total_cost_includes_cake_type_surcharge():
    order = Order(cake_type_index=3, quantity=5)
    assert order.compute_total_cost() == 5 * 2.0 + 1.5


def test_total_cost_out_of_range_quantity_is_still_defined():
    assert compute_total_cost(Order(quantity=0)) == 0.0
    assert compute_total_cost(Order(quantity=10)) == 20.0


def test_hiding_toppings_clears_both():
    """Turning toppings off always resets frosting and sprinkles."""
    order = Order()
    order.is_showing_cake_toppings = True
    order.has_extra_frosting = True
    order.has_sprinkles = True

    order.is_showing_cake_toppings = False

    assert order.has_extra_frosting is False
    assert order.has_sprinkles is False


def test_hiding_toppings_when_already_hidden_keeps_them_off():
    order = Order()
    order.set_showing_toppings(False)
    assert order.has_extra_frosting is False
    assert order.has_sprinkles is False


def test_enabling_topping_while_hidden_is_rejected():
    order = Order()
    with pytest.raises(ValueError):
        order.has_sprinkles = True
    assert order.has_sprinkles is False


def test_disabling_topping_while_hidden_is_allowed():
    order = Order()
    order.has_extra_frosting = False
    assert order.has_extra_frosting is False


@pytest.mark.parametrize("missing", ["name", "street_address", "zip_code"])
def test_address_invalid_when_required_field_empty(missing):
    order = Order(name="Dorothy", street_address="1 Yellow Brick Rd", city="Emerald", zip_code="12345")
    setattr(order, missing, "")
    assert order.has_valid_address is False
    assert order.is_address_valid() is False


def test_address_valid_without_city():
    order = Order(name="Dorothy", street_address="1 Yellow Brick Rd", zip_code="12345")
    assert order.has_valid_address is True


def test_subscribers_receive_changed_field_names():
    order = Order()
    changes = []
    order.subscribe(changes.append)

    order.quantity = 4
    order.quantity = 4
    order.name = "Dorothy"

    assert changes == ["quantity", "name"]


def test_hiding_toppings_notifies_for_cleared_toppings():
    order = Order()
    order.is_showing_cake_toppings = True
    order.has_sprinkles = True
    changes = []
    order.subscribe(changes.append)

    order.is_showing_cake_toppings = False

    assert changes == ["is_showing_cake_toppings", "has_sprinkles"]


def test_unsubscribe_stops_notifications():
    order = Order()
    changes = []
    unsubscribe = order.subscribe(changes.append)
    unsubscribe()
    order.city = "Kansas"
    assert changes == []


def test_constructor_keeps_values_verbatim():
    """Decoded orders may be inconsistent; the constructor does not repair them."""
    order = Order(is_showing_cake_toppings=False, has_extra_frosting=True)
    assert order.has_extra_frosting is True


def test_constructor_rejects_unknown_fields():
    with pytest.raises(TypeError):
        Order(base_price=3.0)


def test_snapshot_round_trip():
    order = Order(cake_type_index=2, quantity=4, name="Dorothy")
    snapshot = order.snapshot()
    assert snapshot.cake_type_index == 2
    assert Order.from_snapshot(snapshot) == order


def test_snapshot_is_detached_from_live_order():
    order = Order()
    snapshot = order.snapshot()
    order.quantity = 5
    assert snapshot.quantity == 3


def test_cake_type_name():
    assert Order(cake_type_index=2).cake_type == "Vanilla"
    assert Order(cake_type_index=9).cake_type is None


def test_hiding_toppings_repairs_inconsistent_order():
    order = Order(is_showing_cake_toppings=False, has_extra_frosting=True, has_sprinkles=True)
    order.set_showing_toppings(False)
    assert order.has_extra_frosting is False
    assert order.has_sprinkles is False
