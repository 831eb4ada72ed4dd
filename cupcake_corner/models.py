"""Domain models for cupcake-corner."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable

from cupcake_corner.constant import (
    BASE_PRICE,
    DEFAULT_CAKE_TYPE_INDEX,
    DEFAULT_QUANTITY,
    EXTRA_FROSTING_PRICE,
    SPRINKLES_PRICE,
)
from cupcake_corner.data import cake_type_for_index

OrderListener = Callable[[str], None]

_TOPPING_FIELDS = ("has_extra_frosting", "has_sprinkles")


@dataclass(frozen=True)
class OrderSnapshot:
    """Immutable copy of the nine wire fields of an order."""

    cake_type_index: int = DEFAULT_CAKE_TYPE_INDEX
    quantity: int = DEFAULT_QUANTITY
    is_showing_cake_toppings: bool = False
    has_extra_frosting: bool = False
    has_sprinkles: bool = False
    name: str = ""
    street_address: str = ""
    city: str = ""
    zip_code: str = ""


ORDER_FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(OrderSnapshot))
_ORDER_DEFAULTS: dict[str, Any] = {f.name: f.default for f in fields(OrderSnapshot)}


class _OrderField:
    """Attribute routed through Order._assign so every write is observed."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Order | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._values[self.name]

    def __set__(self, instance: Order, value: Any) -> None:
        instance._assign(self.name, value)


class Order:
    """
    One in-progress or decoded cupcake order.

    Writes to the nine order fields notify subscribers with the field name.
    Turning ``is_showing_cake_toppings`` off always clears both toppings.

    Toppings must be shown before either topping is switched on: setting
    ``has_extra_frosting`` or ``has_sprinkles`` to True while
    ``is_showing_cake_toppings`` is False raises ``ValueError``. Call
    ``set_showing_toppings(True)`` first.

    The constructor stores values verbatim, so an order built from decoded
    data keeps whatever the server sent, consistent or not.
    """

    cake_type_index = _OrderField()
    quantity = _OrderField()
    is_showing_cake_toppings = _OrderField()
    has_extra_frosting = _OrderField()
    has_sprinkles = _OrderField()
    name = _OrderField()
    street_address = _OrderField()
    city = _OrderField()
    zip_code = _OrderField()

    def __init__(self, **values: Any) -> None:
        unknown = set(values) - set(ORDER_FIELD_NAMES)
        if unknown:
            raise TypeError(f"Unknown order fields: {', '.join(sorted(unknown))}")
        self._values: dict[str, Any] = {**_ORDER_DEFAULTS, **values}
        self._listeners: list[OrderListener] = []

    @classmethod
    def from_snapshot(cls, snapshot: OrderSnapshot) -> Order:
        return cls(**{field_name: getattr(snapshot, field_name) for field_name in ORDER_FIELD_NAMES})

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(**self._values)

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_showing_toppings(self, showing: bool) -> None:
        self.is_showing_cake_toppings = showing

    @property
    def cake_type(self) -> str | None:
        return cake_type_for_index(self.cake_type_index)

    @property
    def has_valid_address(self) -> bool:
        """Name, street and zip are required; city is optional."""
        return bool(self.name) and bool(self.street_address) and bool(self.zip_code)

    def is_address_valid(self) -> bool:
        return self.has_valid_address

    @property
    def total_cost(self) -> float:
        return compute_total_cost(self)

    def compute_total_cost(self) -> float:
        return compute_total_cost(self)

    def _assign(self, field_name: str, value: Any) -> None:
        if field_name in _TOPPING_FIELDS and value and not self.is_showing_cake_toppings:
            raise ValueError(f"Cannot set {field_name} while cake toppings are hidden")

        if self._values[field_name] != value:
            self._values[field_name] = value
            self._notify(field_name)

        # Runs even when the flag was already off, to repair decoded orders.
        if field_name == "is_showing_cake_toppings" and not value:
            for topping in _TOPPING_FIELDS:
                self._assign(topping, False)

    def _notify(self, field_name: str) -> None:
        for listener in list(self._listeners):
            listener(field_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        body = ", ".join(f"{key}={value!r}" for key, value in self._values.items())
        return f"Order({body})"


def compute_total_cost(order: Order | OrderSnapshot) -> float:
    """
    Price an order.

    quantity * base price, plus half the cake type index, plus a per-cake
    surcharge for each selected topping. Plain float arithmetic; rounding is
    left to the display layer.
    """
    cost = order.quantity * BASE_PRICE
    cost += order.cake_type_index / 2
    if order.has_extra_frosting:
        cost += order.quantity * EXTRA_FROSTING_PRICE
    if order.has_sprinkles:
        cost += order.quantity * SPRINKLES_PRICE
    return cost


@dataclass(frozen=True)
class Confirmation:
    """Server-echoed order details shown after a successful submission."""

    order: Order
    quantity: int
    cake_type: str
    total_cost: float

    @property
    def message(self) -> str:
        return f"Your order for {self.quantity}x {self.cake_type} cupcakes is on its way!"
