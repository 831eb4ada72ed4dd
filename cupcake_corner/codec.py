"""JSON wire format for orders, shared by request and response bodies."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from cupcake_corner.models import Order, OrderSnapshot


class OrderDecodeError(ValueError):
    """Raised when bytes do not decode into a complete, well-typed order."""


@dataclass(frozen=True)
class SchemaField:
    """One wire field: JSON key, Order attribute and primitive type."""

    wire_name: str
    attr: str
    kind: type


ORDER_SCHEMA: tuple[SchemaField, ...] = (
    SchemaField("cakeTypeIndex", "cake_type_index", int),
    SchemaField("quantity", "quantity", int),
    SchemaField("isShowingCakeToppings", "is_showing_cake_toppings", bool),
    SchemaField("hasExtraFrosting", "has_extra_frosting", bool),
    SchemaField("hasSprinkles", "has_sprinkles", bool),
    SchemaField("name", "name", str),
    SchemaField("streetAddress", "street_address", str),
    SchemaField("city", "city", str),
    SchemaField("zipCode", "zip_code", str),
)


def _matches_kind(value: Any, kind: type) -> bool:
    # bool is an int subclass; JSON true/false must not pass as an integer.
    if kind is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, kind)


def order_to_payload(order: Order | OrderSnapshot) -> dict[str, Any]:
    return {field.wire_name: getattr(order, field.attr) for field in ORDER_SCHEMA}


def serialize_order(order: Order | OrderSnapshot) -> bytes:
    """Encode the nine schema fields as a UTF-8 JSON object."""
    return json.dumps(order_to_payload(order)).encode("utf-8")


def order_from_payload(payload: Any) -> Order:
    if not isinstance(payload, dict):
        raise OrderDecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    values: dict[str, Any] = {}
    for field in ORDER_SCHEMA:
        if field.wire_name not in payload:
            raise OrderDecodeError(f"Missing field {field.wire_name!r}")
        value = payload[field.wire_name]
        if not _matches_kind(value, field.kind):
            raise OrderDecodeError(
                f"Field {field.wire_name!r} must be {field.kind.__name__}, got {type(value).__name__}"
            )
        values[field.attr] = value
    return Order(**values)


def deserialize_order(data: bytes | str) -> Order:
    """
    Decode a JSON order.

    Every schema field must be present with the right primitive type. Extra
    keys are ignored. Toppings and catalog index are not re-checked.
    """
    try:
        payload = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise OrderDecodeError(f"Invalid JSON: {exc}") from exc
    return order_from_payload(payload)
