"""Static cake catalog data."""

from __future__ import annotations

from dataclasses import dataclass

from cupcake_corner.constant import CAKE_TYPES, QUANTITY_MAX, QUANTITY_MIN


@dataclass(frozen=True)
class CakeType:
    """A selectable cake flavour."""

    index: int
    name: str


CATALOG: list[CakeType] = [CakeType(index, name) for index, name in enumerate(CAKE_TYPES)]


def cake_type_for_index(index: int) -> str | None:
    """Get the catalog name for a cake type index, or None when out of range."""
    if not (0 <= index < len(CATALOG)):
        return None
    return CATALOG[index].name


def cycle_cake_type_index(index: int, delta: int) -> int:
    """Step through the catalog, wrapping at both ends."""
    return (index + delta) % len(CATALOG)


def clamp_quantity(quantity: int) -> int:
    return max(QUANTITY_MIN, min(QUANTITY_MAX, quantity))
