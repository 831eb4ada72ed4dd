"""Editable static catalog and pricing configuration."""

from __future__ import annotations

CAKE_TYPES: list[str] = [
    "Apple Cinnamon",
    "Chocolate",
    "Vanilla",
    "Pear Ginger",
]

BASE_PRICE = 2.00

# Per-cake surcharges.
EXTRA_FROSTING_PRICE = 1.00
SPRINKLES_PRICE = 0.50

# Bounds applied by the order form stepper; the model itself accepts any int.
QUANTITY_MIN = 3
QUANTITY_MAX = 5

DEFAULT_CAKE_TYPE_INDEX = 0
DEFAULT_QUANTITY = QUANTITY_MIN
