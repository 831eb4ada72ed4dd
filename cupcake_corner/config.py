"""Runtime configuration defaults for order submission and debug logging."""

from __future__ import annotations

import os
from pathlib import Path

# Public echo service; responds with the posted JSON.
ORDER_ENDPOINT_URL = "https://reqres.in/api/cupcakes"
DEBUG_LOG_PATH = "/tmp/cupcake-debug.log"

_ORDER_URL_ENV = "CUPCAKE_ORDER_URL"
_DEBUG_LOG_ENV = "CUPCAKE_DEBUG_LOG"


def resolve_order_endpoint() -> str:
    """
    Resolve the order endpoint URL.

    Resolution order:
    1. CUPCAKE_ORDER_URL (if set)
    2. ORDER_ENDPOINT_URL
    """
    env_override = os.environ.get(_ORDER_URL_ENV, "").strip()
    return env_override or ORDER_ENDPOINT_URL


def resolve_debug_log_path() -> Path:
    env_override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return Path(env_override or DEBUG_LOG_PATH)
