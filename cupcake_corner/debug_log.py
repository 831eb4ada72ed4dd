"""Append-only debug log shared by the app and the submission service."""

from __future__ import annotations

from datetime import datetime, timezone

from cupcake_corner.config import resolve_debug_log_path


def log_debug(message: str) -> None:
    try:
        ts = datetime.now(timezone.utc).isoformat()
        log_path = resolve_debug_log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
