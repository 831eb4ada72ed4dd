"""Entry point for the cupcake-corner Textual app."""

from __future__ import annotations

from cupcake_corner.cupcake_app import CupcakeCornerApp


def main() -> None:
    """Run the Textual application."""
    CupcakeCornerApp().run()


if __name__ == "__main__":
    main()
