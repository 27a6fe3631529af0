"""Entry point for the food-order Textual app."""

from __future__ import annotations

from foodorder.log_config import setup_logging
from foodorder.order_app import FoodOrderApp


def main() -> None:
    setup_logging()
    FoodOrderApp().run()


if __name__ == "__main__":
    main()
