"""Entry point for the restaurant-order Textual app."""

from __future__ import annotations

from restaurant_order.checkout import CheckoutFlow
from restaurant_order.ledger import OrderLedger
from restaurant_order.log import configure_logging
from restaurant_order.order_app import OrderApp


def main() -> None:
    """Run the Textual application with a fresh session ledger."""
    configure_logging()
    ledger = OrderLedger()
    OrderApp(ledger=ledger, checkout=CheckoutFlow(ledger)).run()


if __name__ == "__main__":
    main()
