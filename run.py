import logging

from utils.logging_config import setup_logging
from repositories.factory import create_snapshot_repository
from services.cart import CartStore
from services.cart_summary import CartSummaryFormatter
from services.checkout import CheckoutService


def create_cart_store() -> CartStore:
    """
    Construct the application's cart store.

    Called once at startup; the store is then passed by reference to the
    catalog and checkout code. There is no module-level cart.
    """
    return CartStore(create_snapshot_repository())


def main():
    setup_logging()

    cart_store = create_cart_store()
    totals = cart_store.get_totals()
    logging.info(f"[Init] Cart restored: {totals.total_distinct_lines} lines, {totals.total_units} units, subtotal={totals.subtotal}")

    # Provisional totals until the site content has been fetched
    pricing = CheckoutService(cart_store).get_pricing()
    logging.info(f"[Init] Provisional checkout total: {pricing.total}")

    print(CartSummaryFormatter.format_inquiry(cart_store.items))


if __name__ == "__main__":
    main()
