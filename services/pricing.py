import logging
from typing import Iterable

import config
from enums.delivery_mode import DeliveryMode
from enums.payment_method import PaymentMethod
from models.cart_item import CartLineItemDTO
from models.pricing import PricingConfigDTO, PricingContextDTO

logger = logging.getLogger(__name__)


class PricingService:
    """Service for checkout totals: subtotal, shipping, payment surcharge, grand total."""

    @staticmethod
    def default_config() -> PricingConfigDTO:
        """
        Fallback configuration used until site content has been loaded.

        Non-zero base shipping cost and no cash surcharge, so a checkout
        screen can render provisional totals. Values come from config.py
        (DEFAULT_BASE_SHIPPING_COST, DEFAULT_CASH_SURCHARGE,
        DEFAULT_FREE_SHIPPING_THRESHOLD).
        """
        return PricingConfigDTO(
            free_shipping_threshold=config.DEFAULT_FREE_SHIPPING_THRESHOLD,
            base_shipping_cost=config.DEFAULT_BASE_SHIPPING_COST,
            cash_surcharge=config.DEFAULT_CASH_SURCHARGE,
            is_default=True
        )

    @staticmethod
    def calculate_subtotal(items: Iterable[CartLineItemDTO]) -> float:
        """
        Sum of unit price × quantity over all line items (0 for an empty cart).

        CartStore.get_totals() uses this same function, so the cart page and
        the checkout page can never show different subtotals.
        """
        return sum((item.unit_price * item.quantity for item in items), 0.0)

    @staticmethod
    def calculate_shipping_cost(
        subtotal: float,
        delivery_mode: DeliveryMode,
        pricing_config: PricingConfigDTO
    ) -> float:
        """
        Shipping cost for the selected delivery mode.

        Rules:
        1. Meeting point pickup is always free
        2. Home delivery is free when subtotal >= free_shipping_threshold
           (inclusive; a threshold of 0 makes every home delivery free)
        3. Otherwise home delivery costs base_shipping_cost

        An empty cart is not special-cased: with a positive threshold it
        still pays the base cost.

        Examples:
            >>> cfg = PricingConfigDTO(free_shipping_threshold=50000, base_shipping_cost=2500)
            >>> PricingService.calculate_shipping_cost(49999, DeliveryMode.HOME_DELIVERY, cfg)
            2500.0
            >>> PricingService.calculate_shipping_cost(50000, DeliveryMode.HOME_DELIVERY, cfg)
            0.0
        """
        if delivery_mode == DeliveryMode.MEETING_POINT:
            return 0.0
        if PricingService.qualifies_for_free_shipping(subtotal, pricing_config):
            return 0.0
        return pricing_config.base_shipping_cost

    @staticmethod
    def qualifies_for_free_shipping(subtotal: float, pricing_config: PricingConfigDTO) -> bool:
        threshold = pricing_config.free_shipping_threshold
        return threshold is not None and subtotal >= threshold

    @staticmethod
    def calculate_payment_surcharge(payment_method: PaymentMethod, pricing_config: PricingConfigDTO) -> float:
        """Cash carries the configured surcharge regardless of delivery mode or subtotal."""
        if payment_method == PaymentMethod.CASH:
            return pricing_config.cash_surcharge
        return 0.0

    @staticmethod
    def calculate(
        items: Iterable[CartLineItemDTO],
        delivery_mode: DeliveryMode,
        payment_method: PaymentMethod,
        pricing_config: PricingConfigDTO | None = None
    ) -> PricingContextDTO:
        """
        Compute checkout totals from the current cart and selection.

        Always computed from scratch; nothing is patched incrementally and
        nothing is persisted. Switching delivery mode or payment method is
        just another call with different arguments.

        Args:
            items: Current cart line items
            delivery_mode: Selected delivery mode
            payment_method: Selected payment method
            pricing_config: Site configuration, or None when not loaded yet

        Returns:
            PricingContextDTO with total = subtotal + shipping_cost + payment_surcharge.
            is_provisional is set when the fallback configuration was used.
        """
        if pricing_config is None:
            logger.warning("[Pricing] Pricing configuration not loaded, using default configuration")
            pricing_config = PricingService.default_config()

        subtotal = PricingService.calculate_subtotal(items)
        shipping_cost = PricingService.calculate_shipping_cost(subtotal, delivery_mode, pricing_config)
        payment_surcharge = PricingService.calculate_payment_surcharge(payment_method, pricing_config)
        total = subtotal + shipping_cost + payment_surcharge

        logger.debug(
            f"[Pricing] subtotal={subtotal} delivery={delivery_mode.value} shipping={shipping_cost} "
            f"payment={payment_method.value} surcharge={payment_surcharge} total={total}"
        )

        return PricingContextDTO(
            subtotal=subtotal,
            delivery_mode=delivery_mode,
            payment_method=payment_method,
            shipping_cost=shipping_cost,
            payment_surcharge=payment_surcharge,
            total=total,
            free_shipping_applied=(
                delivery_mode == DeliveryMode.HOME_DELIVERY
                and PricingService.qualifies_for_free_shipping(subtotal, pricing_config)
            ),
            is_provisional=pricing_config.is_default
        )
