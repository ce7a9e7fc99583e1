import logging

from enums.delivery_mode import DeliveryMode
from enums.payment_method import PaymentMethod
from models.order import OrderPayloadDTO
from models.pricing import PricingConfigDTO, PricingContextDTO
from services.cart import CartStore
from services.order import OrderService
from services.pricing import PricingService

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Checkout state for one attempt: delivery/payment selection plus configuration.

    Holds a reference to the cart store but never mutates it until the order
    is completed. Totals are recomputed from current state on every call to
    get_pricing(), so installing real configuration with update_configuration()
    immediately replaces provisional totals.
    """

    def __init__(
        self,
        cart_store: CartStore,
        pricing_config: PricingConfigDTO | None = None,
        delivery_mode: DeliveryMode = DeliveryMode.MEETING_POINT,
        payment_method: PaymentMethod = PaymentMethod.CASH
    ):
        self.cart_store = cart_store
        self.pricing_config = pricing_config
        self.delivery_mode = delivery_mode
        self.payment_method = payment_method

    def select_delivery_mode(self, delivery_mode: DeliveryMode) -> PricingContextDTO:
        self.delivery_mode = delivery_mode
        return self.get_pricing()

    def select_payment_method(self, payment_method: PaymentMethod) -> PricingContextDTO:
        self.payment_method = payment_method
        return self.get_pricing()

    def update_configuration(self, pricing_config: PricingConfigDTO) -> PricingContextDTO:
        self.pricing_config = pricing_config
        logger.info("[Checkout] Pricing configuration loaded, recomputing totals")
        return self.get_pricing()

    def get_pricing(self) -> PricingContextDTO:
        return PricingService.calculate(
            self.cart_store.items,
            self.delivery_mode,
            self.payment_method,
            self.pricing_config
        )

    def build_order_payload(self, notes: str = "") -> OrderPayloadDTO:
        """
        Build the order request from the current cart and selection.

        Raises:
            EmptyCartException: If the cart has no items
        """
        items = self.cart_store.items
        pricing = PricingService.calculate(items, self.delivery_mode, self.payment_method, self.pricing_config)
        return OrderService.build_order_payload(items, pricing, notes)

    def complete_order(self) -> None:
        """Call after the order API accepted the payload: the cart is cleared."""
        self.cart_store.clear_cart()
