import logging

from exceptions.cart import EmptyCartException
from models.cart_item import CartLineItemDTO
from models.order import OrderItemPayloadDTO, OrderPayloadDTO
from models.pricing import PricingContextDTO

logger = logging.getLogger(__name__)


class OrderService:

    @staticmethod
    def build_order_payload(
        items: list[CartLineItemDTO],
        pricing: PricingContextDTO,
        notes: str = ""
    ) -> OrderPayloadDTO:
        """
        Build the order submission payload from the cart and checkout totals.

        The delivery mode travels in the notes ("Home delivery. <customer notes>").

        Args:
            items: Current cart line items
            pricing: Totals computed by PricingService.calculate() for these items
            notes: Optional customer notes

        Returns:
            OrderPayloadDTO ready for the order API

        Raises:
            EmptyCartException: If the cart has no items
        """
        if not items:
            raise EmptyCartException()

        order_items = [
            OrderItemPayloadDTO(
                product_id=item.product_id,
                title=item.name,
                price=item.unit_price,
                quantity=item.quantity,
                size=item.size or "",
                color=item.color or "",
                image=item.image or ""
            )
            for item in items
        ]

        payload = OrderPayloadDTO(
            items=order_items,
            payment_method=pricing.payment_method,
            subtotal=pricing.subtotal,
            shipping_cost=pricing.shipping_cost,
            total=pricing.total,
            notes=f"{pricing.delivery_mode.order_note}. {notes or ''}".strip()
        )
        logger.info(
            f"[Order] Built payload: {len(order_items)} lines, subtotal={payload.subtotal}, "
            f"shipping={payload.shipping_cost}, total={payload.total}, payment={payload.payment_method.value}"
        )
        return payload

    @staticmethod
    def to_request_dict(payload: OrderPayloadDTO) -> dict:
        """camelCase request body for the order API."""
        return payload.model_dump(mode="json", by_alias=True)
