"""
Cart Summary Formatter

Plain-text cart summary used for stock inquiries sent through a messaging
link from the cart page. Prices are formatted with utils.price_format.
"""

from models.cart_item import CartLineItemDTO
from services.pricing import PricingService
from utils.price_format import format_price_with_dot


class CartSummaryFormatter:

    GENERAL_INQUIRY = "Hi! I'd like to ask about the products you have available."

    @staticmethod
    def format_inquiry(items: list[CartLineItemDTO], currency_symbol: str = "$") -> str:
        """
        Format the cart as a numbered inquiry message.

        Example output:
            ```
            Hi! I'd like to ask about these products:

            1. Lace Bra
               Size: M
               Color: Black
               Quantity: 1
               Price: $10.000

            Estimated total: $10.000

            Do you have these products in stock?
            ```

        Args:
            items: Cart line items in display order
            currency_symbol: Symbol placed before every amount

        Returns:
            Message text; a general inquiry when the cart is empty
        """
        if not items:
            return CartSummaryFormatter.GENERAL_INQUIRY

        lines = ["Hi! I'd like to ask about these products:", ""]
        for index, item in enumerate(items, start=1):
            lines.append(f"{index}. {item.name}")
            if item.size:
                lines.append(f"   Size: {item.size}")
            if item.color:
                lines.append(f"   Color: {item.color}")
            lines.append(f"   Quantity: {item.quantity}")
            lines.append(f"   Price: {currency_symbol}{format_price_with_dot(item.unit_price)}")
            lines.append("")

        subtotal = PricingService.calculate_subtotal(items)
        lines.append(f"Estimated total: {currency_symbol}{format_price_with_dot(subtotal)}")
        lines.append("")
        lines.append("Do you have these products in stock?")
        return "\n".join(lines)
