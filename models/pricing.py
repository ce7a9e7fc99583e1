from pydantic import BaseModel, Field

from enums.delivery_mode import DeliveryMode
from enums.payment_method import PaymentMethod


class DiscountedPriceDTO(BaseModel):
    """
    Display price for a catalog product.

    original_price is only present when a discount applies, so the UI can
    test for it to decide whether to render a struck-through price. badge and
    savings are derived from the same test and can never disagree with it.
    """
    display_price: float
    original_price: float | None = None
    discount_percent: float = 0.0

    @property
    def has_discount(self) -> bool:
        return self.original_price is not None

    @property
    def badge(self) -> str | None:
        """e.g. "20% OFF", None without a discount"""
        if not self.has_discount:
            return None
        return f"{self.discount_percent:g}% OFF"

    @property
    def savings(self) -> float | None:
        if not self.has_discount:
            return None
        return self.original_price - self.display_price


class PricingConfigDTO(BaseModel):
    """Shipping and payment configuration sourced from site content."""
    free_shipping_threshold: float | None = Field(default=None, ge=0)  # None = never waived
    base_shipping_cost: float = Field(ge=0)
    cash_surcharge: float = Field(default=0.0, ge=0)
    is_default: bool = False  # True for the fallback used before site content arrives


class PricingContextDTO(BaseModel):
    """Amounts shown to the customer at checkout and submitted with the order."""
    subtotal: float
    delivery_mode: DeliveryMode
    payment_method: PaymentMethod
    shipping_cost: float
    payment_surcharge: float
    total: float
    free_shipping_applied: bool = False
    is_provisional: bool = False  # computed from the fallback configuration
