"""
Pricing-related exceptions.
"""

from .base import StorefrontException


class PricingException(StorefrontException):
    """Base exception for pricing errors."""
    pass


class InvalidDiscountException(PricingException):
    """Raised when a catalog price or discount percentage is outside its valid range."""

    def __init__(self, raw_price: float, discount_percent: float, reason: str):
        super().__init__(
            f"Invalid discount projection (price={raw_price}, discount={discount_percent}): {reason}",
            details={'raw_price': raw_price, 'discount_percent': discount_percent}
        )
        self.raw_price = raw_price
        self.discount_percent = discount_percent


class PricingConfigurationMissingException(PricingException):
    """Raised when shipping/payment configuration has not been loaded yet."""

    def __init__(self, reason: str = "site configuration not loaded"):
        super().__init__(
            f"Pricing configuration unavailable: {reason}",
            details={'reason': reason}
        )
        self.reason = reason
