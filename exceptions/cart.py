"""
Cart-related exceptions.
"""

from .base import StorefrontException


class CartException(StorefrontException):
    """Base exception for cart-related errors."""
    pass


class InvalidCartItemException(CartException):
    """Raised when a cart mutation receives malformed input. The cart is left unchanged."""

    def __init__(self, product_id: str | None, reason: str):
        super().__init__(
            f"Invalid cart item {product_id!r}: {reason}",
            details={'product_id': product_id, 'reason': reason}
        )
        self.product_id = product_id
        self.reason = reason


class EmptyCartException(CartException):
    """Raised when trying to build an order from an empty cart."""

    def __init__(self):
        super().__init__("Cart is empty", details={})


class CartPersistenceException(CartException):
    """
    Raised by snapshot repositories when the storage backend fails.

    Never fatal: the cart store logs it and keeps the in-memory cart.
    """

    def __init__(self, key: str, operation: str, reason: str):
        super().__init__(
            f"Cart snapshot {operation} failed for key '{key}': {reason}",
            details={'key': key, 'operation': operation, 'reason': reason}
        )
        self.key = key
        self.operation = operation
        self.reason = reason
