"""
Custom exceptions for the storefront pricing engine.

Exception Hierarchy:
--------------------
StorefrontException (base)
├── CartException
│   ├── InvalidCartItemException
│   ├── EmptyCartException
│   └── CartPersistenceException
└── PricingException
    ├── InvalidDiscountException
    └── PricingConfigurationMissingException

Usage:
------
Services raise specific exceptions:
    raise InvalidCartItemException(product_id, "unit price must not be negative")

The UI layer catches and displays user-friendly messages:
    try:
        cart_store.add_item(...)
    except InvalidCartItemException as e:
        show_alert(str(e))

CartPersistenceException and PricingConfigurationMissingException never reach
the UI: the cart store and the checkout configuration service log them and
continue in a degraded state.
"""

from .base import StorefrontException
from .cart import CartException, InvalidCartItemException, EmptyCartException, CartPersistenceException
from .pricing import PricingException, InvalidDiscountException, PricingConfigurationMissingException

__all__ = [
    # Base
    'StorefrontException',

    # Cart
    'CartException',
    'InvalidCartItemException',
    'EmptyCartException',
    'CartPersistenceException',

    # Pricing
    'PricingException',
    'InvalidDiscountException',
    'PricingConfigurationMissingException',
]
