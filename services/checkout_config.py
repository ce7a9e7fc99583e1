"""
Checkout Configuration Service

Turns the site-content document served by the content API into the pricing
configuration used at checkout. Only the numeric fields matter here:

    {
        "shipping": {"homeDelivery": {"baseCost": 2500, "freeShippingThreshold": 30000}},
        "paymentInfo": {"cashOnDelivery": {"additionalFee": 500}}
    }
"""

import logging

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from exceptions.pricing import PricingConfigurationMissingException
from models.pricing import PricingConfigDTO
from services.pricing import PricingService

logger = logging.getLogger(__name__)


class _ContentModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class HomeDeliveryContent(_ContentModel):
    base_cost: float | None = None
    free_shipping_threshold: float | None = None


class ShippingContent(_ContentModel):
    home_delivery: HomeDeliveryContent | None = None


class CashOnDeliveryContent(_ContentModel):
    additional_fee: float | None = None


class PaymentInfoContent(_ContentModel):
    cash_on_delivery: CashOnDeliveryContent | None = None


class CheckoutContent(_ContentModel):
    shipping: ShippingContent | None = None
    payment_info: PaymentInfoContent | None = None


class CheckoutConfigService:

    @staticmethod
    def from_site_content(content: dict | None) -> PricingConfigDTO:
        """
        Build the pricing configuration from site content.

        Fields missing from an otherwise valid document fall back to the
        default configuration value for that field.

        Args:
            content: Parsed "content" object of the site-content response

        Returns:
            PricingConfigDTO with is_default=False

        Raises:
            PricingConfigurationMissingException: If content is absent or malformed
        """
        if not content:
            raise PricingConfigurationMissingException("site content not loaded")

        try:
            checkout = CheckoutContent.model_validate(content)
        except ValidationError as e:
            raise PricingConfigurationMissingException(f"malformed site content ({e.error_count()} errors)") from e

        defaults = PricingService.default_config()
        home_delivery = checkout.shipping.home_delivery if checkout.shipping else None
        cash = checkout.payment_info.cash_on_delivery if checkout.payment_info else None

        base_cost = defaults.base_shipping_cost
        threshold = defaults.free_shipping_threshold
        if home_delivery is not None:
            if home_delivery.base_cost is not None:
                base_cost = home_delivery.base_cost
            if home_delivery.free_shipping_threshold is not None:
                threshold = home_delivery.free_shipping_threshold

        surcharge = defaults.cash_surcharge
        if cash is not None and cash.additional_fee is not None:
            surcharge = cash.additional_fee

        try:
            return PricingConfigDTO(
                free_shipping_threshold=threshold,
                base_shipping_cost=base_cost,
                cash_surcharge=surcharge,
                is_default=False
            )
        except ValidationError as e:
            raise PricingConfigurationMissingException(f"invalid pricing values ({e.error_count()} errors)") from e

    @staticmethod
    def resolve(content: dict | None) -> PricingConfigDTO:
        """
        Like from_site_content(), but degrades to the default configuration.

        Used by checkout screens that must render provisional totals before
        (or without) site content.
        """
        try:
            return CheckoutConfigService.from_site_content(content)
        except PricingConfigurationMissingException as e:
            logger.warning(f"[CheckoutConfig] {e}, using default configuration")
            return PricingService.default_config()
