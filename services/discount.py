import logging

from exceptions.pricing import InvalidDiscountException
from models.pricing import DiscountedPriceDTO
from models.product import CatalogProductDTO, CatalogProductViewDTO, PLACEHOLDER_IMAGE

logger = logging.getLogger(__name__)


class DiscountService:
    """Projects raw catalog prices and discount percentages into display prices."""

    @staticmethod
    def project(raw_price: float, discount_percent: float | None = None) -> DiscountedPriceDTO:
        """
        Apply a percentage discount to a catalog price.

        No rounding is applied; presentation formatting truncates later
        (see utils.price_format). The raw price is kept as original_price
        whenever a discount applies, so dropping the discount restores the
        exact raw price.

        Args:
            raw_price: Catalog price (>= 0)
            discount_percent: Discount in [0, 100]; None means no discount

        Returns:
            DiscountedPriceDTO; original_price is None unless discount_percent > 0

        Raises:
            InvalidDiscountException: If raw_price is negative or discount_percent is outside [0, 100]

        Examples:
            >>> DiscountService.project(1000, 20).display_price
            800.0
            >>> DiscountService.project(1000, 0).original_price is None
            True
        """
        percent = 0.0 if discount_percent is None else discount_percent

        if raw_price < 0:
            raise InvalidDiscountException(raw_price, percent, "price must not be negative")
        if not 0 <= percent <= 100:
            raise InvalidDiscountException(raw_price, percent, "discount must be between 0 and 100")

        if percent > 0:
            return DiscountedPriceDTO(
                display_price=raw_price * (1 - percent / 100),
                original_price=raw_price,
                discount_percent=percent
            )
        return DiscountedPriceDTO(display_price=raw_price, discount_percent=0.0)

    @staticmethod
    def format_badge(discount_percent: float | None) -> str | None:
        return DiscountService.project(0, discount_percent).badge

    @staticmethod
    def project_product(product: CatalogProductDTO) -> CatalogProductViewDTO:
        """
        Build the listing/detail view for a catalog product.

        The returned price is what "add to cart" stores as the unit price.
        """
        projected = DiscountService.project(product.price, product.discount)
        return CatalogProductViewDTO(
            id=product.id,
            name=product.title,
            price=projected.display_price,
            original_price=projected.original_price,
            discount_percent=projected.discount_percent,
            badge=projected.badge,
            image=product.thumbnails[0] if product.thumbnails else PLACEHOLDER_IMAGE,
            sizes=product.sizes,
            stock=product.stock
        )

    @staticmethod
    def project_catalog(records: list[dict]) -> list[CatalogProductViewDTO]:
        """Parse a catalog API payload and project every product in it."""
        products = [CatalogProductDTO.model_validate(record) for record in records]
        logger.debug(f"[Catalog] Projected {len(products)} products")
        return [DiscountService.project_product(product) for product in products]
