import logging

from pydantic import BaseModel, AliasChoices, Field, field_validator

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "/placeholder.svg"


class CatalogProductDTO(BaseModel):
    """
    Product record as returned by the catalog API.

    The API shape is already parsed JSON; this DTO only normalizes the fields
    the pricing engine consumes:
    - "_id" is accepted for id
    - a missing discount means no discount
    - sizes arrive either as a list or as a comma-separated string
    """
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    title: str
    price: float = Field(ge=0)
    discount: float = 0.0
    thumbnails: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list, validation_alias=AliasChoices("size", "sizes", "availableSizes"))
    stock: int = 0

    @field_validator("discount", mode="before")
    @classmethod
    def normalize_discount(cls, value):
        if value is None or value == "":
            return 0.0
        try:
            percent = float(value)
        except (TypeError, ValueError):
            logger.warning(f"[Catalog] Unparseable discount {value!r}, treating as 0")
            return 0.0
        if not 0 <= percent <= 100:
            logger.warning(f"[Catalog] Discount {percent} outside [0, 100], treating as 0")
            return 0.0
        return percent

    @field_validator("sizes", mode="before")
    @classmethod
    def split_sizes(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [size.strip() for size in value.split(",") if size.strip()]
        return value


class CatalogProductViewDTO(BaseModel):
    """Listing/detail view of a product with the discount already applied."""
    id: str
    name: str
    price: float  # display price handed to the cart on "add to cart"
    original_price: float | None = None
    discount_percent: float = 0.0
    badge: str | None = None
    image: str = PLACEHOLDER_IMAGE
    sizes: list[str] = Field(default_factory=list)
    stock: int = 0
