# A cart line item is one purchasable variant of a product: the same product in a
# different size or color is a separate line. Prices are stored already
# discount-adjusted, exactly as they were displayed when the item was added.
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CartItemKey(NamedTuple):
    """Identity of a line item. Compared by value, so delimiters inside sizes/colors can't collide."""
    product_id: str
    size: str
    color: str

    @classmethod
    def of(cls, product_id: str, size: str | None = None, color: str | None = None) -> 'CartItemKey':
        """
        Build a key, treating a missing size or color as empty.

        Examples:
            >>> CartItemKey.of("p1", "M") == CartItemKey.of("p1", "M", "")
            True
        """
        return cls(product_id, size or "", color or "")


class CartLineItemDTO(BaseModel):
    # camelCase aliases match the persisted snapshot layout
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str = Field(min_length=1)
    name: str = ""
    unit_price: float = Field(ge=0, allow_inf_nan=False)
    image: str = ""
    size: str = ""
    color: str | None = None
    quantity: int = Field(ge=1)

    @property
    def key(self) -> CartItemKey:
        return CartItemKey.of(self.product_id, self.size, self.color)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


class CartTotalsDTO(BaseModel):
    """Derived cart totals, recomputed on every read."""
    total_distinct_lines: int
    total_units: int
    subtotal: float
