from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from enums.payment_method import PaymentMethod


class OrderItemPayloadDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str
    title: str
    price: float  # discount-adjusted unit price
    quantity: int
    size: str = ""
    color: str = ""
    image: str = ""


class OrderPayloadDTO(BaseModel):
    """
    Order submission request body.

    Serialized with camelCase keys for the order API. The engine only builds
    the payload; submission belongs to the API client.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[OrderItemPayloadDTO]
    payment_method: PaymentMethod
    subtotal: float
    shipping_cost: float
    total: float
    notes: str = ""
