import logging
import threading
from typing import Protocol

from pydantic import StrictInt, TypeAdapter, ValidationError

import config
from exceptions.cart import InvalidCartItemException, CartPersistenceException
from models.cart_item import CartItemKey, CartLineItemDTO, CartTotalsDTO
from services.pricing import PricingService

logger = logging.getLogger(__name__)

_snapshot_adapter = TypeAdapter(list[CartLineItemDTO])
_quantity_adapter = TypeAdapter(StrictInt)


class SnapshotRepository(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class CartStore:
    """
    Single source of truth for the cart contents.

    Constructed explicitly at application start and passed to whatever needs
    it. Line items keep insertion order and are unique by CartItemKey
    (product, size, color). Every mutation rewrites the whole snapshot;
    memory stays authoritative when the write fails.

    Read-modify-write sequences run under one lock, so concurrent adds of
    the same variant can't create duplicate lines.
    """

    def __init__(self, repository: SnapshotRepository, storage_key: str | None = None):
        self.repository = repository
        self.storage_key = storage_key or config.CART_STORAGE_KEY
        self._lock = threading.RLock()
        self._items: list[CartLineItemDTO] = self._load()

    @property
    def items(self) -> list[CartLineItemDTO]:
        """Copy of the current line items in insertion order."""
        with self._lock:
            return [item.model_copy() for item in self._items]

    def get_item(self, product_id: str, size: str | None = None, color: str | None = None) -> CartLineItemDTO | None:
        with self._lock:
            index = self._find_index(CartItemKey.of(product_id, size, color))
            return self._items[index].model_copy() if index is not None else None

    def add_item(
        self,
        product_id: str,
        name: str,
        unit_price: float,
        image: str,
        size: str,
        color: str | None = None,
        quantity: int = 1
    ) -> None:
        """
        Add a product variant to the cart, merging with an existing line.

        If a line with the same (product, size, color) exists, its quantity is
        increased by `quantity` (via update_quantity); otherwise a new line is
        appended.

        Raises:
            InvalidCartItemException: If product_id is empty, unit_price is
                negative or quantity is not a positive integer. The cart is
                unchanged.
        """
        quantity = _validate_quantity(product_id, quantity)
        if quantity <= 0:
            raise InvalidCartItemException(product_id, f"quantity must be positive (got: {quantity})")

        try:
            new_item = CartLineItemDTO(
                product_id=product_id,
                name=name,
                unit_price=unit_price,
                image=image or "",
                size=size or "",
                color=color,
                quantity=quantity
            )
        except ValidationError as e:
            raise InvalidCartItemException(product_id, _describe_validation_error(e)) from e

        with self._lock:
            index = self._find_index(new_item.key)
            if index is not None:
                existing = self._items[index]
                self.update_quantity(product_id, existing.quantity + quantity, size, color)
                return

            self._items.append(new_item)
            logger.info(f"[Cart] Added {product_id} (size={new_item.size!r}, color={color!r}) x{quantity}")
            self._persist()

    def remove_item(self, product_id: str, size: str | None = None, color: str | None = None) -> None:
        """Remove the line matching (product, size, color). Missing lines are ignored."""
        key = CartItemKey.of(product_id, size, color)
        with self._lock:
            index = self._find_index(key)
            if index is not None:
                del self._items[index]
                logger.info(f"[Cart] Removed {key}")
                self._persist()

    def update_quantity(
        self,
        product_id: str,
        new_quantity: int,
        size: str | None = None,
        color: str | None = None
    ) -> None:
        """
        Replace the quantity of a line (not an increment).

        A quantity <= 0 removes the line. Unknown lines are ignored.

        Raises:
            InvalidCartItemException: If new_quantity is not an integer. The
                cart is unchanged.
        """
        new_quantity = _validate_quantity(product_id, new_quantity)
        if new_quantity <= 0:
            self.remove_item(product_id, size, color)
            return

        key = CartItemKey.of(product_id, size, color)
        with self._lock:
            index = self._find_index(key)
            if index is not None:
                self._items[index] = self._items[index].model_copy(update={"quantity": new_quantity})
                logger.info(f"[Cart] Set quantity of {key} to {new_quantity}")
                self._persist()

    def clear_cart(self) -> None:
        """Empty the cart and delete the stored snapshot itself (not just an empty list)."""
        with self._lock:
            self._items = []
            try:
                self.repository.delete(self.storage_key)
            except CartPersistenceException as e:
                logger.warning(f"[Cart] {e}")
            logger.info("[Cart] Cart cleared")

    def get_totals(self) -> CartTotalsDTO:
        with self._lock:
            return CartTotalsDTO(
                total_distinct_lines=len(self._items),
                total_units=sum(item.quantity for item in self._items),
                subtotal=PricingService.calculate_subtotal(self._items)
            )

    def reload(self) -> None:
        """Discard in-memory state and read the stored snapshot again."""
        with self._lock:
            self._items = self._load()

    def _find_index(self, key: CartItemKey) -> int | None:
        for index, item in enumerate(self._items):
            if item.key == key:
                return index
        return None

    def _load(self) -> list[CartLineItemDTO]:
        """
        Read the stored snapshot. Never raises.

        Absent, unreadable or malformed snapshots all yield an empty cart.
        Lines sharing a key are merged so the uniqueness invariant holds.
        """
        try:
            raw = self.repository.get(self.storage_key)
        except CartPersistenceException as e:
            logger.warning(f"[Cart] {e}, starting with an empty cart")
            return []

        if not raw:
            return []

        try:
            loaded = _snapshot_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"[Cart] Discarding malformed cart snapshot '{self.storage_key}': {e.error_count()} errors")
            return []

        merged: dict[CartItemKey, CartLineItemDTO] = {}
        for item in loaded:
            if item.key in merged:
                previous = merged[item.key]
                merged[item.key] = previous.model_copy(update={"quantity": previous.quantity + item.quantity})
            else:
                merged[item.key] = item

        logger.info(f"[Cart] Restored {len(merged)} line items from snapshot '{self.storage_key}'")
        return list(merged.values())

    def _persist(self) -> None:
        try:
            payload = _snapshot_adapter.dump_json(self._items, by_alias=True).decode("utf-8")
            self.repository.set(self.storage_key, payload)
        except CartPersistenceException as e:
            # Memory stays authoritative
            logger.warning(f"[Cart] {e}")


def _validate_quantity(product_id: str, quantity) -> int:
    try:
        return _quantity_adapter.validate_python(quantity)
    except ValidationError as e:
        raise InvalidCartItemException(product_id, f"quantity must be an integer (got: {quantity!r})") from e

def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"
