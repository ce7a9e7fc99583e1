"""
Unit Tests: Cart snapshot persistence

Covers the persistence contract of services/cart.py against both snapshot
repositories (SQL key-value table and Redis):
- Every mutation rewrites the snapshot; a new store restores it
- clear_cart() deletes the stored key itself
- Absent / corrupt / schema-violating snapshots yield an empty cart
- Backend failures never roll back or block in-memory mutations
"""

import json
from unittest.mock import MagicMock

import pytest
from redis import ConnectionError as RedisConnectionError

from exceptions.cart import CartPersistenceException
from models.base import Base
from repositories.cart_snapshot_redis import RedisCartSnapshotRepository
from services.cart import CartStore


@pytest.fixture(params=["sql", "redis"])
def repository(request, snapshot_repository, redis_snapshot_repository):
    if request.param == "sql":
        return snapshot_repository
    return redis_snapshot_repository


class TestSnapshotRoundTrip:

    def test_mutations_are_restored_by_new_store(self, repository, add_variant):
        store = CartStore(repository)
        add_variant(store, "A", unit_price=10000, size="M", color="Black", quantity=1)
        add_variant(store, "B", unit_price=7500, size="L", quantity=2)
        store.update_quantity("A", 3, "M", "Black")

        restored = CartStore(repository)

        assert [(i.product_id, i.size, i.color, i.quantity) for i in restored.items] == [
            ("A", "M", "Black", 3),
            ("B", "L", None, 2),
        ]
        assert restored.get_totals().subtotal == 45000.0

    def test_snapshot_layout_uses_camel_case_fields(self, repository, add_variant):
        store = CartStore(repository)
        add_variant(store, "A", unit_price=1200, size="S", color="Red", quantity=2, name="Lace Bra")

        stored = json.loads(repository.get("cart"))

        assert stored == [{
            "productId": "A",
            "name": "Lace Bra",
            "unitPrice": 1200.0,
            "image": "/img/A.jpg",
            "size": "S",
            "color": "Red",
            "quantity": 2,
        }]

    def test_clear_cart_deletes_stored_key(self, repository, add_variant):
        store = CartStore(repository)
        add_variant(store, "A")

        store.clear_cart()

        assert store.items == []
        assert repository.get("cart") is None
        assert CartStore(repository).items == []

    def test_noop_changes_after_clear_do_not_recreate_snapshot(self, repository, add_variant):
        store = CartStore(repository)
        add_variant(store, "A")
        store.clear_cart()

        store.remove_item("Z")
        store.update_quantity("Z", 3)

        assert repository.get("cart") is None

    def test_removing_last_item_keeps_empty_snapshot(self, repository, add_variant):
        store = CartStore(repository)
        add_variant(store, "A")

        store.remove_item("A", "M")

        assert repository.get("cart") == "[]"

    def test_reload_reads_snapshot_again(self, repository, add_variant):
        store = CartStore(repository)
        other = CartStore(repository)
        add_variant(other, "A", quantity=2)

        store.reload()

        assert store.get_item("A", "M").quantity == 2


class TestCorruptSnapshots:

    @pytest.mark.parametrize("raw", [
        "not json at all",
        "{\"productId\": \"A\"}",
        "[{\"productId\": \"A\"}]",
        "[{\"productId\": \"A\", \"name\": \"x\", \"unitPrice\": -5, \"size\": \"M\", \"quantity\": 1}]",
        "[{\"productId\": \"A\", \"name\": \"x\", \"unitPrice\": 5, \"size\": \"M\", \"quantity\": 0}]",
        "",
    ])
    def test_malformed_snapshot_yields_empty_cart(self, repository, raw):
        repository.set("cart", raw)

        store = CartStore(repository)

        assert store.items == []
        assert store.get_totals().subtotal == 0.0

    def test_duplicate_keys_in_snapshot_are_merged(self, repository):
        line = {"productId": "A", "name": "x", "unitPrice": 100, "image": "", "size": "M", "color": None, "quantity": 2}
        other = dict(line, color="", quantity=3)
        repository.set("cart", json.dumps([line, dict(line, productId="B"), other]))

        store = CartStore(repository)

        assert [(i.product_id, i.quantity) for i in store.items] == [("A", 5), ("B", 2)]


class TestBackendFailures:

    @pytest.fixture
    def failing_repository(self):
        repository = MagicMock()
        repository.get.side_effect = CartPersistenceException("cart", "read", "disk unavailable")
        repository.set.side_effect = CartPersistenceException("cart", "write", "disk full")
        repository.delete.side_effect = CartPersistenceException("cart", "delete", "disk full")
        return repository

    def test_unreadable_storage_yields_empty_cart(self, failing_repository):
        store = CartStore(failing_repository)

        assert store.items == []

    def test_write_failure_keeps_memory_authoritative(self, failing_repository, add_variant):
        store = CartStore(failing_repository)

        add_variant(store, "A", quantity=2)
        add_variant(store, "A", quantity=1)
        store.update_quantity("A", 10, "M")

        assert store.get_item("A", "M").quantity == 10
        assert failing_repository.set.call_count == 3

    def test_delete_failure_still_clears_memory(self, failing_repository, add_variant):
        store = CartStore(failing_repository)
        add_variant(store, "A")

        store.clear_cart()

        assert store.items == []

    def test_sql_errors_are_wrapped(self, test_engine, snapshot_repository):
        Base.metadata.drop_all(bind=test_engine)

        with pytest.raises(CartPersistenceException) as exc_info:
            snapshot_repository.set("cart", "[]")

        assert exc_info.value.operation == "write"

    def test_redis_errors_are_wrapped(self):
        client = MagicMock()
        client.get.side_effect = RedisConnectionError("connection refused")

        with pytest.raises(CartPersistenceException) as exc_info:
            RedisCartSnapshotRepository(client).get("cart")

        assert exc_info.value.operation == "read"
