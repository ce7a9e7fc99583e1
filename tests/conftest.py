"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import sys
import os

import pytest
from fakeredis import FakeRedis

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Seed environment before config.py is imported anywhere
import test_config  # noqa: E402,F401

from db import create_snapshot_engine, create_session_maker  # noqa: E402
from repositories.cart_snapshot import CartSnapshotRepository  # noqa: E402
from repositories.cart_snapshot_redis import RedisCartSnapshotRepository  # noqa: E402
from services.cart import CartStore  # noqa: E402


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def test_engine():
    """Create test database engine (in-memory SQLite) with the snapshot table."""
    engine = create_snapshot_engine("sqlite:///:memory:")
    yield engine
    engine.dispose()


@pytest.fixture
def snapshot_repository(test_engine):
    return CartSnapshotRepository(create_session_maker(test_engine))


# ============================================================================
# Redis Fixtures
# ============================================================================

@pytest.fixture
def redis_client():
    """Create fake Redis client for testing (no real Redis server needed)."""
    client = FakeRedis(decode_responses=True)
    yield client
    client.flushall()
    client.close()


@pytest.fixture
def redis_snapshot_repository(redis_client):
    return RedisCartSnapshotRepository(redis_client)


# ============================================================================
# Cart Fixtures
# ============================================================================

@pytest.fixture
def cart_store(snapshot_repository):
    """Empty cart store backed by the in-memory database."""
    return CartStore(snapshot_repository)


@pytest.fixture
def add_variant():
    """Helper adding a product variant with sensible defaults."""
    def _add(store: CartStore, product_id: str, unit_price: float = 1000.0, size: str = "M",
             color: str | None = None, quantity: int = 1, name: str | None = None):
        store.add_item(
            product_id=product_id,
            name=name or f"Product {product_id}",
            unit_price=unit_price,
            image=f"/img/{product_id}.jpg",
            size=size,
            color=color,
            quantity=quantity
        )
    return _add
