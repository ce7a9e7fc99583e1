import os

"""Test configuration to set environment variables for the pytest suite.
This ensures required settings are present before importing modules
that depend on them."""

# Flag application is running in test mode
os.environ.setdefault("TESTING", "1")

# Snapshots go to an in-memory database unless a test overrides it
os.environ.setdefault("CART_STORAGE_BACKEND", "sqlite")
os.environ.setdefault("CART_DB_URL", "sqlite:///:memory:")
os.environ.setdefault("CART_STORAGE_KEY", "cart")

# Deterministic fallback pricing
os.environ.setdefault("DEFAULT_BASE_SHIPPING_COST", "2500")
os.environ.setdefault("DEFAULT_CASH_SURCHARGE", "0")

os.environ.setdefault("LOG_LEVEL", "DEBUG")
