import os
import sys

from dotenv import load_dotenv

from enums.storage_backend import StorageBackend

# Load .env but don't override existing environment variables
# This allows test scripts to set values before import
load_dotenv(".env", override=False)

# Parse CART_STORAGE_BACKEND with clear error message on misconfiguration
try:
    CART_STORAGE_BACKEND = StorageBackend(os.environ.get("CART_STORAGE_BACKEND", "sqlite").lower())
except ValueError as e:
    valid_values = [backend.value for backend in StorageBackend]
    print(f"\n ERROR: Invalid CART_STORAGE_BACKEND configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"\nAdd to .env: CART_STORAGE_BACKEND={valid_values[0]}\n", file=sys.stderr)
    sys.exit(1)

# Name of the single record holding the serialized cart
CART_STORAGE_KEY = os.environ.get("CART_STORAGE_KEY", "cart")

# Local snapshot database (sqlite backend)
CART_DB_URL = os.environ.get("CART_DB_URL", "sqlite:///data/storefront.db")

# Redis backend
REDIS_HOST = os.environ.get("REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("REDIS_PORT", "6379"))
REDIS_PASSWORD = os.environ.get("REDIS_PASSWORD")

# Fallback pricing configuration, used until site configuration is loaded
DEFAULT_BASE_SHIPPING_COST = float(os.environ.get("DEFAULT_BASE_SHIPPING_COST", "2500"))
DEFAULT_CASH_SURCHARGE = float(os.environ.get("DEFAULT_CASH_SURCHARGE", "0"))

# Parse DEFAULT_FREE_SHIPPING_THRESHOLD (unset = home delivery is never waived)
try:
    _threshold_str = os.environ.get("DEFAULT_FREE_SHIPPING_THRESHOLD")
    DEFAULT_FREE_SHIPPING_THRESHOLD = float(_threshold_str) if _threshold_str else None
    if DEFAULT_FREE_SHIPPING_THRESHOLD is not None and DEFAULT_FREE_SHIPPING_THRESHOLD < 0:
        raise ValueError(f"DEFAULT_FREE_SHIPPING_THRESHOLD must not be negative (got: {DEFAULT_FREE_SHIPPING_THRESHOLD})")
except ValueError as e:
    print(f"\n ERROR: Invalid DEFAULT_FREE_SHIPPING_THRESHOLD configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Non-negative number (e.g., 30000) or unset", file=sys.stderr)
    print(f"Current value: {os.environ.get('DEFAULT_FREE_SHIPPING_THRESHOLD', '(not set)')}\n", file=sys.stderr)
    sys.exit(1)

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_MASK_PII = os.environ.get("LOG_MASK_PII", "true") == "true"  # Mask customer e-mails and phones in logs
LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "5"))
