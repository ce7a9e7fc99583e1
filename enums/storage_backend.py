from enum import Enum


class StorageBackend(str, Enum):
    """Where the cart snapshot is kept between sessions."""

    SQLITE = "sqlite"
    REDIS = "redis"
