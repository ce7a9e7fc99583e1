import logging

from redis import Redis

import config
from db import create_snapshot_engine, create_session_maker
from enums.storage_backend import StorageBackend
from repositories.cart_snapshot import CartSnapshotRepository
from repositories.cart_snapshot_redis import RedisCartSnapshotRepository

logger = logging.getLogger(__name__)


def create_snapshot_repository() -> CartSnapshotRepository | RedisCartSnapshotRepository:
    """
    Build the snapshot repository selected by config.CART_STORAGE_BACKEND.

    Called once at application start; the result is handed to CartStore.
    """
    if config.CART_STORAGE_BACKEND == StorageBackend.REDIS:
        logger.info(f"[Init] Cart snapshots stored in Redis at {config.REDIS_HOST}:{config.REDIS_PORT}")
        client = Redis(
            host=config.REDIS_HOST,
            port=config.REDIS_PORT,
            password=config.REDIS_PASSWORD,
            decode_responses=True
        )
        return RedisCartSnapshotRepository(client)

    logger.info(f"[Init] Cart snapshots stored in SQL database {config.CART_DB_URL}")
    engine = create_snapshot_engine(config.CART_DB_URL)
    return CartSnapshotRepository(create_session_maker(engine))
