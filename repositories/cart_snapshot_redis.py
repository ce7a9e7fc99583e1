from redis import Redis, RedisError

from exceptions.cart import CartPersistenceException


class RedisCartSnapshotRepository:
    """
    Cart snapshots kept under a plain Redis string key.

    Same contract as CartSnapshotRepository; the client must be created with
    decode_responses=True so get() returns str.
    """

    def __init__(self, client: Redis, prefix: str = "storefront:"):
        self.client = client
        self.prefix = prefix

    def _redis_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> str | None:
        try:
            return self.client.get(self._redis_key(key))
        except RedisError as e:
            raise CartPersistenceException(key, "read", str(e)) from e

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self._redis_key(key), value)
        except RedisError as e:
            raise CartPersistenceException(key, "write", str(e)) from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(self._redis_key(key))
        except RedisError as e:
            raise CartPersistenceException(key, "delete", str(e)) from e
