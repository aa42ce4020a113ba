"""
Redis Connection and Record Store

Provides Redis connection pooling and the Redis mirror of the client-side
record store.

Each storage key holds the JSON text of one raw collection, exactly as the
client persists it, namespaced with a configurable prefix.

Usage:
    from journey.db.redis import RedisRecordStore, get_redis

    # Get Redis connection
    redis = await get_redis()

    # Read a raw collection
    store = RedisRecordStore()
    raw = await store.get_raw(StorageKey.TASKS)
"""

import json
from typing import Any, Optional, Union

import redis.asyncio as redis

from journey.config import settings, yaml_config
from journey.enums.progress import StorageKey


# Get Redis configuration from yaml config
redis_config: dict[str, Any] = yaml_config.get("redis", {})
DEFAULT_KEY_PREFIX: str = redis_config.get("key_prefix", "journey")


# Connection pool (lazily initialized)
_redis_pool: Optional[redis.ConnectionPool] = None


async def get_redis_pool() -> redis.ConnectionPool:
    """Get or create the Redis connection pool."""
    global _redis_pool
    if _redis_pool is None:
        _redis_pool = redis.ConnectionPool.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            max_connections=10,
        )
    return _redis_pool


async def get_redis() -> redis.Redis:
    """
    Get a Redis connection from the pool.

    Usage:
        redis = await get_redis()
        await redis.get("journey:sal-os-tasks")
    """
    pool = await get_redis_pool()
    return redis.Redis(connection_pool=pool)


async def close_redis_pool() -> None:
    """Close the Redis connection pool."""
    global _redis_pool
    if _redis_pool is not None:
        await _redis_pool.disconnect()
        _redis_pool = None


class RedisRecordStore:
    """
    Redis-backed record store.

    Keys are stored as "{prefix}:{storage key}". Values are JSON text; data
    passed to set_raw() that is not already a string is serialized first.

    No caching happens here: every get_raw() is a fresh round trip, so the
    aggregator always sees the latest persisted state.
    """

    def __init__(self, prefix: str = DEFAULT_KEY_PREFIX) -> None:
        """
        Initialize the record store.

        Args:
            prefix: Redis key prefix for namespacing (default from
                    config/default.yaml redis.key_prefix).
        """
        self.prefix = prefix

    def _make_key(self, key: Union[StorageKey, str]) -> str:
        """Generate a namespaced Redis key for a storage key."""
        name = key.value if isinstance(key, StorageKey) else key
        return f"{self.prefix}:{name}"

    async def get_raw(self, key: Union[StorageKey, str]) -> Optional[str]:
        """Get the raw JSON text stored under key, or None if absent."""
        r = await get_redis()
        return await r.get(self._make_key(key))

    async def set_raw(self, key: Union[StorageKey, str], value: Any) -> None:
        """Store value under key, serializing non-string data as JSON."""
        r = await get_redis()
        payload = value if isinstance(value, str) else json.dumps(value)
        await r.set(self._make_key(key), payload)
