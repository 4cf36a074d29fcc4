"""Namespaced key-value local storage backed by Redis.

Holds small client-side values that outlive a single run: expense
templates, UI preferences and the "offline cache initialized" flag. Every
key lives under "<namespace>:" so clearing the namespace never touches
other data in the same Redis database.

Redis errors and NamespaceNotEmptyError propagate to the caller; the local
storage store adapter maps them to clear errors.
"""

import json
from typing import Any

from redis.asyncio import Redis

from src.core.constants import (
    LOCAL_STORAGE_CLEAR_MAX_ROUNDS,
    LOCAL_STORAGE_SCAN_BATCH,
)


class NamespaceNotEmptyError(Exception):
    """Keys were still present in the namespace after a clear.

    Attributes:
        remaining: Keys (without the prefix) found by the last scan.
    """

    def __init__(self, namespace: str, remaining: list[str]) -> None:
        super().__init__(
            f"{len(remaining)} key(s) still present in namespace {namespace!r}"
        )
        self.remaining = remaining


class LocalStorage:
    """Key-value storage under a Redis key prefix.

    Attributes:
        _redis: Async Redis client.
        _namespace: Key prefix (without the trailing colon).

    Example:
        >>> storage = LocalStorage(redis_client, namespace="halftrip")
        >>> await storage.set("offline_cache_initialized", "true")
        >>> await storage.clear()
        1
    """

    def __init__(self, redis_client: Redis, namespace: str) -> None:
        """Initialize local storage.

        Args:
            redis_client: Async Redis client instance.
            namespace: Key prefix isolating this client's keys.
        """
        self._redis = redis_client
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    async def get(self, key: str) -> str | None:
        """Get a value.

        Args:
            key: Key within the namespace.

        Returns:
            Stored value, or None if missing.
        """
        value = await self._redis.get(self._key(key))
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def set(self, key: str, value: str) -> None:
        await self._redis.set(self._key(key), value)

    async def get_json(self, key: str) -> Any:
        """Get and parse a JSON value (None if missing)."""
        value = await self.get(key)
        return json.loads(value) if value is not None else None

    async def set_json(self, key: str, value: Any) -> None:
        await self.set(key, json.dumps(value))

    async def remove(self, key: str) -> bool:
        """Remove a key.

        Returns:
            bool: True if the key existed.
        """
        return bool(await self._redis.delete(self._key(key)))

    async def keys(self) -> list[str]:
        """List keys in the namespace (without the prefix), sorted."""
        prefix = f"{self._namespace}:"
        found: list[str] = []
        async for raw in self._redis.scan_iter(
            match=f"{prefix}*", count=LOCAL_STORAGE_SCAN_BATCH
        ):
            key = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            found.append(key.removeprefix(prefix))
        return sorted(found)

    async def clear(self) -> int:
        """Remove every key in the namespace.

        Scans and deletes in rounds until a scan comes back empty, so keys
        written while a round runs are removed by the next one. Each round
        deletes in one MULTI/EXEC transaction. Clearing an empty namespace
        succeeds and returns 0.

        Returns:
            int: Number of keys removed.

        Raises:
            NamespaceNotEmptyError: Keys were still being written after
                LOCAL_STORAGE_CLEAR_MAX_ROUNDS rounds.
        """
        removed = 0
        for _ in range(LOCAL_STORAGE_CLEAR_MAX_ROUNDS):
            keys = await self.keys()
            if not keys:
                return removed
            removed += await self._delete(keys)

        remaining = await self.keys()
        if remaining:
            raise NamespaceNotEmptyError(self._namespace, remaining)
        return removed

    async def _delete(self, keys: list[str]) -> int:
        full_keys = [self._key(key) for key in keys]
        async with self._redis.pipeline(transaction=True) as pipe:
            for start in range(0, len(full_keys), LOCAL_STORAGE_SCAN_BATCH):
                pipe.delete(*full_keys[start : start + LOCAL_STORAGE_SCAN_BATCH])
            results = await pipe.execute()
        return sum(int(count) for count in results)

    async def close(self) -> None:
        """Close the underlying Redis connection pool."""
        await self._redis.aclose()
