"""Integration tests for LocalStorage.

Architecture:
- fakeredis async client (no live Redis required)
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure
from src.infrastructure.storage import LocalStorage, NamespaceNotEmptyError
from src.infrastructure.stores import LocalStorageStoreAdapter


def _write_after_scan(monkeypatch, storage, redis_client, writes):
    """Make storage.keys() write a new namespaced key after each of the
    first `writes` scans, as a concurrent writer would."""
    scan = storage.keys
    calls = 0

    async def keys_then_write():
        nonlocal calls
        found = await scan()
        calls += 1
        if calls <= writes:
            await redis_client.set(f"halftrip:late:{calls}", "v")
        return found

    monkeypatch.setattr(storage, "keys", keys_then_write)


@pytest.mark.integration
class TestLocalStorage:
    """Test namespaced key-value operations."""

    async def test_set_get_remove(self, redis_client):
        storage = LocalStorage(redis_client, namespace="halftrip")

        await storage.set("offline_cache_initialized", "true")
        assert await storage.get("offline_cache_initialized") == "true"
        assert await redis_client.get("halftrip:offline_cache_initialized") == b"true"

        assert await storage.remove("offline_cache_initialized") is True
        assert await storage.get("offline_cache_initialized") is None
        assert await storage.remove("offline_cache_initialized") is False

    async def test_json_round_trip(self, redis_client):
        storage = LocalStorage(redis_client, namespace="halftrip")
        templates = [{"description": "Uber", "category": "transport"}]

        await storage.set_json("expense_templates", templates)

        assert await storage.get_json("expense_templates") == templates
        assert await storage.get_json("missing") is None

    async def test_keys_lists_namespace_only(self, redis_client):
        storage = LocalStorage(redis_client, namespace="halftrip")
        await storage.set("b", "2")
        await storage.set("a", "1")
        await redis_client.set("other-app:a", "x")

        assert await storage.keys() == ["a", "b"]

    async def test_clear_removes_namespace_and_keeps_others(self, redis_client):
        # Arrange
        storage = LocalStorage(redis_client, namespace="halftrip")
        for i in range(1200):
            await storage.set(f"pref:{i}", "v")
        await redis_client.set("other-app:session", "keep")
        await redis_client.set("halftripper:key", "keep")

        # Act
        removed = await storage.clear()

        # Assert
        assert removed == 1200
        assert await storage.keys() == []
        assert await redis_client.get("other-app:session") == b"keep"
        assert await redis_client.get("halftripper:key") == b"keep"

    async def test_clear_empty_namespace(self, redis_client):
        storage = LocalStorage(redis_client, namespace="halftrip")

        assert await storage.clear() == 0

    async def test_clear_removes_key_written_during_clear(
        self, monkeypatch, redis_client
    ):
        # Arrange
        storage = LocalStorage(redis_client, namespace="halftrip")
        await storage.set("offline_cache_initialized", "true")
        _write_after_scan(monkeypatch, storage, redis_client, writes=1)

        # Act
        removed = await storage.clear()

        # Assert
        assert removed == 2
        assert await redis_client.get("halftrip:late:1") is None
        assert await redis_client.keys("halftrip:*") == []

    async def test_clear_raises_when_writes_never_stop(self, monkeypatch, redis_client):
        storage = LocalStorage(redis_client, namespace="halftrip")
        await storage.set("offline_cache_initialized", "true")
        _write_after_scan(monkeypatch, storage, redis_client, writes=100)

        with pytest.raises(NamespaceNotEmptyError) as exc_info:
            await storage.clear()

        assert exc_info.value.remaining == ["late:3"]


@pytest.mark.integration
class TestLocalStorageStoreAdapterConcurrentWrites:
    """Test that a clear racing a writer is never reported as a success."""

    async def test_keys_left_behind_reported_as_clear_failed(
        self, monkeypatch, redis_client
    ):
        # Arrange
        storage = LocalStorage(redis_client, namespace="halftrip")
        await storage.set("expense_templates", "[]")
        _write_after_scan(monkeypatch, storage, redis_client, writes=100)

        # Act
        result = await LocalStorageStoreAdapter(storage).clear()

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_CLEAR_FAILED
        assert result.error.details["remaining_keys"] == ["late:3"]
