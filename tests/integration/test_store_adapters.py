"""Integration tests for store adapters over real backends.

Tests cover:
- Every adapter empties its store
- clear() is idempotent (second clear on an empty store succeeds)
- Response cache permission failure names remaining buckets

Architecture:
- SQLite via aiosqlite, fakeredis, tmp_path filesystem
"""

import os
import stat

import pytest
import pytest_asyncio

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.persistence import OfflineDatabase
from src.infrastructure.persistence.repositories import OfflineCacheRepository
from src.infrastructure.storage import LocalStorage, ResponseCache
from src.infrastructure.stores import (
    LocalStorageStoreAdapter,
    OfflineDatabaseStoreAdapter,
    ResponseCacheStoreAdapter,
)


@pytest_asyncio.fixture
async def database(tmp_path):
    db = OfflineDatabase(f"sqlite+aiosqlite:///{tmp_path}/offline.db")
    await db.initialize()
    yield db
    await db.close()


@pytest.mark.integration
class TestOfflineDatabaseStoreAdapter:
    """Test offline database adapter."""

    async def test_clear_is_idempotent(self, database):
        # Arrange
        async with database.get_session() as session:
            await OfflineCacheRepository(session).cache_trip(
                {
                    "id": "t-1",
                    "name": "Rio",
                    "destination": "Rio de Janeiro",
                    "start_date": "2025-02-01",
                    "end_date": "2025-02-05",
                    "created_by": "u-1",
                }
            )
        adapter = OfflineDatabaseStoreAdapter(database)

        # Act
        first = await adapter.clear()
        second = await adapter.clear()

        # Assert
        assert first == Success(value=None)
        assert second == Success(value=None)
        assert (await database.stats())["total"] == 0


@pytest.mark.integration
class TestLocalStorageStoreAdapter:
    """Test local storage adapter."""

    async def test_clear_is_idempotent(self, redis_client):
        storage = LocalStorage(redis_client, namespace="halftrip")
        await storage.set("expense_templates", "[]")
        await storage.set("offline_cache_initialized", "true")
        adapter = LocalStorageStoreAdapter(storage)

        assert isinstance(await adapter.clear(), Success)
        assert isinstance(await adapter.clear(), Success)
        assert await storage.keys() == []


@pytest.mark.integration
class TestResponseCacheStoreAdapter:
    """Test response cache adapter."""

    async def test_clear_is_idempotent(self, tmp_path):
        cache = ResponseCache(tmp_path / "cache")
        cache.put("api-cache", "https://api.test/trips", b"[]")
        cache.put("images", "https://cdn.test/cover.jpg", b"jpg")
        adapter = ResponseCacheStoreAdapter(cache)

        assert isinstance(await adapter.clear(), Success)
        assert isinstance(await adapter.clear(), Success)
        assert cache.buckets() == []

    async def test_missing_root_clears_trivially(self, tmp_path):
        adapter = ResponseCacheStoreAdapter(ResponseCache(tmp_path / "never-created"))

        assert isinstance(await adapter.clear(), Success)

    @pytest.mark.skipif(
        os.name != "posix" or os.geteuid() == 0,
        reason="needs POSIX permissions and a non-root user",
    )
    async def test_locked_root_reports_remaining_buckets(self, tmp_path):
        # Arrange
        root = tmp_path / "cache"
        cache = ResponseCache(root)
        cache.put("images", "https://cdn.test/a.png", b"png")
        root.chmod(stat.S_IRUSR | stat.S_IXUSR)
        adapter = ResponseCacheStoreAdapter(cache)

        # Act
        try:
            result = await adapter.clear()
        finally:
            root.chmod(stat.S_IRWXU)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_ACCESS_DENIED
        assert result.error.details["remaining_buckets"] == ["images"]
