"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Async tests are marked for pytest-asyncio
2. Container singletons are rebuilt for tests that change settings
3. Redis-backed tests use fakeredis instead of a live server
"""

import inspect
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from fakeredis import aioredis

from src.core import container
from src.core.config import get_settings

# Container factories cached with lru_cache, cleared between container tests
_CACHED_FACTORIES = (
    container.get_logger,
    container.get_offline_database,
    container.get_local_storage,
    container.get_response_cache,
    container.get_session_terminator,
    container.get_invalidation_registry,
    container.get_event_bus,
    container.get_purge_coordinator,
    container.get_transition_guard,
)


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol.

    bind() returns the same mock so bound-logger calls stay observable.
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def reset_container():
    """Clear settings and container caches before and after the test."""

    def _clear() -> None:
        get_settings.cache_clear()
        for factory in _CACHED_FACTORIES:
            factory.cache_clear()

    _clear()
    yield
    _clear()


@pytest_asyncio.fixture
async def redis_client():
    """Fresh fakeredis client (bytes responses, like the real pool)."""
    client = aioredis.FakeRedis(decode_responses=False)
    yield client
    await client.flushall()
    await client.aclose()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real local stores"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
