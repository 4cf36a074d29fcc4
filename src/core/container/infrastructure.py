"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, JSON outside development)
- Offline database (SQLite via aiosqlite)
- Local storage (Redis, namespaced)
- Response cache (on-disk buckets)
- Auth provider session terminator (HTTP)

A store whose location is not configured has no backend: its factory
returns None and the matching adapter reports the store as unavailable.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.session_terminator_protocol import (
        SessionTerminatorProtocol,
    )
    from src.infrastructure.persistence.database import OfflineDatabase
    from src.infrastructure.storage.local_storage import LocalStorage
    from src.infrastructure.storage.response_cache import ResponseCache


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    log_level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(
        use_json=not settings.is_development,
        log_level=log_level,
    )


@lru_cache()
def get_offline_database() -> "OfflineDatabase | None":
    """Get offline database singleton, or None when not configured.

    Usage:
        db = get_offline_database()
        if db is not None:
            async with db.get_session() as session:
                ...
    """
    from src.infrastructure.persistence.database import OfflineDatabase

    settings = get_settings()
    if not settings.offline_database_url:
        return None
    return OfflineDatabase(
        database_url=settings.offline_database_url,
        echo=settings.offline_database_echo,
    )


@lru_cache()
def get_local_storage() -> "LocalStorage | None":
    """Get local storage singleton, or None when disabled.

    Returns LocalStorage over a pooled Redis client. The client connects
    lazily, so a stopped Redis surfaces on first use, not here.
    """
    from redis.asyncio import Redis

    from src.infrastructure.storage.local_storage import LocalStorage

    settings = get_settings()
    if not settings.local_storage_url:
        return None

    redis_client = Redis.from_url(
        settings.local_storage_url,
        decode_responses=False,
        socket_connect_timeout=settings.store_clear_timeout_seconds,
        socket_timeout=settings.store_clear_timeout_seconds,
    )
    return LocalStorage(
        redis_client=redis_client,
        namespace=settings.local_storage_namespace,
    )


@lru_cache()
def get_response_cache() -> "ResponseCache | None":
    """Get response cache singleton, or None when not configured."""
    from src.infrastructure.storage.response_cache import ResponseCache

    settings = get_settings()
    if settings.response_cache_dir is None:
        return None
    return ResponseCache(root=settings.response_cache_dir)


@lru_cache()
def get_session_terminator() -> "SessionTerminatorProtocol":
    """Get auth provider session terminator singleton."""
    from src.infrastructure.auth.http_session_terminator import HttpSessionTerminator

    settings = get_settings()
    return HttpSessionTerminator(
        base_url=settings.auth_base_url,
        api_key=settings.auth_api_key,
        timeout=settings.auth_timeout_seconds,
    )
