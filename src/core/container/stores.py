"""Store adapter and invalidation registry factories.

The registry is the single place deciding which local stores a secure
logout clears, and in which order.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_local_storage,
    get_offline_database,
    get_response_cache,
)

if TYPE_CHECKING:
    from src.application.services.invalidation_registry import InvalidationRegistry


@lru_cache()
def get_invalidation_registry() -> "InvalidationRegistry":
    """Get invalidation registry singleton (app-scoped).

    Registers, in order:
        1. offline_database: offline trips, expenses, notes, queued writes
        2. local_storage: templates, preferences, offline-initialized flag
        3. response_cache: cached network responses

    Unconfigured stores are still registered; their adapters report
    STORE_UNAVAILABLE so every purge pass shows which stores were skipped.

    Returns:
        InvalidationRegistry with the three built-in adapters.
    """
    from src.application.services.invalidation_registry import InvalidationRegistry
    from src.infrastructure.stores import (
        LocalStorageStoreAdapter,
        OfflineDatabaseStoreAdapter,
        ResponseCacheStoreAdapter,
    )

    timeout = get_settings().store_clear_timeout_seconds

    return InvalidationRegistry(
        [
            OfflineDatabaseStoreAdapter(get_offline_database(), timeout=timeout),
            LocalStorageStoreAdapter(get_local_storage(), timeout=timeout),
            ResponseCacheStoreAdapter(get_response_cache(), timeout=timeout),
        ]
    )
