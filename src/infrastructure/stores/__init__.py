"""Store adapters registered for secure logout.

Each adapter wraps one client-side store and implements
StoreAdapterProtocol (name + idempotent clear() returning a Result).
"""

from src.infrastructure.stores.base import BaseStoreAdapter
from src.infrastructure.stores.local_storage_adapter import LocalStorageStoreAdapter
from src.infrastructure.stores.offline_database_adapter import (
    OfflineDatabaseStoreAdapter,
)
from src.infrastructure.stores.response_cache_adapter import (
    IncompleteClearError,
    ResponseCacheStoreAdapter,
)

__all__ = [
    "BaseStoreAdapter",
    "IncompleteClearError",
    "LocalStorageStoreAdapter",
    "OfflineDatabaseStoreAdapter",
    "ResponseCacheStoreAdapter",
]
