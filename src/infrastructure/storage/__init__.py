"""Client-side storage backends cleared on secure logout."""

from src.infrastructure.storage.local_storage import (
    LocalStorage,
    NamespaceNotEmptyError,
)
from src.infrastructure.storage.response_cache import CachedResponse, ResponseCache

__all__ = [
    "CachedResponse",
    "LocalStorage",
    "NamespaceNotEmptyError",
    "ResponseCache",
]
