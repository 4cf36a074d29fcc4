"""Offline cache repositories."""

from src.infrastructure.persistence.repositories.offline_cache_repository import (
    OfflineCacheRepository,
)

__all__ = [
    "OfflineCacheRepository",
]
