"""Store adapter for namespaced local storage."""

from redis.exceptions import AuthenticationError, NoPermissionError, RedisError

from src.core.constants import LOCAL_STORAGE_STORE, STORE_CLEAR_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.domain.errors import ClearError
from src.infrastructure.storage.local_storage import (
    LocalStorage,
    NamespaceNotEmptyError,
)
from src.infrastructure.stores.base import BaseStoreAdapter


class LocalStorageStoreAdapter(BaseStoreAdapter):
    """Removes every key in the local storage namespace."""

    def __init__(
        self,
        storage: LocalStorage | None,
        *,
        name: str = LOCAL_STORAGE_STORE,
        timeout: float = STORE_CLEAR_TIMEOUT_DEFAULT,
    ) -> None:
        super().__init__(name=name, timeout=timeout)
        self._storage = storage

    def _is_available(self) -> bool:
        return self._storage is not None

    def _unavailable_error(self) -> ClearError:
        return self._error(
            ErrorCode.STORE_UNAVAILABLE,
            "Local storage is disabled",
        )

    async def _clear_store(self) -> None:
        assert self._storage is not None
        removed = await self._storage.clear()
        self._logger.debug(
            "local_storage_cleared",
            namespace=self._storage.namespace,
            keys_removed=removed,
        )

    def _map_exception(self, error: Exception) -> ClearError:
        details = {"error_type": type(error).__name__, "error": str(error)}
        # NoPermissionError is not a subclass of AuthenticationError
        if isinstance(error, (AuthenticationError, NoPermissionError)):
            return self._error(
                ErrorCode.STORE_ACCESS_DENIED,
                "Local storage refused access",
                details=details,
            )
        if isinstance(error, NamespaceNotEmptyError):
            return self._error(
                ErrorCode.STORE_CLEAR_FAILED,
                f"Local storage clear incomplete: {error}",
                details={**details, "remaining_keys": error.remaining},
            )
        if isinstance(error, RedisError):
            return self._error(
                ErrorCode.STORE_CLEAR_FAILED,
                f"Local storage clear failed: {error}",
                details=details,
            )
        return super()._map_exception(error)
