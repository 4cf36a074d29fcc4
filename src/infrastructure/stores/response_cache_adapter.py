"""Store adapter for the on-disk response cache."""

import asyncio
from typing import Any

from src.core.constants import RESPONSE_CACHE_STORE, STORE_CLEAR_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.domain.errors import ClearError
from src.infrastructure.storage.response_cache import ResponseCache
from src.infrastructure.stores.base import BaseStoreAdapter


class IncompleteClearError(Exception):
    """Some buckets survived a clear.

    Attributes:
        remaining: Buckets still present after the attempt.
        cause: First error hit while deleting.
    """

    def __init__(self, remaining: list[str], cause: OSError) -> None:
        super().__init__(f"{len(remaining)} bucket(s) could not be deleted: {cause}")
        self.remaining = remaining
        self.cause = cause


class ResponseCacheStoreAdapter(BaseStoreAdapter):
    """Enumerates and deletes every named bucket.

    Every bucket is attempted even after one fails, so a single locked
    bucket does not leave the rest of the cache behind.

    Deletion runs in a worker thread. A timeout stops the wait, not the
    thread: deletion may continue after STORE_CLEAR_TIMEOUT is reported, so
    the timeout details list the buckets present when it fired.
    """

    def __init__(
        self,
        cache: ResponseCache | None,
        *,
        name: str = RESPONSE_CACHE_STORE,
        timeout: float = STORE_CLEAR_TIMEOUT_DEFAULT,
    ) -> None:
        super().__init__(name=name, timeout=timeout)
        self._cache = cache

    def _is_available(self) -> bool:
        return self._cache is not None

    def _unavailable_error(self) -> ClearError:
        return self._error(
            ErrorCode.STORE_UNAVAILABLE,
            "Response cache directory is not configured",
        )

    def _timeout_details(self) -> dict[str, Any]:
        details = super()._timeout_details()
        assert self._cache is not None
        try:
            details["remaining_buckets"] = self._cache.buckets()
        except OSError:
            details["remaining_buckets"] = None
        return details

    async def _clear_store(self) -> None:
        await asyncio.to_thread(self._delete_buckets)

    def _delete_buckets(self) -> None:
        assert self._cache is not None
        first_error: OSError | None = None
        for bucket in self._cache.buckets():
            try:
                self._cache.delete_bucket(bucket)
            except OSError as e:
                first_error = first_error or e

        if first_error is not None:
            raise IncompleteClearError(self._cache.buckets(), first_error)

    def _map_exception(self, error: Exception) -> ClearError:
        remaining: list[str] = []
        cause: Exception = error
        if isinstance(error, IncompleteClearError):
            remaining = error.remaining
            cause = error.cause

        details = {
            "error_type": type(cause).__name__,
            "error": str(cause),
            "remaining_buckets": remaining,
        }
        if isinstance(cause, PermissionError):
            return self._error(
                ErrorCode.STORE_ACCESS_DENIED,
                "Permission denied deleting response cache buckets",
                details=details,
            )
        if isinstance(cause, OSError):
            return self._error(
                ErrorCode.STORE_CLEAR_FAILED,
                f"Response cache clear failed: {cause}",
                details=details,
            )
        return super()._map_exception(error)
