"""Base store adapter with shared clear handling.

This module provides a base class for store adapters that handles:
- Availability check (store not configured or disabled)
- Per-store timeout around the clear
- Exception to ClearError mapping
- Structured logging with store context

Subclasses only need to:
1. Implement _clear_store() (raise on failure)
2. Optionally override _is_available() and _map_exception()

Architecture:
    - Infrastructure layer (adapters for local stores)
    - Implements StoreAdapterProtocol without inheritance (structural typing)
    - Returns Result types; clear() never raises
"""

import asyncio
from typing import Any

import structlog

from src.core.constants import STORE_CLEAR_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import ClearError


class BaseStoreAdapter:
    """Base class for store adapters.

    Attributes:
        _name: Registry name of the adapter.
        _timeout: Upper bound for one clear, in seconds.
        _logger: Structured logger with store context.

    Example:
        >>> class TempDirStoreAdapter(BaseStoreAdapter):
        ...     def __init__(self, path: Path) -> None:
        ...         super().__init__(name="temp_dir")
        ...         self._path = path
        ...
        ...     async def _clear_store(self) -> None:
        ...         await asyncio.to_thread(shutil.rmtree, self._path, True)
    """

    def __init__(
        self,
        *,
        name: str,
        timeout: float = STORE_CLEAR_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize base store adapter.

        Args:
            name: Unique registry name (e.g., "offline_database").
            timeout: Upper bound for one clear in seconds.
        """
        self._name = name
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{name}_store")

    @property
    def name(self) -> str:
        """Unique registry name of this adapter."""
        return self._name

    async def clear(self) -> Result[None, ClearError]:
        """Empty the wrapped store.

        Idempotent: clearing an already-empty store succeeds.

        Returns:
            Success(None): Store emptied.
            Failure(ClearError): Store unavailable, access denied, clear
                failed or timed out.
        """
        if not self._is_available():
            self._logger.warning("store_unavailable", store=self._name)
            return Failure(error=self._unavailable_error())

        try:
            async with asyncio.timeout(self._timeout):
                await self._clear_store()
        except TimeoutError:
            self._logger.warning(
                "store_clear_timeout",
                store=self._name,
                timeout=self._timeout,
            )
            return Failure(
                error=self._error(
                    ErrorCode.STORE_CLEAR_TIMEOUT,
                    f"Clear did not finish within {self._timeout}s",
                    details=self._timeout_details(),
                )
            )
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            if task is not None and task.cancelling() > 0:
                raise
            self._logger.warning(
                "store_clear_cancelled",
                store=self._name,
                error_message=str(e),
            )
            return Failure(
                error=self._error(
                    ErrorCode.STORE_CLEAR_FAILED,
                    "Clear was cancelled by the store driver",
                    details={"error_type": type(e).__name__},
                )
            )
        except Exception as e:
            error = self._map_exception(e)
            self._logger.warning(
                "store_clear_error",
                store=self._name,
                error_code=error.code.value,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return Failure(error=error)

        self._logger.debug("store_clear_success", store=self._name)
        return Success(value=None)

    async def _clear_store(self) -> None:
        """Empty the store. Raise on failure."""
        raise NotImplementedError

    def _is_available(self) -> bool:
        """Whether the store is configured and enabled."""
        return True

    def _timeout_details(self) -> dict[str, Any]:
        """Details attached to a STORE_CLEAR_TIMEOUT error."""
        return {"timeout_seconds": self._timeout}

    def _unavailable_error(self) -> ClearError:
        return self._error(ErrorCode.STORE_UNAVAILABLE, "Store is not configured")

    def _map_exception(self, error: Exception) -> ClearError:
        """Map an exception raised by _clear_store() to a ClearError."""
        return self._error(
            ErrorCode.STORE_CLEAR_FAILED,
            f"Unexpected error: {error}",
            details={"error_type": type(error).__name__, "error": str(error)},
        )

    def _error(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> ClearError:
        return ClearError(
            code=code,
            message=message,
            adapter_name=self._name,
            details=details,
        )
