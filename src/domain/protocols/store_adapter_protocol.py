"""Store adapter protocol for the cache invalidation workflow.

A store adapter wraps exactly one physical local store (offline database,
key-value storage, response cache) behind a single clear operation.

Contract:
- name is unique within an invalidation registry
- clear() is idempotent: an empty or never-populated store clears trivially
- clear() never raises: every failure is returned as Failure(ClearError)
- clear() never leaves an undetected partial state: either the whole
  logical store is emptied or the failure says what remains
- adapters wrapping I/O-backed stores bound their own latency and report
  STORE_CLEAR_TIMEOUT instead of hanging the purge pass
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import ClearError


class StoreAdapterProtocol(Protocol):
    """Protocol for a single clearable local store.

    Infrastructure adapters implement this without inheritance.

    Example:
        >>> class ScratchAdapter:
        ...     name = "scratch"
        ...
        ...     async def clear(self) -> Result[None, ClearError]:
        ...         self._items.clear()
        ...         return Success(value=None)
    """

    @property
    def name(self) -> str:
        """Registry-unique adapter name (e.g., "offline_database")."""
        ...

    async def clear(self) -> Result[None, ClearError]:
        """Empty the wrapped store.

        Returns:
            Success(None) when the store is empty afterwards.
            Failure(ClearError) carrying the cause and this adapter's name.
        """
        ...
