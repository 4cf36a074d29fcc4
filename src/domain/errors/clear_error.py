"""Store clear error type.

Returned by a store adapter when its wrapped store could not be emptied.
Never raised: the coordinator records it in a PurgeOutcome and moves on to
the next adapter.

Usage:
    from src.domain.errors import ClearError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ClearError(
        code=ErrorCode.STORE_UNAVAILABLE,
        message="Local storage is disabled",
        adapter_name="local_storage",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ClearError(DomainError):
    """Failure to clear one local store.

    Attributes:
        code: ErrorCode enum (STORE_UNAVAILABLE, STORE_ACCESS_DENIED,
            STORE_CLEAR_FAILED, STORE_CLEAR_TIMEOUT).
        message: Human-readable cause.
        adapter_name: Name of the adapter that reported the failure.
        details: Additional context (remaining buckets, original error).
    """

    adapter_name: str

    def __str__(self) -> str:
        """String representation including the adapter name."""
        return f"{self.adapter_name}: {self.code.value}: {self.message}"
