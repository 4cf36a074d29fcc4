"""Purge outcome value objects.

A purge pass produces one PurgeOutcome per registered store adapter, in
registration order, wrapped in an AggregatePurgeResult. Both are created
fresh for every pass and handed to the caller by value.

Usage:
    >>> result = AggregatePurgeResult.from_outcomes([
    ...     PurgeOutcome.succeeded("offline_database"),
    ...     PurgeOutcome.failed("local_storage", error),
    ... ])
    >>> result.all_succeeded
    False
    >>> result.failed_adapters
    ('local_storage',)
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.domain.errors import ClearError


@dataclass(frozen=True, slots=True, kw_only=True)
class PurgeOutcome:
    """Result of clearing a single store.

    Attributes:
        adapter_name: Name of the adapter that was cleared.
        success: True if the store was emptied.
        error: ClearError describing the cause when success is False.
    """

    adapter_name: str
    success: bool
    error: ClearError | None = None

    def __post_init__(self) -> None:
        """Enforce that failures carry an error and successes do not."""
        if self.success and self.error is not None:
            raise ValueError("successful outcome cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("failed outcome requires an error")

    @classmethod
    def succeeded(cls, adapter_name: str) -> "PurgeOutcome":
        """Build a successful outcome."""
        return cls(adapter_name=adapter_name, success=True)

    @classmethod
    def failed(cls, adapter_name: str, error: ClearError) -> "PurgeOutcome":
        """Build a failed outcome."""
        return cls(adapter_name=adapter_name, success=False, error=error)

    @property
    def error_message(self) -> str | None:
        """Human-readable cause of the failure, if any."""
        return self.error.message if self.error is not None else None


@dataclass(frozen=True, slots=True, kw_only=True)
class AggregatePurgeResult:
    """Ordered outcomes of one purge pass.

    Attributes:
        outcomes: One outcome per adapter, in registration order.
        all_succeeded: True iff every outcome succeeded (True when empty).
    """

    outcomes: tuple[PurgeOutcome, ...]
    all_succeeded: bool

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[PurgeOutcome]) -> "AggregatePurgeResult":
        """Build the aggregate, deriving all_succeeded from the outcomes."""
        collected = tuple(outcomes)
        return cls(
            outcomes=collected,
            all_succeeded=all(outcome.success for outcome in collected),
        )

    @property
    def failed_adapters(self) -> tuple[str, ...]:
        """Names of adapters whose clear failed, in registration order."""
        return tuple(o.adapter_name for o in self.outcomes if not o.success)

    @property
    def succeeded_adapters(self) -> tuple[str, ...]:
        """Names of adapters whose clear succeeded, in registration order."""
        return tuple(o.adapter_name for o in self.outcomes if o.success)
