"""Cache purge domain events.

Three-state pattern for a purge pass:
    - CachePurgeAttempted: Published before the first store is cleared
    - CachePurgeSucceeded: Every registered store was cleared
    - CachePurgePartiallyFailed: At least one store could not be cleared

There is no "purge failed" terminal event: a partial failure is recorded for
auditing and the sign-out continues regardless.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class CachePurgeAttempted(DomainEvent):
    """Purge pass started.

    Attributes:
        transition_id: Correlates events of one secure transition.
    """

    transition_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class CachePurgeSucceeded(DomainEvent):
    """Every registered store was cleared.

    Attributes:
        transition_id: Correlates events of one secure transition.
        adapter_count: Number of stores cleared.
    """

    transition_id: UUID
    adapter_count: int


@dataclass(frozen=True, kw_only=True, slots=True)
class CachePurgePartiallyFailed(DomainEvent):
    """One or more stores could not be cleared.

    Attributes:
        transition_id: Correlates events of one secure transition.
        adapter_count: Number of stores attempted.
        failed_adapters: Names of stores that were not cleared.
        error_codes: Error code per failed store, same order as failed_adapters.
    """

    transition_id: UUID
    adapter_count: int
    failed_adapters: tuple[str, ...]
    error_codes: tuple[str, ...] = field(default_factory=tuple)
