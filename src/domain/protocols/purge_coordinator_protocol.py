"""Purge coordinator protocol.

Lets the transition guard depend on "something that purges every store"
without knowing about the registry or the execution strategy.
"""

from typing import Protocol

from src.domain.value_objects import AggregatePurgeResult


class PurgeCoordinatorProtocol(Protocol):
    """Protocol for running one purge pass across all registered stores."""

    async def purge_all(self) -> AggregatePurgeResult:
        """Clear every registered store.

        Returns:
            AggregatePurgeResult with one outcome per adapter in registration
            order. Never raises for store failures.
        """
        ...
