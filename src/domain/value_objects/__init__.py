"""Domain value objects.

Immutable records describing the result of a purge pass.
"""

from src.domain.value_objects.purge_outcome import AggregatePurgeResult, PurgeOutcome

__all__ = [
    "AggregatePurgeResult",
    "PurgeOutcome",
]
