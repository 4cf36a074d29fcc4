"""Offline cache models.

Importing this package registers every offline cache table on
BaseModel.metadata, which is what OfflineDatabase creates, counts and clears.
"""

from src.infrastructure.persistence.models.activity import CachedActivity
from src.infrastructure.persistence.models.expense import (
    CachedExpense,
    CachedExpenseSplit,
)
from src.infrastructure.persistence.models.note import CachedTripBudget, CachedTripNote
from src.infrastructure.persistence.models.sync_queue import SyncQueueEntry
from src.infrastructure.persistence.models.trip import CachedTrip, CachedTripMember
from src.infrastructure.persistence.models.user import CachedUser

__all__ = [
    "CachedActivity",
    "CachedExpense",
    "CachedExpenseSplit",
    "CachedTrip",
    "CachedTripBudget",
    "CachedTripMember",
    "CachedTripNote",
    "CachedUser",
    "SyncQueueEntry",
]
