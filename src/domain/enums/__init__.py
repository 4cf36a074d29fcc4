"""Domain enums for business logic.

Available Enums:
    - TransitionState: Phases of one secure transition
    - SyncStatus: Sync state of a row in the offline cache
    - SyncOperation: Kind of queued offline mutation
"""

from src.domain.enums.sync_status import SyncOperation, SyncStatus
from src.domain.enums.transition_state import TransitionState

__all__ = [
    "SyncOperation",
    "SyncStatus",
    "TransitionState",
]
