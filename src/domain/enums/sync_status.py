"""Offline cache sync enums."""

from enum import Enum


class SyncStatus(str, Enum):
    """Sync state of a cached row relative to the backend."""

    SYNCED = "synced"
    PENDING = "pending"
    ERROR = "error"


class SyncOperation(str, Enum):
    """Kind of mutation queued while offline."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
