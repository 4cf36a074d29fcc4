"""Base model and mixins for offline cache tables.

The offline cache mirrors rows fetched from the hosted backend so trips,
expenses and notes stay readable without a connection. Cached rows keep the
backend's identifiers as primary keys and carry sync metadata describing
how they relate to the backend copy.

This module provides:
- BaseModel: Declarative base for every offline cache table
- SyncMetadataMixin: Sync status columns shared by mirrored rows
- CachedRecordModel: Recommended base for mirrored rows (combines both)

Usage:
    class CachedTrip(CachedRecordModel):
        __tablename__ = "trips"
        name: Mapped[str] = mapped_column(String(200))
        # Has: id, sync_status, sync_error, last_synced_at, locally_modified_at

Note: Every table registered on BaseModel.metadata is emptied by
OfflineDatabase.clear_all() on secure logout. A table that must survive
logout does not belong in this metadata.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, Text
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.domain.enums import SyncStatus


class BaseModel(DeclarativeBase):
    """Declarative base for all offline cache tables."""

    __abstract__ = True

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Class name and primary key.
        """
        pk = getattr(self, "id", None)
        return f"<{self.__class__.__name__}(id={pk})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert row to a plain dictionary keyed by column name.

        Returns:
            dict: Column values (datetimes as ISO strings).
        """
        data: dict[str, Any] = {}
        for key, column in sa_inspect(type(self)).columns.items():
            value = getattr(self, key)
            data[column.name] = value.isoformat() if isinstance(value, datetime) else value
        return data


class SyncMetadataMixin:
    """Sync metadata for rows mirrored from the backend.

    Fields:
        sync_status: synced, pending (local edit not yet pushed) or error
        sync_error: Last push error, if any
        last_synced_at: When the row last matched the backend
        locally_modified_at: When the row was last edited offline
    """

    sync_status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=SyncStatus.SYNCED.value,
    )
    sync_error: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_synced_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    locally_modified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )


class CachedRecordModel(SyncMetadataMixin, BaseModel):
    """Base class for rows mirrored from the backend.

    Provides:
        - id: Backend identifier (string UUID) as primary key
        - created_at / updated_at: Backend timestamps, as received
        - sync metadata (from SyncMetadataMixin)
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
