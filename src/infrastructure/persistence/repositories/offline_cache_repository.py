"""OfflineCacheRepository - writes and reads rows mirrored from the backend.

Rows arrive as plain dictionaries (the backend's JSON). Unknown keys are
dropped, ISO-8601 timestamps are parsed for DateTime columns, and rows are
upserted by primary key so re-caching a trip never duplicates it.
"""

import json
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.enums import SyncOperation, SyncStatus
from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models import (
    CachedExpense,
    CachedTrip,
    CachedTripMember,
    SyncQueueEntry,
)

# Nested fields the backend embeds in trip payloads
_TRIP_NESTED_KEYS = ("trip_members", "member_count")


def _to_model[M: BaseModel](model: type[M], row: dict[str, Any]) -> M:
    """Build a model instance from a backend row.

    Args:
        model: Target model class.
        row: Backend row keyed by column name.

    Returns:
        Model instance carrying only the known columns.
    """
    values: dict[str, Any] = {}
    for key, column in sa_inspect(model).columns.items():
        if column.name not in row:
            continue
        value = row[column.name]
        if isinstance(column.type, DateTime) and isinstance(value, str):
            value = datetime.fromisoformat(value)
        values[key] = value
    return model(**values)


class OfflineCacheRepository:
    """Offline cache reads and writes for trips, expenses and queued writes.

    Attributes:
        session: SQLAlchemy async session from OfflineDatabase.get_session().

    Example:
        >>> async with offline_database.get_session() as session:
        ...     repo = OfflineCacheRepository(session)
        ...     await repo.cache_trips(trips)
        ...     cached = await repo.get_cached_trip(trip_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def cache_trip(self, trip: dict[str, Any]) -> None:
        """Upsert one trip, marking it synced."""
        await self.cache_trips([trip])

    async def cache_trips(self, trips: list[dict[str, Any]]) -> None:
        """Upsert trips, marking each as synced.

        Args:
            trips: Backend trip rows. Embedded members and member counts
                are ignored.
        """
        synced_at = datetime.now(UTC)
        for trip in trips:
            row = {k: v for k, v in trip.items() if k not in _TRIP_NESTED_KEYS}
            model = _to_model(CachedTrip, row)
            model.sync_status = SyncStatus.SYNCED.value
            model.last_synced_at = synced_at
            await self.session.merge(model)
        await self.session.flush()

    async def cache_trip_members(self, members: list[dict[str, Any]]) -> None:
        """Upsert trip memberships."""
        for member in members:
            await self.session.merge(_to_model(CachedTripMember, member))
        await self.session.flush()

    async def get_cached_trip(self, trip_id: str) -> dict[str, Any] | None:
        """Fetch one cached trip.

        Args:
            trip_id: Backend trip identifier.

        Returns:
            Trip row, or None if the trip is not cached.
        """
        trip = await self.session.get(CachedTrip, trip_id)
        return trip.to_dict() if trip is not None else None

    async def get_cached_trips(self) -> list[dict[str, Any]]:
        """All cached trips, most recent start date first."""
        stmt = select(CachedTrip).order_by(CachedTrip.start_date.desc())
        result = await self.session.execute(stmt)
        return [trip.to_dict() for trip in result.scalars().all()]

    async def get_cached_user_trips(self, user_id: str) -> list[dict[str, Any]]:
        """Cached trips the user is a member of."""
        stmt = (
            select(CachedTrip)
            .join(CachedTripMember, CachedTripMember.trip_id == CachedTrip.id)
            .where(CachedTripMember.user_id == user_id)
            .order_by(CachedTrip.start_date.desc())
        )
        result = await self.session.execute(stmt)
        return [trip.to_dict() for trip in result.scalars().unique().all()]

    async def cache_expenses(self, expenses: list[dict[str, Any]]) -> None:
        """Upsert expenses, marking each as synced."""
        synced_at = datetime.now(UTC)
        for expense in expenses:
            model = _to_model(CachedExpense, expense)
            model.sync_status = SyncStatus.SYNCED.value
            model.last_synced_at = synced_at
            await self.session.merge(model)
        await self.session.flush()

    async def get_cached_expenses(self, trip_id: str) -> list[dict[str, Any]]:
        """Cached expenses of a trip, newest date first."""
        stmt = (
            select(CachedExpense)
            .where(CachedExpense.trip_id == trip_id)
            .order_by(CachedExpense.date.desc())
        )
        result = await self.session.execute(stmt)
        return [expense.to_dict() for expense in result.scalars().all()]

    async def enqueue_mutation(
        self,
        table_name: str,
        operation: SyncOperation,
        record_id: str,
        data: dict[str, Any] | None = None,
    ) -> int:
        """Queue a write made while offline.

        Args:
            table_name: Offline cache table the write targets.
            operation: Insert, update or delete.
            record_id: Identifier of the written row.
            data: Row payload (omitted for deletes).

        Returns:
            int: Queue entry identifier.
        """
        entry = SyncQueueEntry(
            table_name=table_name,
            operation=operation.value,
            record_id=record_id,
            data=json.dumps(data) if data is not None else None,
            retries=0,
        )
        self.session.add(entry)
        await self.session.flush()
        return entry.id

    async def pending_mutations(self) -> list[dict[str, Any]]:
        """Queued writes, oldest first."""
        stmt = select(SyncQueueEntry).order_by(
            SyncQueueEntry.queued_at, SyncQueueEntry.id
        )
        result = await self.session.execute(stmt)
        return [entry.to_dict() for entry in result.scalars().all()]
