"""Cached trips and trip memberships."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import CachedRecordModel


class CachedTrip(CachedRecordModel):
    """Trip as last fetched from the backend.

    Dates are ISO-8601 calendar dates ("2025-03-14"), as the backend sends them.
    """

    __tablename__ = "trips"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    destination: Mapped[str] = mapped_column(String(200), nullable=False)
    start_date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    end_date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    style: Mapped[str | None] = mapped_column(String(32), nullable=True)
    base_currency: Mapped[str] = mapped_column(String(3), nullable=False, default="BRL")
    transport_type: Mapped[str] = mapped_column(String(16), nullable=False, default="mixed")
    created_by: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    archived_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class CachedTripMember(CachedRecordModel):
    """Membership of a user in a trip."""

    __tablename__ = "trip_members"
    __table_args__ = (Index("ix_trip_members_trip_user", "trip_id", "user_id"),)

    trip_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="participant")
    joined_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    invited_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
