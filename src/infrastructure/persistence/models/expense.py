"""Cached expenses and their splits."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import CachedRecordModel


class CachedExpense(CachedRecordModel):
    """Shared trip expense.

    Amount is in `currency`; exchange_rate converts it to the trip's base
    currency.
    """

    __tablename__ = "expenses"

    trip_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    exchange_rate: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(32), nullable=False, default="other")
    paid_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    paid_by_participant_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    created_by: Mapped[str] = mapped_column(String(36), nullable=False)
    receipt_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class CachedExpenseSplit(CachedRecordModel):
    """Share of an expense owed by one member or guest participant."""

    __tablename__ = "expense_splits"
    __table_args__ = (Index("ix_expense_splits_expense_user", "expense_id", "user_id"),)

    expense_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    user_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    participant_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    percentage: Mapped[float | None] = mapped_column(Float, nullable=True)
