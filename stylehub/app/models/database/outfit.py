# app/models/database/outfit.py
"""Occasion and payment models owned by a user."""

from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class Occasion(RecordMixin, Base):
    """A styling occasion with the ordered clothes picked for it.

    ``clothes_list`` holds ``{"id", "source"}`` references into either clothes
    table; the references are not checked against those tables.
    """
    __tablename__ = 'occasions'

    user_id: Mapped[str] = mapped_column(
        ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(40), nullable=False, default="other", index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(300), nullable=False, default="")
    dress_code: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    clothes_list: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        Index('idx_occasion_user_date', 'user_id', 'date'),
    )


class Payment(RecordMixin, Base):
    """Payment record; gateway processing lives outside this service."""
    __tablename__ = 'payments'

    user_id: Mapped[str] = mapped_column(
        ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    method: Mapped[str] = mapped_column(String(40), nullable=False, default="card")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
