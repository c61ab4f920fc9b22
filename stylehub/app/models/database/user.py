# File: app/models/database/user.py

"""Account and profile models.

This module contains all models related to principals:
- User accounts (credentials and role)
- Styler profiles
- Partner (vendor) profiles

Styler and Partner rows share their primary key with the owning user, so
ownership of a profile is simply ``principal.id == profile.id``. Deleting the
user deletes the profile.
"""

from typing import Any, Dict, Optional

from sqlalchemy import JSON, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class User(RecordMixin, Base):
    """User account with credentials and role."""
    __tablename__ = 'users'

    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user", index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, default="")


class Styler(RecordMixin, Base):
    """Styler profile; ``id`` is the owning user's id."""
    __tablename__ = 'stylers'

    id: Mapped[str] = mapped_column(String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(40), nullable=False, default="")
    country: Mapped[str] = mapped_column(String(80), nullable=False, default="")
    gender: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    avatar: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    # "metadata" is reserved on declarative classes
    profile_metadata: Mapped[Dict[str, Any]] = mapped_column("metadata", JSON, nullable=False, default=dict)

    __table_args__ = (
        Index('idx_styler_country_gender', 'country', 'gender'),
    )


class Partner(RecordMixin, Base):
    """Partner (vendor) profile; ``id`` is the owning user's id."""
    __tablename__ = 'partners'

    id: Mapped[str] = mapped_column(String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(40), nullable=False, default="")
    address: Mapped[str] = mapped_column(String(400), nullable=False, default="")
    company: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    avatar: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    profile_metadata: Mapped[Dict[str, Any]] = mapped_column("metadata", JSON, nullable=False, default=dict)


# Profile table created for each account role that has one
PROFILE_MODELS = {
    "styler": Styler,
    "partner": Partner,
}
