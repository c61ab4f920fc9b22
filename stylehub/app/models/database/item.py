# app/models/database/item.py
"""Clothing item models owned by stylers and partners."""

from typing import List, Optional

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin

DEFAULT_CLOTH_IMAGE = "https://cdn.stylehub.app/default-cloth.jpg"


class StylerCloth(RecordMixin, Base):
    """Private wardrobe item curated by a styler."""
    __tablename__ = 'styler_clothes'

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    color: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    skin_tone: Mapped[str] = mapped_column(String(20), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")
    owner_id: Mapped[str] = mapped_column(
        ForeignKey('stylers.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    visibility: Mapped[str] = mapped_column(String(10), nullable=False, default="private")

    __table_args__ = (
        Index('idx_styler_cloth_owner_category', 'owner_id', 'category'),
    )


class PartnerCloth(RecordMixin, Base):
    """Catalogue item sold by a partner."""
    __tablename__ = 'partner_clothes'

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    image: Mapped[str] = mapped_column(String(2000), nullable=False, default=DEFAULT_CLOTH_IMAGE)
    color: Mapped[str] = mapped_column(String(40), nullable=False)
    category: Mapped[str] = mapped_column(String(40), nullable=False)
    brand: Mapped[str] = mapped_column(String(120), nullable=False)
    size: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0, index=True)
    material: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    season: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    occasion_tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    wearable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    owner_id: Mapped[str] = mapped_column(
        ForeignKey('partners.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    visibility: Mapped[str] = mapped_column(String(10), nullable=False, default="public")

    __table_args__ = (
        Index('idx_partner_cloth_visibility_created', 'visibility', 'created_at'),
    )
