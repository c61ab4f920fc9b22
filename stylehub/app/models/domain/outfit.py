"""Pydantic models for occasions and payments."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from app.models.domain.common import CamelModel
from app.utils.validators import as_utc, is_valid_id


class ClothesRef(CamelModel):
    """Reference to an item in either clothes collection."""
    id: str
    source: Literal["styler", "partner"] = "styler"

    @field_validator("id")
    @classmethod
    def check_id(cls, v):
        if not is_valid_id(v):
            raise ValueError("must be a valid id")
        return v


class OccasionCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    type: str = Field("other", min_length=1, max_length=40)
    date: datetime
    location: str = Field("", max_length=300)
    dress_code: str = Field("", max_length=120)
    notes: str = Field("", max_length=2000)
    clothes_list: List[ClothesRef] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return as_utc(v)


class OccasionUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[str] = Field(None, min_length=1, max_length=40)
    date: Optional[datetime] = None
    location: Optional[str] = Field(None, max_length=300)
    dress_code: Optional[str] = Field(None, max_length=120)
    notes: Optional[str] = Field(None, max_length=2000)
    clothes_list: Optional[List[ClothesRef]] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return as_utc(v) if v is not None else v


class OccasionResponse(CamelModel):
    id: str
    user_id: str
    title: str
    type: str
    date: datetime
    location: str = ""
    dress_code: str = ""
    notes: str = ""
    clothes_list: List[ClothesRef] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class PaymentCreate(CamelModel):
    amount: float = Field(..., ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    method: str = Field("card", min_length=1, max_length=40)
    status: str = Field("pending", min_length=1, max_length=20)
    description: str = Field("", max_length=500)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v):
        return v.upper()


class PaymentUpdate(CamelModel):
    amount: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    method: Optional[str] = Field(None, min_length=1, max_length=40)
    status: Optional[str] = Field(None, min_length=1, max_length=20)
    description: Optional[str] = Field(None, max_length=500)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v):
        return v.upper() if v is not None else v


class PaymentResponse(CamelModel):
    id: str
    user_id: str
    amount: float
    currency: str
    method: str
    status: str
    description: str = ""
    created_at: datetime
    updated_at: datetime
