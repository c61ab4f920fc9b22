"""Pydantic models for clothing items.

Styler clothes use closed vocabularies for colour, category, skin tone and
gender; partner catalogue items are free-form retail listings.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from app.models.domain.common import CamelModel

ClothColor = Literal[
    "red", "blue", "green", "yellow", "black", "white", "gray", "brown", "pink",
    "purple", "orange", "beige", "navy", "maroon", "teal", "coral", "multi",
]
ClothCategory = Literal[
    "dress", "shirt", "pants", "jacket", "skirt", "top", "shorts", "suit", "gown",
    "blazer", "sweater", "coat",
]
SkinTone = Literal["fair", "light", "medium", "tan", "deep", "dark"]
ClothGender = Literal["male", "female", "unisex"]
VisibilityValue = Literal["public", "private"]

VOCABULARY_FIELDS = ("color", "category", "skin_tone", "gender")


def _lower(v):
    return v.strip().lower() if isinstance(v, str) else v


class StylerClothCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    color: ClothColor
    category: ClothCategory
    skin_tone: SkinTone
    gender: ClothGender
    age: Optional[int] = Field(None, ge=0, le=120)
    image: Optional[str] = Field(None, max_length=2000)
    note: str = Field("", max_length=2000)

    @field_validator(*VOCABULARY_FIELDS, mode="before")
    @classmethod
    def normalize_vocabulary(cls, v):
        return _lower(v)


class StylerClothUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    color: Optional[ClothColor] = None
    category: Optional[ClothCategory] = None
    skin_tone: Optional[SkinTone] = None
    gender: Optional[ClothGender] = None
    age: Optional[int] = Field(None, ge=0, le=120)
    image: Optional[str] = Field(None, max_length=2000)
    note: Optional[str] = Field(None, max_length=2000)

    @field_validator(*VOCABULARY_FIELDS, mode="before")
    @classmethod
    def normalize_vocabulary(cls, v):
        return _lower(v)


class StylerClothResponse(CamelModel):
    id: str
    name: str
    color: str
    category: str
    skin_tone: str
    gender: str
    age: Optional[int] = None
    image: Optional[str] = None
    note: str = ""
    owner_id: str
    visibility: str
    created_at: datetime
    updated_at: datetime


class PartnerClothCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    color: str = Field(..., min_length=1, max_length=40)
    category: str = Field(..., min_length=1, max_length=40)
    brand: str = Field(..., min_length=1, max_length=120)
    size: str = Field(..., min_length=1, max_length=20)
    price: float = Field(0, ge=0)
    material: Optional[str] = Field(None, max_length=120)
    season: List[str] = Field(default_factory=list)
    occasion_tags: List[str] = Field(default_factory=list)
    wearable: bool = True
    image: Optional[str] = Field(None, max_length=2000)
    visibility: VisibilityValue = "public"


class PartnerClothUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    color: Optional[str] = Field(None, min_length=1, max_length=40)
    category: Optional[str] = Field(None, min_length=1, max_length=40)
    brand: Optional[str] = Field(None, min_length=1, max_length=120)
    size: Optional[str] = Field(None, min_length=1, max_length=20)
    price: Optional[float] = Field(None, ge=0)
    material: Optional[str] = Field(None, max_length=120)
    season: Optional[List[str]] = None
    occasion_tags: Optional[List[str]] = None
    wearable: Optional[bool] = None
    image: Optional[str] = Field(None, max_length=2000)
    visibility: Optional[VisibilityValue] = None


class PartnerClothResponse(CamelModel):
    id: str
    name: str
    color: str
    category: str
    brand: str
    size: str
    price: float
    material: Optional[str] = None
    season: List[str] = Field(default_factory=list)
    occasion_tags: List[str] = Field(default_factory=list)
    wearable: bool = True
    image: str
    owner_id: str
    visibility: str
    created_at: datetime
    updated_at: datetime
