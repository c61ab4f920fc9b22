"""Pydantic models for accounts and profiles.

These models handle data validation and serialization for signup, login,
admin user management and the styler/partner profile endpoints. Wire names
are camelCase; Python attributes stay snake_case.
"""

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import EmailStr, Field, field_validator

from app.models.domain.common import CamelModel, Role

SignupRole = Literal["user", "styler", "partner"]


class SignupRequest(CamelModel):
    """Model for self-service registration."""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., min_length=1, max_length=120)
    role: SignupRole = "user"

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.lower()


class LoginRequest(CamelModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.strip().lower()


class UserCreate(CamelModel):
    """Admin-side account creation."""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field("", max_length=120)
    role: Role = Role.USER

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.lower()


class UserUpdate(CamelModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8, max_length=128)
    name: Optional[str] = Field(None, max_length=120)

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.lower() if v is not None else v


class UserResponse(CamelModel):
    """Response model for user data. The password hash never leaves the store."""
    id: str
    email: str
    role: Role
    name: str = ""
    created_at: datetime
    updated_at: datetime


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class StylerCreate(CamelModel):
    """Profile created alongside a styler account."""
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    phone: str = Field("", max_length=40)
    country: str = Field("", max_length=80)
    gender: str = Field("", max_length=20)
    avatar: Optional[str] = Field(None, max_length=2000)
    profile_metadata: Dict[str, Any] = Field(default_factory=dict, alias="metadata")

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.lower()


class StylerUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=40)
    country: Optional[str] = Field(None, max_length=80)
    gender: Optional[str] = Field(None, max_length=20)
    avatar: Optional[str] = Field(None, max_length=2000)
    profile_metadata: Optional[Dict[str, Any]] = Field(None, alias="metadata")

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.lower() if v is not None else v


class StylerResponse(CamelModel):
    id: str
    name: str
    email: str
    phone: str = ""
    country: str = ""
    gender: str = ""
    avatar: Optional[str] = None
    profile_metadata: Dict[str, Any] = Field(default_factory=dict, alias="metadata")
    created_at: datetime
    updated_at: datetime


class PartnerCreate(CamelModel):
    """Profile created alongside a partner account."""
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    phone: str = Field("", max_length=40)
    address: str = Field("", max_length=300)
    company: str = Field("", max_length=160)
    avatar: Optional[str] = Field(None, max_length=2000)
    profile_metadata: Dict[str, Any] = Field(default_factory=dict, alias="metadata")

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.lower()


class PartnerUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=40)
    address: Optional[str] = Field(None, max_length=300)
    company: Optional[str] = Field(None, max_length=160)
    avatar: Optional[str] = Field(None, max_length=2000)
    profile_metadata: Optional[Dict[str, Any]] = Field(None, alias="metadata")

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return v.lower() if v is not None else v


class PartnerResponse(CamelModel):
    id: str
    name: str
    email: str
    phone: str = ""
    address: str = ""
    company: str = ""
    avatar: Optional[str] = None
    profile_metadata: Dict[str, Any] = Field(default_factory=dict, alias="metadata")
    created_at: datetime
    updated_at: datetime
