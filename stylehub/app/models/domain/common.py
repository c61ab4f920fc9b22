"""Shared domain types used across schemas, services and the access layer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """Principal roles."""
    ADMIN = "admin"
    STYLER = "styler"
    PARTNER = "partner"
    USER = "user"


class SortOrder(str, Enum):
    """Common sort order options."""
    ASC = "asc"
    DESC = "desc"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )
