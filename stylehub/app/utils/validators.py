"""Validation utilities for the StyleHub application.

This module provides validation helpers shared by the filter builder and the
resource services:
- Identifier syntax checks
- Numeric and date parsing for query parameters
- Conversion of Pydantic errors into a single human-readable message
"""

import math
import uuid
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Iterable, Optional, Set

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import InvalidIdError, ValidationError

def is_valid_id(value: Any) -> bool:
    """Check that a value is a well-formed record identifier (UUID)."""
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def parse_id(value: Any) -> str:
    """Normalize a path identifier or raise ``InvalidIdError``."""
    if not is_valid_id(value):
        raise InvalidIdError("Invalid ID format")
    return str(uuid.UUID(value))


def parse_number(param: str, value: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{param} must be a number")
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{param} must be a number")
    return number


def parse_bool(param: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise ValidationError(f"{param} must be true or false")


def _parse_moment(param: str, value: str, end_of_day: bool) -> datetime:
    value = value.strip()
    try:
        day = date.fromisoformat(value)
    except ValueError:
        day = None
    if day is not None:
        # A bare date covers the whole day on the closing side of a range
        return datetime.combine(day, time.max if end_of_day else time.min, tzinfo=timezone.utc)

    try:
        moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"{param} must be an ISO 8601 date")
    return as_utc(moment)


def parse_start_date(param: str, value: str) -> datetime:
    return _parse_moment(param, value, end_of_day=False)


def parse_end_date(param: str, value: str) -> datetime:
    return _parse_moment(param, value, end_of_day=True)


def _field_label(schema: type, loc: Iterable[Any]) -> str:
    parts = []
    for index, part in enumerate(loc):
        if index == 0 and isinstance(part, str) and part in schema.model_fields:
            part = schema.model_fields[part].alias or part
        parts.append(str(part))
    return ".".join(parts) or "body"


def format_validation_errors(schema: type, exc: PydanticValidationError) -> str:
    """Join every field error into one message, one clause per field."""
    messages = []
    for error in exc.errors():
        label = _field_label(schema, error.get("loc", ()))
        if error.get("type") == "missing":
            messages.append(f"{label} is required")
        else:
            msg = error.get("msg", "is invalid")
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]
            messages.append(f"{label}: {msg}")
    return ", ".join(messages)


def validate_payload(schema: type, payload: Dict[str, Any]) -> BaseModel:
    """Validate a request body against ``schema`` raising our ValidationError."""
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(schema, e)) from e


def required_fields(schema: type) -> Set[str]:
    """Field names that are mandatory on ``schema``."""
    return {name for name, info in schema.model_fields.items() if info.is_required()}


def null_required_fields(schema: type, payload: Dict[str, Any], names: Iterable[str]) -> Optional[str]:
    """Report required fields explicitly set to null in an update payload."""
    missing = []
    for name in names:
        info = schema.model_fields[name]
        alias = info.alias or name
        for key in (alias, name):
            if key in payload and payload[key] is None:
                missing.append(f"{alias} is required")
                break
    return ", ".join(missing) or None


def as_utc(moment: datetime) -> datetime:
    """Naive timestamps are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
