"""Declarative filter building from untrusted query parameters.

Every resource describes its accepted query parameters in a ``FilterSchema``.
``build_filter`` turns the raw query mapping into a list of SQLAlchemy
predicates; the same list feeds both the count and the page fetch so the two
always agree.

Only parameters named in the schema are read. Everything else in the query
string is ignored, so no raw value ever reaches the store as an operator.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

from app.core.exceptions import ValidationError
from app.core.security import Principal
from app.models.domain.common import SortOrder
from app.utils.validators import is_valid_id

Parser = Callable[[str, str], Any]


def as_text(param: str, value: str) -> str:
    return value


class FilterKind(str, Enum):
    EQUALS = "equals"
    MIN = "min"
    MAX = "max"
    SEARCH = "search"


@dataclass(frozen=True)
class FilterField:
    param: str
    kind: FilterKind
    attributes: Tuple[str, ...]
    parser: Parser = as_text


def equals(param: str, attribute: Optional[str] = None, parser: Parser = as_text) -> FilterField:
    return FilterField(param, FilterKind.EQUALS, (attribute or param,), parser)


def at_least(param: str, attribute: str, parser: Parser) -> FilterField:
    return FilterField(param, FilterKind.MIN, (attribute,), parser)


def at_most(param: str, attribute: str, parser: Parser) -> FilterField:
    return FilterField(param, FilterKind.MAX, (attribute,), parser)


def search(param: str, *attributes: str) -> FilterField:
    """Case-insensitive substring match, OR-ed across ``attributes``."""
    return FilterField(param, FilterKind.SEARCH, attributes or (param,))


@dataclass(frozen=True)
class FilterSchema:
    fields: Tuple[FilterField, ...] = ()
    # Column holding the owner id; None when the collection has no owner scoping
    owner_attribute: Optional[str] = None
    owner_params: Tuple[str, ...] = ("user", "owner")
    # Non-admin principals only ever see their own rows
    scope_to_principal: bool = True
    fixed: Mapping[str, Any] = field(default_factory=dict)
    # sort param value -> column attribute
    sortable: Mapping[str, str] = field(default_factory=lambda: {"createdAt": "created_at"})
    default_sort: Tuple[str, SortOrder] = ("created_at", SortOrder.DESC)


def _first(params: Mapping[str, Any], name: str) -> Optional[str]:
    value = params.get(name)
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else None
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _owner_predicates(
    model: type,
    schema: FilterSchema,
    params: Mapping[str, Any],
    principal: Optional[Principal],
) -> List[ColumnElement]:
    if schema.owner_attribute is None:
        return []
    column = getattr(model, schema.owner_attribute)

    if schema.scope_to_principal and (principal is None or not principal.is_admin):
        if principal is None:
            # Anonymous callers match no owned rows
            return [column.is_(None)]
        return [column == principal.id]

    for param in schema.owner_params:
        value = _first(params, param)
        if value is None:
            continue
        if not is_valid_id(value):
            raise ValidationError(f"{param} must be a valid id")
        return [column == str(uuid.UUID(value))]
    return []


def build_filter(
    model: type,
    schema: FilterSchema,
    params: Mapping[str, Any],
    principal: Optional[Principal] = None,
) -> List[ColumnElement]:
    """Build the predicate list for ``model`` from raw query ``params``."""
    conditions: List[ColumnElement] = _owner_predicates(model, schema, params, principal)

    for attribute, value in schema.fixed.items():
        conditions.append(getattr(model, attribute) == value)

    for filter_field in schema.fields:
        raw = _first(params, filter_field.param)
        if raw is None:
            continue
        columns = [getattr(model, name) for name in filter_field.attributes]

        if filter_field.kind is FilterKind.SEARCH:
            conditions.append(
                or_(*(column.icontains(raw, autoescape=True) for column in columns))
            )
            continue

        value = filter_field.parser(filter_field.param, raw)
        if filter_field.kind is FilterKind.EQUALS:
            conditions.append(columns[0] == value)
        elif filter_field.kind is FilterKind.MIN:
            conditions.append(columns[0] >= value)
        elif filter_field.kind is FilterKind.MAX:
            conditions.append(columns[0] <= value)

    return conditions


def build_order(model: type, schema: FilterSchema, params: Mapping[str, Any]) -> List[ColumnElement]:
    """Resolve ``sort``/``order`` against the schema's sortable allow-list."""
    attribute, direction = schema.default_sort
    requested = _first(params, "sort")
    if requested is not None and requested in schema.sortable:
        attribute = schema.sortable[requested]
        direction = SortOrder.ASC if _first(params, "order") == SortOrder.ASC.value else SortOrder.DESC

    column = getattr(model, attribute)
    primary = column.asc() if direction is SortOrder.ASC else column.desc()
    # Tie-break on id so pages never overlap
    return [primary, model.id.asc()]
