"""Tests for the declarative filter builder."""

import uuid
from datetime import datetime, timezone

import pytest

from app.core.exceptions import ValidationError
from app.core.filters import FilterSchema, at_least, at_most, build_filter, build_order, equals, search
from app.core.security import Principal
from app.models.database import Occasion, PartnerCloth
from app.models.domain.common import Role, SortOrder
from app.utils.validators import parse_end_date, parse_number, parse_start_date

SCHEMA = FilterSchema(
    fields=(
        equals("type"),
        at_least("startDate", "date", parse_start_date),
        at_most("endDate", "date", parse_end_date),
        search("search", "title", "notes"),
    ),
    owner_attribute="user_id",
    sortable={"title": "title", "date": "date"},
    default_sort=("date", SortOrder.DESC),
)


def sql(condition) -> str:
    return str(condition.compile(compile_kwargs={"literal_binds": True}))


def test_non_admin_is_always_scoped_to_self():
    caller = Principal(id=str(uuid.uuid4()), role=Role.STYLER)
    other = str(uuid.uuid4())
    conditions = build_filter(Occasion, SCHEMA, {"user": other}, caller)
    assert len(conditions) == 1
    assert conditions[0].right.value == caller.id


def test_admin_unscoped_by_default():
    admin = Principal(id=str(uuid.uuid4()), role=Role.ADMIN)
    assert build_filter(Occasion, SCHEMA, {}, admin) == []


def test_admin_scopes_with_owner_param():
    admin = Principal(id=str(uuid.uuid4()), role=Role.ADMIN)
    target = str(uuid.uuid4())
    conditions = build_filter(Occasion, SCHEMA, {"owner": target}, admin)
    assert conditions[0].right.value == target


def test_admin_malformed_owner_param_is_rejected():
    admin = Principal(id=str(uuid.uuid4()), role=Role.ADMIN)
    with pytest.raises(ValidationError) as exc:
        build_filter(Occasion, SCHEMA, {"user": "not-an-id"}, admin)
    assert exc.value.detail == "user must be a valid id"


def test_unknown_and_empty_params_are_ignored():
    admin = Principal(id=str(uuid.uuid4()), role=Role.ADMIN)
    conditions = build_filter(Occasion, SCHEMA, {"$where": "1", "type": "", "color": "red"}, admin)
    assert conditions == []


def test_date_only_end_covers_whole_day():
    admin = Principal(id=str(uuid.uuid4()), role=Role.ADMIN)
    conditions = build_filter(
        Occasion, SCHEMA, {"startDate": "2025-06-01", "endDate": "2025-06-30"}, admin
    )
    start, end = (condition.right.value for condition in conditions)
    assert start == datetime(2025, 6, 1, tzinfo=timezone.utc)
    assert end == datetime(2025, 6, 30, 23, 59, 59, 999999, tzinfo=timezone.utc)


def test_unparseable_date_is_rejected():
    with pytest.raises(ValidationError):
        build_filter(Occasion, SCHEMA, {"startDate": "next tuesday"}, None)


def test_search_escapes_wildcards():
    admin = Principal(id=str(uuid.uuid4()), role=Role.ADMIN)
    conditions = build_filter(Occasion, SCHEMA, {"search": "100%"}, admin)
    rendered = sql(conditions[0])
    assert " OR " in rendered
    assert "100/%" in rendered


def test_fixed_predicates_and_price_range():
    schema = FilterSchema(
        fields=(
            at_least("minPrice", "price", parse_number),
            at_most("maxPrice", "price", parse_number),
        ),
        owner_attribute="owner_id",
        owner_params=("partner",),
        scope_to_principal=False,
        fixed={"visibility": "public"},
    )
    conditions = build_filter(PartnerCloth, schema, {"minPrice": "10", "maxPrice": "99.5"}, None)
    assert [condition.right.value for condition in conditions] == ["public", 10.0, 99.5]

    with pytest.raises(ValidationError) as exc:
        build_filter(PartnerCloth, schema, {"minPrice": "cheap"}, None)
    assert exc.value.detail == "minPrice must be a number"


def test_sort_allow_list():
    default = build_order(Occasion, SCHEMA, {})
    assert sql(default[0]).endswith("date DESC")
    assert sql(default[1]).endswith("id ASC")

    by_title = build_order(Occasion, SCHEMA, {"sort": "title", "order": "asc"})
    assert sql(by_title[0]).endswith("title ASC")

    unknown = build_order(Occasion, SCHEMA, {"sort": "password_hash"})
    assert sql(unknown[0]).endswith("date DESC")
