"""Tests for page/limit normalization and list envelopes."""

import pytest

from app.core.pagination import (
    MAX_SKIP,
    DEFAULT_LIMIT,
    MAX_LIMIT,
    normalize_pagination,
    page_response,
    total_pages,
)


@pytest.mark.parametrize("page, limit, expected", [
    (None, None, (1, DEFAULT_LIMIT)),
    ("3", "20", (3, 20)),
    ("abc", "xyz", (1, DEFAULT_LIMIT)),
    ("0", "5", (1, 5)),
    ("-4", "5", (1, 5)),
    ("2", "500", (2, MAX_LIMIT)),
    ("2", "0", (2, 1)),
    ("2", "-7", (2, 1)),
    ("2abc", "5.5", (2, 5)),
    (" 4", "+8", (4, 8)),
])
def test_normalize_pagination(page, limit, expected):
    params = normalize_pagination(page, limit)
    assert (params.page, params.limit) == expected


def test_skip_follows_page_and_limit():
    assert normalize_pagination("3", "20").skip == 40
    assert normalize_pagination(None, None).skip == 0


def test_total_pages():
    assert total_pages(0, 10) == 0
    assert total_pages(1, 10) == 1
    assert total_pages(21, 10) == 3
    assert total_pages(50, 50) == 1


def test_page_response_uses_collection_key():
    params = normalize_pagination("2", "2")
    body = page_response([{"id": "a"}], 3, params, key="clothes")
    assert body == {"total": 3, "page": 2, "limit": 2, "totalPages": 2, "clothes": [{"id": "a"}]}


@pytest.mark.parametrize("page, limit", [
    ("99999999999999999999", "10"),
    ("9" * 5000, "50"),
    (str(2 ** 63), "1"),
])
def test_huge_page_keeps_offset_in_range(page, limit):
    params = normalize_pagination(page, limit)
    assert 0 <= params.skip <= MAX_SKIP
    assert params.skip > MAX_SKIP - params.limit
