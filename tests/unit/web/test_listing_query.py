from __future__ import annotations

import pytest

from src.interfaces.web.fetcher import build_listing_query
from src.interfaces.web.state import FilterState


@pytest.mark.parametrize(
    ("breed_id", "status", "expected"),
    [
        ("", "", ""),
        ("7", "", "?breed_id=7"),
        ("", "AVAILABLE", "?status=AVAILABLE"),
        ("7", "AVAILABLE", "?breed_id=7&status=AVAILABLE"),
    ],
)
def test_query_contains_only_selected_filters(breed_id, status, expected):
    assert build_listing_query(FilterState(breed_id=breed_id, status=status)) == expected


def test_default_filter_selects_available():
    assert build_listing_query(FilterState()) == "?status=AVAILABLE"


def test_unknown_status_is_forwarded():
    assert build_listing_query(FilterState(status="LOST")) == "?status=LOST"
