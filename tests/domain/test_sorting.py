from __future__ import annotations

import pytest

from listing_reports.domain.listing import SortOrder
from listing_reports.domain.sorting import sort_listings


def test_no_field_keeps_input_order() -> None:
    records = [{"name": "b"}, {"name": "a"}, {"name": "c"}]

    result = sort_listings(records, None)

    assert result == records
    assert result is not records


def test_numeric_looking_values_sort_textually() -> None:
    records = [{"reviews_count": "9"}, {"reviews_count": "10"}, {"reviews_count": "2"}]

    result = sort_listings(records, "reviews_count", SortOrder.ASC)

    assert [r["reviews_count"] for r in result] == ["10", "2", "9"]


def test_numbers_are_compared_as_text_too() -> None:
    records = [{"reviews_count": 9}, {"reviews_count": 10}, {"reviews_count": 2}]

    result = sort_listings(records, "reviews_count", SortOrder.ASC)

    assert [r["reviews_count"] for r in result] == [10, 2, 9]


def test_descending() -> None:
    records = [{"name": "b"}, {"name": "a"}, {"name": "c"}]

    result = sort_listings(records, "name", SortOrder.DESC)

    assert [r["name"] for r in result] == ["c", "b", "a"]


def test_comparison_ignores_case_and_surrounding_whitespace() -> None:
    records = [{"name": "banana"}, {"name": "  Apple"}, {"name": "cherry "}]

    result = sort_listings(records, "name", SortOrder.ASC)

    assert [r["name"] for r in result] == ["  Apple", "banana", "cherry "]


@pytest.mark.parametrize("order", [SortOrder.ASC, SortOrder.DESC])
def test_equal_keys_keep_their_relative_order(order: SortOrder) -> None:
    first = {"id": 1, "city": "Austin"}
    second = {"id": 2, "city": " austin"}
    other = {"id": 3, "city": "Dallas"}

    result = sort_listings([first, other, second], "city", order)

    ids = [r["id"] for r in result]
    assert ids.index(1) < ids.index(2)


def test_missing_values_sort_as_empty_string() -> None:
    records = [{"name": "a"}, {"name": None}, {}]

    result = sort_listings(records, "name", SortOrder.ASC)

    assert result == [{"name": None}, {}, {"name": "a"}]


def test_sort_does_not_modify_input() -> None:
    records = [{"name": "b"}, {"name": "a"}]

    sort_listings(records, "name", SortOrder.ASC)

    assert records == [{"name": "b"}, {"name": "a"}]


def test_sort_order_flipped() -> None:
    assert SortOrder.ASC.flipped() is SortOrder.DESC
    assert SortOrder.DESC.flipped() is SortOrder.ASC
