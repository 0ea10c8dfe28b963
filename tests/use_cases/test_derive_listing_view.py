from __future__ import annotations

from listing_reports.domain.listing import DerivedView, Query, SortOrder
from listing_reports.use_cases.derive_listing_view import derive_listing_view


def make_records(count: int) -> list[dict]:
    return [
        {"name": f"Shop {i:02d}", "city": "Austin" if i % 2 else "Dallas", "category": "Cafe"}
        for i in range(count)
    ]


def test_default_query_returns_first_page_in_source_order() -> None:
    records = make_records(25)

    view = derive_listing_view(records, Query())

    assert isinstance(view, DerivedView)
    assert view.page_records == records[:10]
    assert view.page_count == 3
    assert view.total_count == 25
    assert list(view.filtered_sorted_records) == records


def test_filter_then_sort_then_page() -> None:
    records = make_records(25)
    query = Query(selected_city="austin", sort_field="name", sort_order=SortOrder.DESC, page=2)

    view = derive_listing_view(records, query)

    austin_desc = sorted(
        [r for r in records if r["city"] == "Austin"], key=lambda r: r["name"], reverse=True
    )
    assert view.total_count == 12
    assert view.page_count == 2
    assert view.page_records == austin_desc[10:]
    assert list(view.filtered_sorted_records) == austin_desc


def test_no_matches() -> None:
    view = derive_listing_view(make_records(5), Query(selected_city="Chicago"))

    assert view.page_records == []
    assert view.page_count == 1
    assert view.total_count == 0


def test_same_inputs_same_output() -> None:
    records = make_records(15)
    query = Query(category_text="caf", sort_field="city")

    assert derive_listing_view(records, query) == derive_listing_view(records, query)
