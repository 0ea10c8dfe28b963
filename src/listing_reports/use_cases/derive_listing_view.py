from __future__ import annotations

from typing import Sequence

from listing_reports.domain.filtering import filter_listings
from listing_reports.domain.listing import PAGE_SIZE, DerivedView, Query, Record
from listing_reports.domain.paging import paginate
from listing_reports.domain.sorting import sort_listings


def derive_listing_view(
    records: Sequence[Record],
    query: Query,
    page_size: int = PAGE_SIZE,
) -> DerivedView:
    """
    Run the full pipeline: filter -> sort -> paginate.

    Pure function of (records, query); recomputed from scratch on every call.
    """
    filtered = filter_listings(records, query.selected_city, query.category_text)
    ordered = sort_listings(filtered, query.sort_field, query.sort_order)
    page = paginate(ordered, query.page, page_size)

    return DerivedView(
        filtered_sorted_records=ordered,
        page_records=page.page_records,
        page_count=page.page_count,
        total_count=page.total_count,
    )
