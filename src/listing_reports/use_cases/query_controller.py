from __future__ import annotations

import logging
from dataclasses import replace

from listing_reports.domain.city_index import distinct_cities
from listing_reports.domain.listing import PAGE_SIZE, DerivedView, Query, Record, SortOrder
from listing_reports.domain.paging import paginate
from listing_reports.use_cases.derive_listing_view import derive_listing_view
from listing_reports.use_cases.load_listings import ListingStore

logger = logging.getLogger(__name__)


class QueryController:
    """
    Owns the report's Query and applies user transitions to it.

    Rules:
    - Changing the city or category filter resets the page to 1
    - Toggling the sort keeps the current page
    - Page changes outside [1, page_count] are ignored
    - Every transition recomputes the view from scratch

    Not reentrant: callers must serialize transitions.
    """

    def __init__(self, store: ListingStore, page_size: int = PAGE_SIZE) -> None:
        self._store = store
        self._page_size = page_size
        self._query = Query()

    @property
    def query(self) -> Query:
        return self._query

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def is_ready(self) -> bool:
        return self._store.is_ready

    @property
    def view(self) -> DerivedView | None:
        """Current view, or None until the listings are loaded."""
        if not self._store.is_ready:
            return None
        return derive_listing_view(self._store.records, self._query, self._page_size)

    @property
    def cities(self) -> list[str]:
        return distinct_cities(self._store.records)

    @property
    def filtered_sorted_records(self) -> list[Record]:
        """Every record matching the query, in display order (for export)."""
        view = self.view
        return list(view.filtered_sorted_records) if view is not None else []

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def set_city(self, city: str) -> DerivedView | None:
        self._query = replace(self._query, selected_city=city, page=1)
        return self.view

    def clear_city(self) -> DerivedView | None:
        return self.set_city("")

    def set_category_text(self, text: str) -> DerivedView | None:
        self._query = replace(self._query, category_text=text, page=1)
        return self.view

    def toggle_sort(self, field: str) -> DerivedView | None:
        if field == self._query.sort_field:
            self._query = replace(self._query, sort_order=self._query.sort_order.flipped())
        else:
            self._query = replace(self._query, sort_field=field, sort_order=SortOrder.ASC)
        return self.view

    def go_to_page(self, page: int) -> DerivedView | None:
        if not self._store.is_ready:
            logger.debug("Page change ignored; listings not loaded", extra={"page": page})
            return None

        candidate = replace(self._query, page=page)
        view = derive_listing_view(self._store.records, candidate, self._page_size)
        if 1 <= page <= view.page_count:
            self._query = candidate
            return view

        logger.debug(
            "Page change rejected",
            extra={"page": page, "page_count": view.page_count},
        )
        # Same records and count; only the visible slice differs
        current = paginate(view.filtered_sorted_records, self._query.page, self._page_size)
        return replace(view, page_records=current.page_records)

    def next_page(self) -> DerivedView | None:
        return self.go_to_page(self._query.page + 1)

    def previous_page(self) -> DerivedView | None:
        return self.go_to_page(self._query.page - 1)
