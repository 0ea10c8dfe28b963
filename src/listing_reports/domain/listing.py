from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

# A listing row as loaded from a source. Values may be missing or non-string.
Record = Mapping[str, Any]

PAGE_SIZE = 10


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortOrder:
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


@dataclass(frozen=True, slots=True)
class Column:
    key: str
    label: str
    width: int


# Display order of the listing table.
LISTING_COLUMNS: tuple[Column, ...] = (
    Column(key="name", label="Name", width=220),
    Column(key="address", label="Address", width=320),
    Column(key="website", label="Website", width=180),
    Column(key="phone_number", label="Contact", width=140),
    Column(key="reviews_count", label="Review Count", width=120),
    Column(key="reviews_average", label="Review Avg", width=120),
    Column(key="category", label="Category", width=140),
    Column(key="city", label="City", width=140),
    Column(key="state", label="State", width=140),
)

COLUMN_KEYS: frozenset[str] = frozenset(column.key for column in LISTING_COLUMNS)


@dataclass(frozen=True, slots=True)
class Query:
    """
    User-selected filter, sort and page parameters.

    An empty selected_city or category_text means "no filter".
    sort_field=None keeps the source order.
    """

    selected_city: str = ""
    category_text: str = ""
    sort_field: str | None = None
    sort_order: SortOrder = SortOrder.ASC
    page: int = 1


@dataclass(frozen=True, slots=True)
class PageSlice:
    page_records: list[Record]
    page_count: int
    total_count: int


@dataclass(frozen=True, slots=True)
class DerivedView:
    """Pipeline output for a (records, Query) pair."""

    filtered_sorted_records: Sequence[Record]
    page_records: list[Record]
    page_count: int
    total_count: int
