from __future__ import annotations

from typing import Iterable

from listing_reports.domain.listing import Record
from listing_reports.domain.normalization import normalize


def filter_listings(
    records: Iterable[Record],
    selected_city: str,
    category_text: str,
) -> list[Record]:
    """
    Apply the city and category predicates (AND semantics).

    - City: case/whitespace-insensitive exact match
    - Category: case-insensitive substring match
    - Blank criteria impose no constraint
    - Input order is preserved; records are never modified
    """
    target_city = normalize(selected_city)
    target_category = normalize(category_text)

    return [
        record
        for record in records
        if matches_city(record, target_city) and matches_category(record, target_category)
    ]


def matches_city(record: Record, target_city: str) -> bool:
    """target_city must already be normalized."""
    if not target_city:
        return True
    return normalize(record.get("city")) == target_city


def matches_category(record: Record, target_category: str) -> bool:
    """target_category must already be normalized."""
    if not target_category:
        return True
    return target_category in normalize(record.get("category"))
