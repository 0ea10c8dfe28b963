from __future__ import annotations

import math
from typing import Sequence

from listing_reports.domain.listing import PAGE_SIZE, PageSlice, Record


def page_count_for(total_count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages for total_count records; never less than 1."""
    return max(1, math.ceil(total_count / page_size))


def paginate(
    records: Sequence[Record],
    page: int,
    page_size: int = PAGE_SIZE,
) -> PageSlice:
    """
    Slice one 1-based page out of an ordered sequence.

    An out-of-range page yields no records; total_count is always the
    length of the full sequence.
    """
    if page_size <= 0:
        raise ValueError("page_size must be > 0")

    total_count = len(records)
    page_count = page_count_for(total_count, page_size)

    if page < 1:
        page_records: list[Record] = []
    else:
        start = (page - 1) * page_size
        page_records = list(records[start : start + page_size])

    return PageSlice(
        page_records=page_records,
        page_count=page_count,
        total_count=total_count,
    )
