from __future__ import annotations

from typing import Sequence

from listing_reports.domain.listing import Record, SortOrder
from listing_reports.domain.normalization import normalize


def sort_listings(
    records: Sequence[Record],
    field: str | None,
    order: SortOrder = SortOrder.ASC,
) -> list[Record]:
    """
    Stable textual sort by one field.

    Values are compared as normalized strings, so numeric-looking fields
    sort lexicographically ("10" < "2" < "9"). Records with equal keys keep
    their input order in both directions. Without a field the input order is
    returned unchanged (as a new list).
    """
    if field is None:
        return list(records)

    # sorted() stays stable with reverse=True
    return sorted(
        records,
        key=lambda record: normalize(record.get(field)),
        reverse=order is SortOrder.DESC,
    )
