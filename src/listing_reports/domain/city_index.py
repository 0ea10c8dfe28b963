from __future__ import annotations

from typing import Iterable

from listing_reports.domain.listing import Record
from listing_reports.domain.normalization import normalize


def distinct_cities(records: Iterable[Record]) -> list[str]:
    """
    Distinct city labels for the city selector, sorted ascending.

    Labels are trimmed but keep their original casing. Cities that only
    differ by case or surrounding whitespace collapse into one label; the
    first casing encountered in the record order wins.
    """
    labels: dict[str, str] = {}

    for record in records:
        city = record.get("city")
        label = "" if city is None else str(city).strip()
        if not label:
            continue
        labels.setdefault(normalize(label), label)

    return sorted(labels.values())
