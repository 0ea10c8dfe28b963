from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from listing_reports.domain.listing import Record
from listing_reports.ports.listing_source import ListingSource


class InMemoryListingSource(ListingSource):
    """
    Canonical source implementation for tests.

    - Keeps rows in insertion order
    - Hands out read-only views of the rows
    """

    def __init__(self, records: Iterable[Mapping[str, Any]]) -> None:
        self._records = [MappingProxyType(dict(record)) for record in records]

    def load(self) -> list[Record]:
        return list(self._records)
