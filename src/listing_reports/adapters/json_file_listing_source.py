"""JSON file implementation of ListingSource."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType

from listing_reports.domain.errors import InternalError
from listing_reports.domain.listing import Record
from listing_reports.ports.listing_source import ListingSource

logger = logging.getLogger(__name__)


class JsonFileListingSource(ListingSource):
    """
    Reads listings from a JSON document holding an array of objects.

    - Keeps the file order
    - Field values are kept as-is (strings, numbers, null)
    - Raises InternalError when the document is not an array of objects
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> list[Record]:
        with self._path.open(encoding="utf-8") as fh:
            payload = json.load(fh)

        if not isinstance(payload, list):
            raise InternalError(
                "Listings file must contain a JSON array",
                path=str(self._path),
            )

        records: list[Record] = []
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                raise InternalError(
                    "Each listing must be a JSON object",
                    path=str(self._path),
                    index=index,
                )
            records.append(MappingProxyType(item))

        logger.info(
            "Listings file read",
            extra={"path": str(self._path), "count": len(records)},
        )
        return records
