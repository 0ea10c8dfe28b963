"""One-shot listing load."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from listing_reports.domain.errors import ConflictError
from listing_reports.domain.listing import Record
from listing_reports.ports.listing_source import ListingSource

logger = logging.getLogger(__name__)


class ListingStore:
    """
    Holds the loaded record set.

    Starts "not ready" and is populated at most once. Until then the
    pipeline has no output and callers present an empty state.
    """

    def __init__(self) -> None:
        self._records: tuple[Record, ...] | None = None

    @property
    def is_ready(self) -> bool:
        return self._records is not None

    @property
    def records(self) -> tuple[Record, ...]:
        """Loaded records; empty while not ready."""
        return self._records if self._records is not None else ()

    def populate(self, records: Sequence[Record]) -> None:
        """
        Raises:
            ConflictError: If the store was already populated
        """
        if self._records is not None:
            raise ConflictError("Listings have already been loaded")
        self._records = tuple(records)


class LoadListings:
    """
    Load listings from a source into the store, exactly once.

    Responsibilities:
    - Wait the configured latency before reading
    - Read the source off the event loop
    - Populate the store on success
    - Log a failed load and leave the store "not ready" (no retry)
    """

    def __init__(
        self,
        source: ListingSource,
        store: ListingStore,
        delay_seconds: float = 0.0,
    ) -> None:
        self._source = source
        self._store = store
        self._delay_seconds = delay_seconds
        self._attempted = False

    async def execute(self) -> bool:
        """
        Run the load.

        Returns:
            True if the store was populated, False if the source failed

        Raises:
            ConflictError: If a load was already attempted
        """
        if self._attempted:
            raise ConflictError("Listing load has already been attempted")
        self._attempted = True

        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        logger.info("Loading listings", extra={"source": type(self._source).__name__})

        try:
            records = await asyncio.to_thread(self._source.load)
        except Exception:
            logger.exception(
                "Listing load failed; report stays empty",
                extra={"source": type(self._source).__name__},
            )
            return False

        self._store.populate(records)
        logger.info("Listings loaded", extra={"count": len(records)})
        return True
