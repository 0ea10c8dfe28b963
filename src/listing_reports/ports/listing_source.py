from __future__ import annotations

from abc import ABC, abstractmethod

from listing_reports.domain.listing import Record


class ListingSource(ABC):
    """
    Port for loading the listing record set.

    Called exactly once per process. Implementations return every row in
    source order and never filter, sort or page (that is the core's job).
    Failures propagate to the caller; the loader decides how to report them.
    """

    @abstractmethod
    def load(self) -> list[Record]:
        """
        Load all listing records.

        Returns:
            Read-only records in source order
        """
        ...
