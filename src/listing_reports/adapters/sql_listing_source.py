"""SQLAlchemy implementation of ListingSource."""

from __future__ import annotations

from contextlib import AbstractContextManager
from types import MappingProxyType
from typing import Callable

from sqlalchemy import select
from sqlalchemy.orm import Session

from listing_reports.domain.listing import LISTING_COLUMNS, Record
from listing_reports.infra.db.models.listing import ListingRow
from listing_reports.ports.listing_source import ListingSource


class SqlListingSource(ListingSource):
    """
    Reads the whole listings table once.

    - No WHERE clauses: filtering, sorting and paging stay in memory
    - Rows come back in insertion order (position column)
    - Converts ListingRow (infrastructure) to a read-only record mapping
    """

    def __init__(self, session_factory: Callable[[], AbstractContextManager[Session]]) -> None:
        """
        Args:
            session_factory: Returns a session context manager, e.g. infra.db.session.get_session
        """
        self._session_factory = session_factory

    def load(self) -> list[Record]:
        query = select(ListingRow).order_by(ListingRow.position)

        with self._session_factory() as session:
            rows = session.execute(query).scalars().all()
            return [self._to_record(row) for row in rows]

    def _to_record(self, row: ListingRow) -> Record:
        return MappingProxyType({column.key: getattr(row, column.key) for column in LISTING_COLUMNS})
