"""
Dependency wiring for FastAPI routes.

The listing store and query controller are process-wide singletons created
by the app lifespan and kept on app.state. The listing source is chosen from
the environment when the app starts.
"""

from __future__ import annotations

from fastapi import Request

from listing_reports.adapters.in_memory_listing_source import InMemoryListingSource
from listing_reports.adapters.json_file_listing_source import JsonFileListingSource
from listing_reports.adapters.sql_listing_source import SqlListingSource
from listing_reports.infra.db.session import get_session
from listing_reports.infra.settings import (
    SOURCE_DATABASE,
    SOURCE_MEMORY,
    listings_file,
    listings_source,
)
from listing_reports.ports.listing_source import ListingSource
from listing_reports.use_cases.query_controller import QueryController


def build_listing_source() -> ListingSource:
    """
    Factory for the configured ListingSource.

    - json: reads LISTINGS_FILE
    - database: reads the listings table via DATABASE_URL
    - memory: an empty record set (useful for smoke tests)

    Raises:
        RuntimeError: If LISTINGS_SOURCE is not a known source
    """
    source = listings_source()

    if source == SOURCE_DATABASE:
        return SqlListingSource(session_factory=get_session)
    if source == SOURCE_MEMORY:
        return InMemoryListingSource([])
    return JsonFileListingSource(listings_file())


def get_query_controller(request: Request) -> QueryController:
    """
    Returns the app's QueryController.

    Args:
        request: Incoming request (injected by FastAPI)

    Returns:
        QueryController: The single controller owned by the app
    """
    return request.app.state.query_controller
