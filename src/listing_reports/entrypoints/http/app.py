from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager, suppress
from typing import AsyncIterator

from fastapi import FastAPI

from listing_reports.entrypoints.http.dependencies import build_listing_source
from listing_reports.entrypoints.http.exception_handlers import register_exception_handlers
from listing_reports.entrypoints.http.routes.health import router as health_router
from listing_reports.entrypoints.http.routes.listings import router as listings_router
from listing_reports.infra.settings import load_delay_seconds
from listing_reports.ports.listing_source import ListingSource
from listing_reports.use_cases.load_listings import ListingStore, LoadListings
from listing_reports.use_cases.query_controller import QueryController


def build_app(
    source: ListingSource | None = None,
    delay_seconds: float | None = None,
) -> FastAPI:
    """
    Build the listing report API.

    Args:
        source: Listing source; defaults to the one configured by LISTINGS_SOURCE
        delay_seconds: Simulated load latency; defaults to LISTINGS_LOAD_DELAY_SECONDS
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = ListingStore()
        app.state.listing_store = store
        app.state.query_controller = QueryController(store)

        load_listings = LoadListings(
            source=source if source is not None else build_listing_source(),
            store=store,
            delay_seconds=delay_seconds if delay_seconds is not None else load_delay_seconds(),
        )
        # Serve requests (in the "not ready" state) while the load runs
        app.state.load_task = asyncio.create_task(load_listings.execute())

        try:
            yield
        finally:
            app.state.load_task.cancel()
            with suppress(asyncio.CancelledError):
                await app.state.load_task

    app = FastAPI(
        title="Listing Reports API",
        description="""
        Business listing report: filter by city and category, sort by any column,
        and page through the results ten at a time.

        ## Lifecycle
        Listings are loaded once in the background at startup. Until the load
        completes every view is empty and `ready` is false.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(listings_router, prefix="/v1")

    return app


app = build_app()
