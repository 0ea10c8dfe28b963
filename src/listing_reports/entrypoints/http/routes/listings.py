"""
Listing report routes.

State-changing handlers are `async def` so they run one at a time on the
event loop; the QueryController is not reentrant.
"""

from fastapi import APIRouter, Depends

from listing_reports.entrypoints.http.dependencies import get_query_controller
from listing_reports.entrypoints.http.dtos.listings import (
    CitiesResponseDTO,
    ColumnsResponseDTO,
    ExportResponseDTO,
    GoToPageRequestDTO,
    ListingViewResponseDTO,
    SetCategoryRequestDTO,
    SetCityRequestDTO,
    ToggleSortRequestDTO,
)
from listing_reports.entrypoints.http.error_responses import ErrorResponse
from listing_reports.entrypoints.http.mappers.listing_mapper import ListingMapper
from listing_reports.use_cases.query_controller import QueryController


router = APIRouter(
    prefix="/listings",
    tags=["Listings"],
    responses={500: {"model": ErrorResponse, "description": "Unexpected error"}},
)


@router.get(
    "",
    response_model=ListingViewResponseDTO,
    summary="Current report page",
    description="""
    Returns the visible page of the listing report for the current query.

    ## Pipeline
    - City filter: case/whitespace-insensitive exact match
    - Category filter: case-insensitive substring match
    - Sort: textual comparison, stable ("10" sorts before "2")
    - Page size: 10

    While the listings are still loading, `ready` is false and `rows` is empty.
    """,
)
async def get_listings(
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    return ListingMapper.to_view_response(controller.query, controller.view, controller.page_size)


@router.get("/cities", response_model=CitiesResponseDTO, summary="City selector options")
async def get_cities(
    controller: QueryController = Depends(get_query_controller),
) -> CitiesResponseDTO:
    return ListingMapper.to_cities_response(controller)


@router.get("/columns", response_model=ColumnsResponseDTO, summary="Table columns")
async def get_columns() -> ColumnsResponseDTO:
    return ListingMapper.to_columns_response()


@router.get(
    "/export",
    response_model=ExportResponseDTO,
    summary="All matching rows",
    description="Every row matching the current filters, in the current sort order (not just one page).",
)
async def export_listings(
    controller: QueryController = Depends(get_query_controller),
) -> ExportResponseDTO:
    return ListingMapper.to_export_response(controller)


@router.put("/query/city", response_model=ListingViewResponseDTO, summary="Select city")
async def set_city(
    payload: SetCityRequestDTO,
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    """Selecting a city resets the report to page 1."""
    view = controller.set_city(payload.city)
    return ListingMapper.to_view_response(controller.query, view, controller.page_size)


@router.delete("/query/city", response_model=ListingViewResponseDTO, summary="Clear city filter")
async def clear_city(
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    view = controller.clear_city()
    return ListingMapper.to_view_response(controller.query, view, controller.page_size)


@router.put(
    "/query/category",
    response_model=ListingViewResponseDTO,
    summary="Search category",
)
async def set_category(
    payload: SetCategoryRequestDTO,
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    """Changing the category text resets the report to page 1."""
    view = controller.set_category_text(payload.text)
    return ListingMapper.to_view_response(controller.query, view, controller.page_size)


@router.post(
    "/query/sort",
    response_model=ListingViewResponseDTO,
    summary="Toggle sort column",
    responses={
        422: {
            "description": "Unknown column",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "field",
                                "message": "Unknown column: rating",
                                "code": "INVALID_COLUMN",
                            }
                        ],
                    }
                }
            },
        },
    },
)
async def toggle_sort(
    payload: ToggleSortRequestDTO,
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    """Same column flips the order, a new column sorts ascending. Page is kept."""
    field = ListingMapper.to_sort_field(payload)
    view = controller.toggle_sort(field)
    return ListingMapper.to_view_response(controller.query, view, controller.page_size)


@router.put("/query/page", response_model=ListingViewResponseDTO, summary="Go to page")
async def go_to_page(
    payload: GoToPageRequestDTO,
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    """Out-of-range pages are ignored; the response shows the unchanged page."""
    view = controller.go_to_page(payload.page)
    return ListingMapper.to_view_response(controller.query, view, controller.page_size)


@router.post("/query/page/next", response_model=ListingViewResponseDTO, summary="Next page")
async def next_page(
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    view = controller.next_page()
    return ListingMapper.to_view_response(controller.query, view, controller.page_size)


@router.post(
    "/query/page/previous",
    response_model=ListingViewResponseDTO,
    summary="Previous page",
)
async def previous_page(
    controller: QueryController = Depends(get_query_controller),
) -> ListingViewResponseDTO:
    view = controller.previous_page()
    return ListingMapper.to_view_response(controller.query, view, controller.page_size)
