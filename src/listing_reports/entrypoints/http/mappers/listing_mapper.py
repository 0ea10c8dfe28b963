from __future__ import annotations

from typing import Iterable

from listing_reports.domain.errors import ValidationError
from listing_reports.domain.listing import (
    COLUMN_KEYS,
    LISTING_COLUMNS,
    DerivedView,
    Query,
    Record,
)
from listing_reports.entrypoints.http.dtos.listings import (
    CitiesResponseDTO,
    ColumnDTO,
    ColumnsResponseDTO,
    ExportResponseDTO,
    ListingRowDTO,
    ListingViewResponseDTO,
    QueryStateDTO,
    ToggleSortRequestDTO,
)
from listing_reports.use_cases.query_controller import QueryController

MISSING_CELL = "-"


class ListingMapper:
    """Maps between REST DTOs and the listing report core."""

    @staticmethod
    def to_sort_field(dto: ToggleSortRequestDTO) -> str:
        """
        Validates the requested sort column.

        Raises:
            ValidationError: If the field is not a listing column
        """
        if dto.field not in COLUMN_KEYS:
            raise ValidationError(
                errors=[
                    {
                        "field": "field",
                        "message": f"Unknown column: {dto.field}",
                        "code": "INVALID_COLUMN",
                    }
                ]
            )
        return dto.field

    @staticmethod
    def to_row(record: Record) -> ListingRowDTO:
        """
        Renders a record as text cells.

        Handles missing/None → "-" at the boundary.
        """
        cells = {}
        for column in LISTING_COLUMNS:
            value = record.get(column.key)
            cells[column.key] = MISSING_CELL if value is None else str(value)
        return ListingRowDTO(**cells)

    @staticmethod
    def to_rows(records: Iterable[Record]) -> list[ListingRowDTO]:
        return [ListingMapper.to_row(record) for record in records]

    @staticmethod
    def to_query_state(query: Query) -> QueryStateDTO:
        return QueryStateDTO(
            city=query.selected_city,
            category=query.category_text,
            sort_field=query.sort_field,
            sort_order=query.sort_order.value,
            page=query.page,
        )

    @staticmethod
    def to_view_response(
        query: Query,
        view: DerivedView | None,
        page_size: int,
    ) -> ListingViewResponseDTO:
        """
        Builds the report body from a query and the view derived for it.

        While the listings are not loaded the body is the neutral empty
        state: no rows, one page, total 0.
        """
        return ListingViewResponseDTO(
            ready=view is not None,
            query=ListingMapper.to_query_state(query),
            rows=ListingMapper.to_rows(view.page_records) if view is not None else [],
            page=query.page,
            page_count=view.page_count if view is not None else 1,
            page_size=page_size,
            total=view.total_count if view is not None else 0,
        )

    @staticmethod
    def to_cities_response(controller: QueryController) -> CitiesResponseDTO:
        return CitiesResponseDTO(ready=controller.is_ready, cities=controller.cities)

    @staticmethod
    def to_columns_response() -> ColumnsResponseDTO:
        return ColumnsResponseDTO(
            columns=[
                ColumnDTO(key=column.key, label=column.label, width=column.width)
                for column in LISTING_COLUMNS
            ]
        )

    @staticmethod
    def to_export_response(controller: QueryController) -> ExportResponseDTO:
        records = controller.filtered_sorted_records
        return ExportResponseDTO(
            ready=controller.is_ready,
            rows=ListingMapper.to_rows(records),
            total=len(records),
        )
