from pydantic import BaseModel, ConfigDict, Field


class ListingRowDTO(BaseModel):
    """One table row. Every cell is text; missing values are rendered as "-"."""

    name: str
    address: str
    website: str
    phone_number: str
    reviews_count: str
    reviews_average: str
    category: str
    city: str
    state: str


class QueryStateDTO(BaseModel):
    city: str = Field(description="Selected city (empty = all cities)")
    category: str = Field(description="Category search text (empty = all categories)")
    sort_field: str | None = Field(description="Active sort column, if any")
    sort_order: str = Field(description="'asc' or 'desc'")
    page: int = Field(description="Current page (1-based)")


class ListingViewResponseDTO(BaseModel):
    """Visible page of the listing report plus paging metadata."""

    ready: bool = Field(description="False until the listings have been loaded")
    query: QueryStateDTO
    rows: list[ListingRowDTO]
    page: int
    page_count: int
    page_size: int
    total: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ready": True,
                "query": {
                    "city": "Austin",
                    "category": "cafe",
                    "sort_field": "name",
                    "sort_order": "asc",
                    "page": 1,
                },
                "rows": [
                    {
                        "name": "Bean There",
                        "address": "12 Congress Ave",
                        "website": "https://beanthere.example.com",
                        "phone_number": "512-555-0100",
                        "reviews_count": "87",
                        "reviews_average": "4.6",
                        "category": "Cafe",
                        "city": "Austin",
                        "state": "TX",
                    }
                ],
                "page": 1,
                "page_count": 1,
                "page_size": 10,
                "total": 1,
            }
        }
    )


class CitiesResponseDTO(BaseModel):
    ready: bool
    cities: list[str]


class ColumnDTO(BaseModel):
    key: str
    label: str
    width: int


class ColumnsResponseDTO(BaseModel):
    columns: list[ColumnDTO]


class ExportResponseDTO(BaseModel):
    """All rows matching the current query, in display order."""

    ready: bool
    rows: list[ListingRowDTO]
    total: int


class SetCityRequestDTO(BaseModel):
    city: str = Field(description="City label from /v1/listings/cities", examples=["Austin"])


class SetCategoryRequestDTO(BaseModel):
    text: str = Field(description="Case-insensitive substring of the category", examples=["cafe"])


class ToggleSortRequestDTO(BaseModel):
    field: str = Field(
        description="Column key; repeating the active column flips the order",
        examples=["reviews_count"],
    )


class GoToPageRequestDTO(BaseModel):
    page: int = Field(
        description="Target page; pages outside [1, page_count] are ignored",
        examples=[2],
    )
