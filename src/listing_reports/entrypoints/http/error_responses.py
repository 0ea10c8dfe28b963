"""REST API error response models.

Documented shape of every error body returned by the exception handlers.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation failure."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "field",
                "message": "Unknown column: rating",
                "code": "INVALID_COLUMN",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Listings have already been loaded", "code": "CONFLICT"}

        Validation error:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "field", "message": "Unknown column: rating", "code": "INVALID_COLUMN"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Listings have already been loaded", "code": "CONFLICT"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "field",
                            "message": "Unknown column: rating",
                            "code": "INVALID_COLUMN",
                        }
                    ],
                },
            ]
        }
    )
