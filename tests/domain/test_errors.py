"""Tests for domain error classes."""

from listing_reports.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    ValidationError,
)


def test_domain_error_to_dict_includes_context() -> None:
    error = DomainError("Something failed", source="json")

    assert error.to_dict() == {
        "message": "Something failed",
        "code": "DOMAIN_ERROR",
        "source": "json",
    }
    assert str(error) == "Something failed"


def test_validation_error_default_message() -> None:
    assert ValidationError().message == "Validation error"


def test_validation_error_with_field_errors() -> None:
    errors = [{"field": "field", "message": "Unknown column: rating", "code": "INVALID_COLUMN"}]

    error = ValidationError(errors=errors)

    assert error.message == "Validation failed"
    assert error.to_dict() == {
        "message": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": errors,
    }


def test_validation_error_without_field_errors_has_no_errors_key() -> None:
    error = ValidationError("Bad input")

    assert error.errors is None
    assert "errors" not in error.to_dict()


def test_error_codes() -> None:
    assert ConflictError("x").error_code == "CONFLICT"
    assert InternalError("x").error_code == "INTERNAL_ERROR"
    assert isinstance(ConflictError("x"), DomainError)
