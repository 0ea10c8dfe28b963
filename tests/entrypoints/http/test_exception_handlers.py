"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from listing_reports.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    ValidationError,
)
from listing_reports.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Minimal app whose routes raise each error type."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[{"field": "field", "message": "Unknown column: rating", "code": "INVALID_COLUMN"}]
        )

    @test_app.get("/conflict-error")
    def raise_conflict_error() -> None:
        raise ConflictError("Listings have already been loaded")

    @test_app.get("/internal-error")
    def raise_internal_error() -> None:
        raise InternalError("Unexpected condition")

    @test_app.get("/plain-domain-error")
    def raise_plain_domain_error() -> None:
        raise DomainError("Something odd")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> None:
        raise RuntimeError("Something went wrong")

    @test_app.get("/typed-query")
    def typed_query(page: int) -> dict:
        return {"page": page}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def test_validation_error_is_422(client: TestClient) -> None:
    response = client.get("/validation-error")

    assert response.status_code == 422
    assert response.json() == {"detail": "Validation failed", "code": "VALIDATION_ERROR"}


def test_validation_error_includes_field_errors(client: TestClient) -> None:
    response = client.get("/validation-error-with-fields")

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "field", "message": "Unknown column: rating", "code": "INVALID_COLUMN"}
    ]


def test_conflict_error_is_409(client: TestClient) -> None:
    response = client.get("/conflict-error")

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_internal_error_is_500(client: TestClient) -> None:
    response = client.get("/internal-error")

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"


def test_unmapped_domain_error_is_400(client: TestClient) -> None:
    response = client.get("/plain-domain-error")

    assert response.status_code == 400
    assert response.json() == {"detail": "Something odd", "code": "DOMAIN_ERROR"}


def test_unexpected_error_hides_details(client: TestClient) -> None:
    response = client.get("/unexpected-error")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }


def test_request_validation_error_is_structured(client: TestClient) -> None:
    response = client.get("/typed-query", params={"page": "two"})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["detail"] == "Invalid request parameters"
    assert data["errors"][0]["field"] == "page"
