"""Tests for global exception handlers.

Validates that helper errors map to consistent JSON bodies and status codes
and that unexpected errors do not leak internals.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from client_helpers.core.errors import AppError, ConfigurationAppError, ValidationAppError
from client_helpers.core.exception_handlers import setup_exception_handlers


@pytest.fixture
def app_with_handlers() -> FastAPI:
    """Create FastAPI app with exception handlers registered."""
    app = FastAPI()
    setup_exception_handlers(app)
    return app


@pytest.fixture
def client(app_with_handlers: FastAPI) -> TestClient:
    """Create test client that renders server errors instead of raising."""
    return TestClient(app_with_handlers, raise_server_exceptions=False)


class TestAppErrorHandler:
    def test_validation_error_returns_400(self, client: TestClient, app_with_handlers: FastAPI):
        @app_with_handlers.get("/test-validation")
        async def test_endpoint():
            raise ValidationAppError(code="file_too_large", message="Image size should not exceed 1MB")

        response = client.get("/test-validation")

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "file_too_large"
        assert data["error"]["message"] == "Image size should not exceed 1MB"
        assert "request_id" in data["error"]
        assert "details" not in data["error"]

    def test_configuration_error_returns_400_with_details(
        self, client: TestClient, app_with_handlers: FastAPI
    ):
        @app_with_handlers.get("/test-config")
        async def test_endpoint():
            raise ConfigurationAppError(
                code="no_character_class_selected",
                message="At least one character type must be included",
                details={"hint": "Enable numbers"},
            )

        response = client.get("/test-config")

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"hint": "Enable numbers"}

    def test_base_app_error_returns_500(self, client: TestClient, app_with_handlers: FastAPI):
        @app_with_handlers.get("/test-base")
        async def test_endpoint():
            raise AppError(code="unexpected_state", message="Something is off")

        response = client.get("/test-base")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "unexpected_state"


class TestGeneralExceptionHandler:
    def test_unexpected_error_is_generic(self, client: TestClient, app_with_handlers: FastAPI):
        @app_with_handlers.get("/test-crash")
        async def test_endpoint():
            raise RuntimeError("database password is hunter2")

        response = client.get("/test-crash")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "internal_server_error"
        assert "hunter2" not in response.text


def test_app_error_str_is_message() -> None:
    error = ValidationAppError(code="x", message="readable")

    assert str(error) == "readable"
