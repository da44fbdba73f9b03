"""
Tests for structured error responses and the request logging middleware.
"""

import json
from unittest.mock import Mock

import pytest
from fastapi import status
from fastapi.exceptions import RequestValidationError
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError, OperationalError

from noticeboard.services.error_handler import ErrorHandlerService
from noticeboard.utils.exceptions import NotFoundError, ValidationError


class TestErrorHandlerService:

    def test_format_error_response(self):
        response = ErrorHandlerService.format_error_response(
            error_code="TEST_ERROR",
            message="Test error message",
            details=[{"field": "test", "message": "Test detail"}],
            request_id="test-123"
        )

        error = response["error"]
        assert error["code"] == "TEST_ERROR"
        assert error["message"] == "Test error message"
        assert error["details"] == [{"field": "test", "message": "Test detail"}]
        assert error["request_id"] == "test-123"
        assert error["timestamp"].endswith("Z")

    def test_format_error_response_omits_empty_details(self):
        response = ErrorHandlerService.format_error_response("TEST_ERROR", "Test error message")

        assert "details" not in response["error"]
        assert "request_id" not in response["error"]

    def test_handle_api_exception(self):
        exception = ValidationError("Test validation error", [{"field": "price", "message": "Too low"}])

        response = ErrorHandlerService.handle_api_exception(exception)

        assert response.status_code == 422
        content = json.loads(response.body)
        assert content["error"]["code"] == "VALIDATION_ERROR"
        assert content["error"]["message"] == "Test validation error"
        assert content["error"]["details"] == [{"field": "price", "message": "Too low"}]

    def test_handle_not_found_exception(self):
        response = ErrorHandlerService.handle_api_exception(NotFoundError("Property", "abc"))

        assert response.status_code == 404
        assert json.loads(response.body)["error"]["code"] == "NOT_FOUND"

    def test_handle_validation_error(self):
        exception = Mock(spec=RequestValidationError)
        exception.errors.return_value = [
            {"loc": ["body", "email"], "msg": "field required", "type": "value_error.missing"}
        ]

        response = ErrorHandlerService.handle_validation_error(exception)

        assert response.status_code == 422
        content = json.loads(response.body)
        assert content["error"]["code"] == "VALIDATION_ERROR"
        assert content["error"]["details"] == [
            {"field": "body -> email", "message": "field required", "type": "value_error.missing"}
        ]

    def test_handle_integrity_error(self):
        exception = IntegrityError("statement", "params", Exception("UNIQUE constraint failed: users.email"))

        response = ErrorHandlerService.handle_database_error(exception)

        assert response.status_code == 409
        content = json.loads(response.body)
        assert content["error"]["code"] == "INTEGRITY_ERROR"
        assert content["error"]["message"] == "Constraint violation: Duplicate value for unique field"

    def test_handle_other_database_error(self):
        exception = OperationalError("statement", "params", Exception("database is locked"))

        response = ErrorHandlerService.handle_database_error(exception)

        assert response.status_code == 500
        content = json.loads(response.body)
        assert content["error"]["code"] == "DATABASE_ERROR"
        assert "locked" not in content["error"]["message"]

    def test_handle_unexpected_error(self):
        response = ErrorHandlerService.handle_unexpected_error(Exception("Unexpected error"))

        assert response.status_code == 500
        content = json.loads(response.body)
        assert content["error"]["code"] == "INTERNAL_SERVER_ERROR"
        assert "Unexpected error" not in content["error"]["message"]


class TestAPIErrorResponses:

    @pytest.mark.asyncio
    async def test_unauthorized_error_format(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        error = response.json()["error"]
        assert error["code"] == "UNAUTHORIZED"
        assert "timestamp" in error
        assert "request_id" in error

    @pytest.mark.asyncio
    async def test_unknown_route_error_format(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/nonexistent")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["code"] == "HTTP_404"

    @pytest.mark.asyncio
    async def test_request_validation_error_format(self, async_client: AsyncClient):
        response = await async_client.post("/api/v1/auth/login", json={"email": "not-an-email"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any(detail["field"].endswith("password") for detail in error["details"])

    @pytest.mark.asyncio
    async def test_request_id_matches_header(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/auth/me")

        assert response.headers["X-Request-ID"] == response.json()["error"]["request_id"]
        assert float(response.headers["X-Process-Time"]) >= 0
