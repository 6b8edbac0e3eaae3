"""
Unit tests for the error handler middleware.
"""

import importlib
import warnings

import pytest

from timesheet.domain.models import EntityNotFoundError, PreconditionViolation, ValidationError
from timesheet.infrastructure.web.middleware import error_handler
from timesheet.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware


class TestErrorHandlerMiddleware:
    """Test cases for error response formatting."""

    def setup_method(self):
        """Set up test fixtures."""
        self.middleware = ErrorHandlerMiddleware(app=None)

    @pytest.mark.parametrize("exc,status_code,code", [
        (EntityNotFoundError("Client", "acme"), 404, "ENTITY_NOT_FOUND"),
        (ValidationError("Entry hours cannot be negative: -1", "hours"), 422, "VALIDATION_ERROR"),
        (PreconditionViolation("Hours per day must be greater than zero"), 422, "PRECONDITION_VIOLATION"),
    ])
    def test_domain_errors(self, exc, status_code, code):
        response = self.middleware.format_error_response(exc)

        assert response["status_code"] == status_code
        assert response["code"] == code
        assert response["message"] == exc.message

    def test_value_error(self):
        response = self.middleware.format_error_response(ValueError("bad input"))

        assert response["status_code"] == 400
        assert response["message"] == "bad input"

    def test_unexpected_error_hides_details(self):
        response = self.middleware.format_error_response(RuntimeError("secret"))

        assert response["status_code"] == 500
        assert response["message"] == "An unexpected error occurred"

    def test_module_imports_without_deprecation_warnings(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            importlib.reload(error_handler)
