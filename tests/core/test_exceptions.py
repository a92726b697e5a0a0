"""Tests for the exception hierarchy and HTTP mapping."""

import pytest

from neo_pagination.core.exceptions import (
    ConfigurationError,
    InvalidItemCountError,
    InvalidPageNumberError,
    InvalidPaginatorConfigError,
    NeoPaginationError,
    ProviderNotFoundError,
    ValidationError,
    create_error_response,
    get_http_status_code,
)
from neo_pagination.features.pagination import Paginator


class TestNeoPaginationError:
    """Test cases for the base exception."""

    def test_defaults(self):
        """Test error code defaults to the class name."""
        error = InvalidPageNumberError("Page number must be greater than 0")

        assert error.message == "Page number must be greater than 0"
        assert error.error_code == "InvalidPageNumberError"
        assert error.details == {}
        assert str(error) == "Page number must be greater than 0"

    def test_explicit_code_and_details(self):
        """Test custom error code and details."""
        error = NeoPaginationError("boom", error_code="PAGINATION_FAILED", details={"page": 3})

        assert error.error_code == "PAGINATION_FAILED"
        assert error.details == {"page": 3}

    def test_hierarchy(self):
        """Test both error kinds share the library base class."""
        assert issubclass(ProviderNotFoundError, ConfigurationError)
        assert issubclass(InvalidPaginatorConfigError, ConfigurationError)
        assert issubclass(InvalidPageNumberError, ValidationError)
        assert issubclass(InvalidItemCountError, ValidationError)
        assert issubclass(ConfigurationError, NeoPaginationError)
        assert issubclass(ValidationError, NeoPaginationError)


class TestHttpMapping:
    """Test cases for HTTP status mapping."""

    @pytest.mark.parametrize(
        "exception, status",
        [
            (InvalidPageNumberError("bad page"), 400),
            (ValidationError("bad value"), 400),
            (InvalidItemCountError("bad count"), 500),
            (ProviderNotFoundError("missing"), 500),
            (InvalidPaginatorConfigError("bad config"), 500),
            (NeoPaginationError("generic"), 500),
            (RuntimeError("not ours"), 500),
        ],
    )
    def test_status_codes(self, exception, status):
        """Test status lookup along the class hierarchy."""
        assert get_http_status_code(exception) == status

    def test_subclass_inherits_status(self):
        """Test unmapped subclasses use their nearest mapped ancestor."""

        class NegativePageError(InvalidPageNumberError):
            pass

        assert get_http_status_code(NegativePageError("negative")) == 400


class TestErrorResponse:
    """Test cases for error response bodies."""

    def test_error_response_from_paginator(self):
        """Test the response body for a rejected page request."""
        paginator = Paginator(count_provider=lambda: 10, slice_provider=lambda offset, limit: [])

        with pytest.raises(InvalidPageNumberError) as exc_info:
            paginator.paginate(-2)

        assert create_error_response(exc_info.value) == {
            "error": {
                "code": "InvalidPageNumberError",
                "message": "Page number must be greater than 0",
                "details": {"page": -2},
                "type": "InvalidPageNumberError",
            }
        }
