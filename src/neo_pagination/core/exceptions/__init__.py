"""Exceptions module for neo-pagination.

This module provides the complete exception hierarchy for neo-pagination.
"""

from .base import (
    NeoPaginationError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,
    ProviderNotFoundError,
    InvalidPaginatorConfigError,

    # Validation Errors
    ValidationError,
    InvalidPageNumberError,
    InvalidItemCountError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "NeoPaginationError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",

    # Configuration Errors
    "ConfigurationError",
    "ProviderNotFoundError",
    "InvalidPaginatorConfigError",

    # Validation Errors
    "ValidationError",
    "InvalidPageNumberError",
    "InvalidItemCountError",
]
