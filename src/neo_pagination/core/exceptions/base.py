"""Base exceptions for neo-pagination.

This module defines the root of the exception hierarchy. Every error raised
by the library itself carries an error code, a details mapping and an HTTP
status code mapping for API responses. Errors raised by user-supplied
providers are never wrapped in these classes.
"""

from typing import Any, Dict, Optional


class NeoPaginationError(Exception):
    """Base exception for all neo-pagination errors.

    All exceptions in the neo-pagination library inherit from this base class
    and include structured error information for better debugging and API responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: NeoPaginationError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-pagination exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
