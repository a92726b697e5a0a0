"""HTTP status code mapping for exceptions.

The mapping is looked up along the exception's MRO, so subclasses inherit
the status of their nearest mapped ancestor.
"""

from typing import Dict, Type

from .base import NeoPaginationError
from .domain import (
    ConfigurationError,
    InvalidItemCountError,
    InvalidPageNumberError,
    InvalidPaginatorConfigError,
    ProviderNotFoundError,
    ValidationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    InvalidPageNumberError: 400,

    # 500 Internal Server Error
    InvalidItemCountError: 500,
    ConfigurationError: 500,
    ProviderNotFoundError: 500,
    InvalidPaginatorConfigError: 500,

    # Default for NeoPaginationError
    NeoPaginationError: 500,
}

DEFAULT_HTTP_STATUS = 500


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception instance.

    Args:
        exception: The exception instance

    Returns:
        Mapped HTTP status code, 500 for anything unmapped
    """
    for exception_class in type(exception).__mro__:
        if exception_class in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_class]
    return DEFAULT_HTTP_STATUS
