"""Neo-Pagination - page-number pagination for NeoMultiTenant services.

Computes the current page, page count, item window and navigation range
from caller-supplied count and slice providers.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    PaginationSettings,
    get_pagination_settings,
    get_logger,
)

from .core.exceptions import (
    # Base Exception
    NeoPaginationError,

    # Common Exceptions
    ConfigurationError,
    ProviderNotFoundError,
    InvalidPaginatorConfigError,
    ValidationError,
    InvalidPageNumberError,
    InvalidItemCountError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .features.pagination import (
    Pagination,
    PaginationSchema,
    Paginator,
    AsyncPaginator,
    CountProvider,
    SliceProvider,
    AsyncCountProvider,
    AsyncSliceProvider,
    calculate_page_range,
    compute_total_pages,
)

__all__ = [
    "__version__",

    # Configuration
    "PaginationSettings",
    "get_pagination_settings",
    "get_logger",

    # Exceptions
    "NeoPaginationError",
    "ConfigurationError",
    "ProviderNotFoundError",
    "InvalidPaginatorConfigError",
    "ValidationError",
    "InvalidPageNumberError",
    "InvalidItemCountError",
    "get_http_status_code",
    "create_error_response",

    # Pagination
    "Pagination",
    "PaginationSchema",
    "Paginator",
    "AsyncPaginator",
    "CountProvider",
    "SliceProvider",
    "AsyncCountProvider",
    "AsyncSliceProvider",
    "calculate_page_range",
    "compute_total_pages",
]
