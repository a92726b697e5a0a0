"""Page-number pagination driven by caller-supplied providers.

A paginator asks a count provider for the total number of items, resolves
the requested page, asks a slice provider for that page's items and
returns a Pagination with the navigation window around the current page.
"""

# Entities
from .entities import Pagination

# Protocols
from .protocols import (
    CountProvider,
    SliceProvider,
    AsyncCountProvider,
    AsyncSliceProvider
)

# Services
from .services import (
    Paginator,
    AsyncPaginator,
    BasePaginator,
    build_pagination,
    calculate_page_range,
    clamp_page_number,
    compute_total_pages,
    generate_sequence
)

# Models
from .models import PaginationSchema

__all__ = [
    # Entities
    "Pagination",

    # Protocols
    "CountProvider",
    "SliceProvider",
    "AsyncCountProvider",
    "AsyncSliceProvider",

    # Services
    "Paginator",
    "AsyncPaginator",
    "BasePaginator",
    "build_pagination",
    "calculate_page_range",
    "clamp_page_number",
    "compute_total_pages",
    "generate_sequence",

    # Models
    "PaginationSchema"
]
