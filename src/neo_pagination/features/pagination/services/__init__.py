"""Pagination services."""

from .page_range import (
    calculate_page_range,
    clamp_page_number,
    compute_total_pages,
    generate_sequence
)

from .paginator import (
    AsyncPaginator,
    BasePaginator,
    Paginator,
    build_pagination
)

__all__ = [
    # Page arithmetic
    "calculate_page_range",
    "clamp_page_number",
    "compute_total_pages",
    "generate_sequence",

    # Paginators
    "AsyncPaginator",
    "BasePaginator",
    "Paginator",
    "build_pagination"
]
