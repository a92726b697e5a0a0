"""Paginators turning a count provider and a slice provider into a Pagination."""

import logging
import operator
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from ....config.settings import (
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_PAGES_IN_RANGE,
    PaginationSettings,
    get_pagination_settings,
)
from ....core.exceptions import (
    InvalidItemCountError,
    InvalidPageNumberError,
    InvalidPaginatorConfigError,
    ProviderNotFoundError,
)
from ..entities import Pagination
from ..protocols import AsyncCountProvider, AsyncSliceProvider, CountProvider, SliceProvider
from .page_range import calculate_page_range, clamp_page_number, compute_total_pages

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _as_int(value: Any) -> Optional[int]:
    """Return value as an int if it is an integer type other than bool."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def build_pagination(
    items: Sequence[T],
    total_items: int,
    current_page: int,
    total_pages: int,
    items_per_page: int,
    pages_in_range: int
) -> Pagination[T]:
    """Assemble the result for an already resolved page."""
    pages = calculate_page_range(current_page, total_pages, pages_in_range)

    return Pagination(
        items=items,
        pages=pages,
        total_pages=total_pages,
        current_page=current_page,
        items_per_page=items_per_page,
        total_items=total_items,
        previous_page=current_page - 1 if current_page > 1 else None,
        next_page=current_page + 1 if current_page < total_pages else None,
    )


@dataclass(frozen=True)
class BasePaginator:
    """Configuration and validation shared by the sync and async paginators.

    Instances are immutable; use :meth:`with_options` to derive a paginator
    with different settings.
    """

    count_provider: Optional[Callable[..., Any]] = None
    slice_provider: Optional[Callable[..., Any]] = None
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    pages_in_range: int = DEFAULT_PAGES_IN_RANGE

    def __post_init__(self):
        """Validate window sizes."""
        items_per_page = _as_int(self.items_per_page)
        if items_per_page is None or items_per_page < 1:
            raise InvalidPaginatorConfigError(
                "Items per page must be greater than 0",
                details={"items_per_page": self.items_per_page}
            )
        pages_in_range = _as_int(self.pages_in_range)
        if pages_in_range is None or pages_in_range < 1:
            raise InvalidPaginatorConfigError(
                "Pages in range must be greater than 0",
                details={"pages_in_range": self.pages_in_range}
            )
        object.__setattr__(self, "items_per_page", items_per_page)
        object.__setattr__(self, "pages_in_range", pages_in_range)

    @classmethod
    def from_settings(
        cls,
        count_provider: Optional[Any] = None,
        slice_provider: Optional[Any] = None,
        settings: Optional[PaginationSettings] = None
    ):
        """Create a paginator using configured defaults.

        Args:
            count_provider: Callable returning the total item count
            slice_provider: Callable returning items for (offset, limit)
            settings: Settings to use, the cached environment settings if omitted

        Returns:
            New paginator instance
        """
        if settings is None:
            settings = get_pagination_settings()
        return cls(
            count_provider=count_provider,
            slice_provider=slice_provider,
            items_per_page=settings.items_per_page,
            pages_in_range=settings.pages_in_range
        )

    def with_options(self, **changes: Any):
        """Return a copy of this paginator with the given fields replaced."""
        return replace(self, **changes)

    def _check_request(self, requested_page: Any) -> int:
        """Reject the call before any provider runs, returning the page as an int."""
        if self.count_provider is None or self.slice_provider is None:
            missing = [
                name for name, provider in (
                    ("count_provider", self.count_provider),
                    ("slice_provider", self.slice_provider),
                )
                if provider is None
            ]
            raise ProviderNotFoundError(
                "Callback function not found",
                details={"missing": missing}
            )
        page = _as_int(requested_page)
        if page is None or page <= 0:
            raise InvalidPageNumberError(
                "Page number must be greater than 0",
                details={"page": requested_page}
            )
        return page

    @staticmethod
    def _check_total(total: Any) -> int:
        total_items = _as_int(total)
        if total_items is None or total_items < 0:
            raise InvalidItemCountError(
                "Item count must be a non-negative integer",
                details={"total_items": total}
            )
        return total_items

    def _resolve_page(self, requested_page: int, total_items: int) -> tuple[int, int]:
        """Return (current_page, total_pages) for a validated request."""
        total_pages = compute_total_pages(total_items, self.items_per_page)
        current_page = clamp_page_number(requested_page, total_pages)
        if current_page != requested_page:
            logger.debug(f"Requested page {requested_page} exceeds {total_pages} pages, using last page")
        return current_page, total_pages

    def _offset(self, current_page: int) -> int:
        return (current_page - 1) * self.items_per_page

    def _build(self, items: Sequence[T], total_items: int, current_page: int, total_pages: int) -> Pagination[T]:
        pagination = build_pagination(
            items=items,
            total_items=total_items,
            current_page=current_page,
            total_pages=total_pages,
            items_per_page=self.items_per_page,
            pages_in_range=self.pages_in_range
        )
        logger.debug(
            f"Paginated page {current_page}/{total_pages} "
            f"({total_items} items, window {pagination.first_page_in_range}-{pagination.last_page_in_range})"
        )
        return pagination


@dataclass(frozen=True)
class Paginator(BasePaginator, Generic[T]):
    """Paginator for plain callables.

    Example:
        paginator = Paginator(
            count_provider=lambda: len(rows),
            slice_provider=lambda offset, limit: rows[offset:offset + limit],
        )
        page = paginator.paginate(3)
    """

    count_provider: Optional[CountProvider] = None
    slice_provider: Optional[SliceProvider[T]] = None

    def paginate(self, requested_page: int) -> Pagination[T]:
        """Paginate to the requested 1-based page.

        Args:
            requested_page: Page number, clamped to the last page when too large

        Returns:
            Pagination result for the resolved page

        Raises:
            ProviderNotFoundError: If a provider is not configured
            InvalidPageNumberError: If requested_page is not a positive integer
            InvalidItemCountError: If the count provider returns a bad value
        """
        requested_page = self._check_request(requested_page)

        total_items = self._check_total(self.count_provider())
        current_page, total_pages = self._resolve_page(requested_page, total_items)

        items = self.slice_provider(self._offset(current_page), self.items_per_page)

        return self._build(items, total_items, current_page, total_pages)


@dataclass(frozen=True)
class AsyncPaginator(BasePaginator, Generic[T]):
    """Paginator for coroutine functions, e.g. asyncpg-backed repositories.

    Example:
        paginator = AsyncPaginator(
            count_provider=repository.count,
            slice_provider=repository.fetch_window,
        )
        page = await paginator.paginate(3)
    """

    count_provider: Optional[AsyncCountProvider] = None
    slice_provider: Optional[AsyncSliceProvider[T]] = None

    async def paginate(self, requested_page: int) -> Pagination[T]:
        """Paginate to the requested 1-based page.

        Same contract as :meth:`Paginator.paginate` with awaited providers.
        """
        requested_page = self._check_request(requested_page)

        total_items = self._check_total(await self.count_provider())
        current_page, total_pages = self._resolve_page(requested_page, total_items)

        items = await self.slice_provider(self._offset(current_page), self.items_per_page)

        return self._build(items, total_items, current_page, total_pages)
