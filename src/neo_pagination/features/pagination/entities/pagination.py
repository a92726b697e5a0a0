"""Pagination result entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """Result of one paginate call.

    ``items`` holds whatever the slice provider returned for the resolved
    page. ``pages`` is the navigation window: a contiguous ascending run of
    page numbers inside ``[first_page, last_page]``.
    """

    items: Sequence[T]
    pages: List[int]
    total_pages: int
    current_page: int
    items_per_page: int
    total_items: int
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    first_page: int = field(default=1)

    @property
    def last_page(self) -> int:
        """Last page number, equal to the total page count."""
        return self.total_pages

    @property
    def first_page_in_range(self) -> int:
        """First page number shown in the navigation window."""
        return self.pages[0]

    @property
    def last_page_in_range(self) -> int:
        """Last page number shown in the navigation window."""
        return self.pages[-1]

    @property
    def has_previous_page(self) -> bool:
        return self.previous_page is not None

    @property
    def has_next_page(self) -> bool:
        return self.next_page is not None

    @property
    def is_first_page(self) -> bool:
        return self.current_page == self.first_page

    @property
    def is_last_page(self) -> bool:
        return self.current_page == self.last_page

    def get_page_info(self) -> Dict[str, Any]:
        """Get a summary of the page position without the items."""
        return {
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "has_next": self.has_next_page,
            "has_previous": self.has_previous_page,
            "items_per_page": self.items_per_page,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the flat pagination record."""
        return {
            "items": self.items,
            "pages": list(self.pages),
            "total_pages": self.total_pages,
            "current_page": self.current_page,
            "first_page": self.first_page,
            "last_page": self.last_page,
            "previous_page": self.previous_page,
            "next_page": self.next_page,
            "items_per_page": self.items_per_page,
            "total_items": self.total_items,
            "first_page_in_range": self.first_page_in_range,
            "last_page_in_range": self.last_page_in_range,
        }
