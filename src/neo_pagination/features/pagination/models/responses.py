"""
Pagination models for API responses.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..entities import Pagination

T = TypeVar('T')


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True,
    )


class PaginationSchema(BaseSchema, Generic[T]):
    """Flat pagination record."""
    items: List[T] = Field(description="Items on the current page")
    pages: List[int] = Field(description="Page numbers to display for navigation")
    total_pages: int = Field(ge=1, description="Total number of pages")
    current_page: int = Field(ge=1, description="Current page number")
    first_page: int = Field(1, description="First page number")
    last_page: int = Field(ge=1, description="Last page number")
    previous_page: Optional[int] = Field(None, description="Previous page number, null on the first page")
    next_page: Optional[int] = Field(None, description="Next page number, null on the last page")
    items_per_page: int = Field(ge=1, description="Number of items per page")
    total_items: int = Field(ge=0, description="Total number of items")
    first_page_in_range: int = Field(ge=1, description="First page number in the navigation window")
    last_page_in_range: int = Field(ge=1, description="Last page number in the navigation window")

    @classmethod
    def from_pagination(cls, pagination: Pagination[T]) -> "PaginationSchema[T]":
        """Create the response model from a paginator result."""
        return cls.model_validate(pagination.to_dict())
