"""
Pagination settings loaded from the environment.

Values are read from ``PAGINATION_*`` environment variables or a ``.env``
file and validated by pydantic.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ITEMS_PER_PAGE = 10
DEFAULT_PAGES_IN_RANGE = 5


class PaginationSettings(BaseSettings):
    """Default paginator configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    items_per_page: int = Field(
        default=DEFAULT_ITEMS_PER_PAGE,
        ge=1,
        description="Number of items on each page"
    )
    pages_in_range: int = Field(
        default=DEFAULT_PAGES_IN_RANGE,
        ge=1,
        description="Maximum number of page links in the navigation window"
    )


@lru_cache()
def get_pagination_settings() -> PaginationSettings:
    """Get cached pagination settings instance."""
    return PaginationSettings()
