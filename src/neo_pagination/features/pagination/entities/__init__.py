"""Pagination entities."""

from .pagination import Pagination

__all__ = [
    "Pagination",
]
