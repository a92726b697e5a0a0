"""Pydantic models for serializing pagination results."""

from .responses import BaseSchema, PaginationSchema

__all__ = [
    "BaseSchema",
    "PaginationSchema",
]
