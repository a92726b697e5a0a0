"""Pagination provider protocols."""

from .providers import (
    CountProvider,
    SliceProvider,
    AsyncCountProvider,
    AsyncSliceProvider
)

__all__ = [
    "CountProvider",
    "SliceProvider",
    "AsyncCountProvider",
    "AsyncSliceProvider"
]
