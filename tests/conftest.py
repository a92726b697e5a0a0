"""Pytest configuration and fixtures for neo-pagination tests."""

import pytest

from neo_pagination.config.settings import get_pagination_settings
from neo_pagination.features.pagination import AsyncPaginator, Paginator


@pytest.fixture
def sample_rows():
    """One hundred sample rows."""
    return [{"id": i, "name": f"item-{i}"} for i in range(1, 101)]


@pytest.fixture
def mock_count_provider(mocker, sample_rows):
    """Count provider returning the number of sample rows."""
    return mocker.MagicMock(return_value=len(sample_rows))


@pytest.fixture
def mock_slice_provider(mocker, sample_rows):
    """Slice provider returning a window of the sample rows."""
    return mocker.MagicMock(side_effect=lambda offset, limit: sample_rows[offset:offset + limit])


@pytest.fixture
def mock_async_count_provider(mocker, sample_rows):
    """Async count provider returning the number of sample rows."""
    return mocker.AsyncMock(return_value=len(sample_rows))


@pytest.fixture
def mock_async_slice_provider(mocker, sample_rows):
    """Async slice provider returning a window of the sample rows."""
    return mocker.AsyncMock(side_effect=lambda offset, limit: sample_rows[offset:offset + limit])


@pytest.fixture
def paginator(mock_count_provider, mock_slice_provider):
    """Paginator over the sample rows with 10 items per page and 5 pages in range."""
    return Paginator(
        count_provider=mock_count_provider,
        slice_provider=mock_slice_provider,
        items_per_page=10,
        pages_in_range=5
    )


@pytest.fixture
def async_paginator(mock_async_count_provider, mock_async_slice_provider):
    """Async paginator over the sample rows with 10 items per page and 5 pages in range."""
    return AsyncPaginator(
        count_provider=mock_async_count_provider,
        slice_provider=mock_async_slice_provider,
        items_per_page=10,
        pages_in_range=5
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so environment changes in one test never leak."""
    get_pagination_settings.cache_clear()
    yield
    get_pagination_settings.cache_clear()
