"""Provider protocols for counting and slicing paginated data."""

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T_co = TypeVar('T_co', covariant=True)


@runtime_checkable
class CountProvider(Protocol):
    """Protocol for callables returning the total number of items."""

    def __call__(self) -> int:
        """Count all items.

        Returns:
            Total number of items across all pages
        """
        ...


@runtime_checkable
class SliceProvider(Protocol[T_co]):
    """Protocol for callables returning one page worth of items."""

    def __call__(self, offset: int, limit: int) -> Sequence[T_co]:
        """Fetch a slice of items.

        Args:
            offset: Number of items to skip
            limit: Maximum number of items to return

        Returns:
            Items for the requested window
        """
        ...


@runtime_checkable
class AsyncCountProvider(Protocol):
    """Protocol for coroutine functions returning the total number of items."""

    async def __call__(self) -> int:
        """Count all items.

        Returns:
            Total number of items across all pages
        """
        ...


@runtime_checkable
class AsyncSliceProvider(Protocol[T_co]):
    """Protocol for coroutine functions returning one page worth of items."""

    async def __call__(self, offset: int, limit: int) -> Sequence[T_co]:
        """Fetch a slice of items.

        Args:
            offset: Number of items to skip
            limit: Maximum number of items to return

        Returns:
            Items for the requested window
        """
        ...
