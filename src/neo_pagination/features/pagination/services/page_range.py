"""Page arithmetic shared by the paginators."""

from typing import List

from ....core.exceptions import InvalidPaginatorConfigError


def compute_total_pages(total_items: int, items_per_page: int) -> int:
    """Compute the total number of pages, never less than one."""
    if items_per_page < 1:
        raise InvalidPaginatorConfigError(
            "Items per page must be greater than 0",
            details={"items_per_page": items_per_page}
        )
    return max(1, (total_items + items_per_page - 1) // items_per_page)


def clamp_page_number(page: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page, 1), max(total_pages, 1))


def generate_sequence(start: int, end: int) -> List[int]:
    """Return the integers from start to end inclusive."""
    if start > end:
        return []
    return list(range(start, end + 1))


def calculate_page_range(current_page: int, total_pages: int, pages_in_range: int) -> List[int]:
    """Calculate which page numbers to show in navigation.

    The window is centred on ``current_page`` and holds ``pages_in_range``
    pages unless there are fewer pages in total. For even window sizes the
    extra page sits before the current page. Near either end the window is
    shifted so it stays inside ``[1, total_pages]``.
    """
    if pages_in_range < 1:
        raise InvalidPaginatorConfigError(
            "Pages in range must be greater than 0",
            details={"pages_in_range": pages_in_range}
        )
    if total_pages <= pages_in_range:
        return generate_sequence(1, total_pages)

    half = pages_in_range // 2
    start = current_page - half
    end = start + pages_in_range - 1

    if start < 1:
        start = 1
        end = pages_in_range
    if end > total_pages:
        end = total_pages
        start = total_pages - pages_in_range + 1

    return generate_sequence(start, end)
