# users_api/core/domain/pagination.py
"""
Page arithmetic for the user listing.

Out-of-range requests are corrected, never rejected: the page number is
raised to 1 and the page size clamped into [1, MAX_PAGE_SIZE].
"""
import math

from users_api.core.domain.models import PageInfo

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 20


def clamp_page_number(requested: int) -> int:
    return max(requested, DEFAULT_PAGE_NUMBER)


def clamp_page_size(requested: int) -> int:
    return min(max(requested, MIN_PAGE_SIZE), MAX_PAGE_SIZE)


def page_offset(requested_page: int, requested_size: int) -> int:
    """Number of items before the first item of the (clamped) page."""
    return (clamp_page_number(requested_page) - 1) * clamp_page_size(requested_size)


def paginate(total_count: int, requested_page: int, requested_size: int) -> PageInfo:
    current_page = clamp_page_number(requested_page)
    page_size = clamp_page_size(requested_size)
    total_pages = math.ceil(total_count / page_size) if total_count > 0 else 0

    return PageInfo(
        total_count=total_count,
        current_page=current_page,
        page_size=page_size,
        total_pages=total_pages,
        skip=(current_page - 1) * page_size,
        has_previous=current_page > 1,
        has_next=current_page < total_pages,
    )

