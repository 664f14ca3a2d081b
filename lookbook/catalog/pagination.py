"""Pagination helpers for catalog listings.

Turns (page, limit, total) into a normalized page window and the
metadata clients render pagination controls from.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from lookbook.domain.exceptions import InvalidPageSizeError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 12
PAGE_SIZE_OPTIONS = (12, 24, 36, 48)

# Marker emitted by get_page_numbers for collapsed page ranges
ELLIPSIS = "..."


@dataclass(frozen=True)
class PaginationInfo:
    """Page metadata for a listing response.

    Attributes:
        page: Current page (1-indexed, already clamped).
        limit: Items per page.
        total: Total number of matching items.
        total_pages: Number of pages, 0 only when total is 0.
        has_next_page: Whether a later page exists.
        has_prev_page: Whether an earlier page exists.
    """

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    @property
    def offset(self) -> int:
        """Offset of the first item on this page."""
        return calculate_offset(self.page, self.limit)


@dataclass(frozen=True)
class PageSlice(Generic[T]):
    """One page of an ordered sequence plus its metadata."""

    page_data: list[T]
    info: PaginationInfo


def ensure_valid_limit(limit: int) -> int:
    """Reject non-positive page sizes.

    Args:
        limit: Requested items per page.

    Returns:
        The limit unchanged.

    Raises:
        InvalidPageSizeError: If limit is zero or negative.
    """
    if limit <= 0:
        raise InvalidPageSizeError(limit)
    return limit


def calculate_total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items."""
    ensure_valid_limit(limit)
    return math.ceil(max(total, 0) / limit)


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a page number into ``[1, max(total_pages, 1)]``."""
    return max(1, min(page, total_pages or 1))


def calculate_offset(page: int, limit: int) -> int:
    """Calculate the storage offset for a 1-indexed page."""
    return (max(page, 1) - 1) * limit


def build_pagination(total: int, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> PaginationInfo:
    """Build pagination metadata for a result set.

    A page beyond the last page is clamped to the last page rather
    than reported as an error.

    Args:
        total: Total number of matching items.
        page: Requested page (1-indexed).
        limit: Items per page.

    Returns:
        Normalized pagination metadata.

    Raises:
        InvalidPageSizeError: If limit is zero or negative.
    """
    total_pages = calculate_total_pages(total, limit)
    normalized_page = clamp_page(page, total_pages)

    return PaginationInfo(
        page=normalized_page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next_page=normalized_page < total_pages,
        has_prev_page=normalized_page > 1,
    )


def paginate(data: Sequence[T], page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> PageSlice[T]:
    """Slice one page out of an ordered sequence.

    Args:
        data: Ordered items.
        page: Requested page (1-indexed); clamped into range.
        limit: Items per page.

    Returns:
        The contiguous page window and its metadata.

    Raises:
        InvalidPageSizeError: If limit is zero or negative.
    """
    info = build_pagination(len(data), page, limit)
    start = info.offset
    return PageSlice(page_data=list(data[start : start + limit]), info=info)


def validate_page(page: float | None, total_pages: int) -> int:
    """Normalize a page number coming from a client.

    Missing or non-positive pages become 1, pages past the end become
    the last page, fractional pages are floored.
    """
    if not page or page < 1:
        return 1
    if page > total_pages:
        return total_pages or 1
    return math.floor(page)


def get_page_numbers(current_page: int, total_pages: int) -> list[int | str]:
    """Compact page list for pagination controls.

    Seven or fewer pages are listed in full. Longer ranges keep the
    first page, the last page and the neighbours of the current page,
    collapsing the gaps into ``ELLIPSIS`` markers.

    Example:
        >>> get_page_numbers(5, 10)
        [1, '...', 4, 5, 6, '...', 10]
    """
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    pages: list[int | str] = [1]

    if current_page > 3:
        pages.append(ELLIPSIS)

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)
    pages.extend(range(start, end + 1))

    if current_page < total_pages - 2:
        pages.append(ELLIPSIS)

    pages.append(total_pages)
    return pages


def get_page_range_text(info: PaginationInfo) -> str:
    """Human-readable range, e.g. ``"Showing 1-12 of 52"``."""
    if info.total == 0:
        return "No items"

    start = (info.page - 1) * info.limit + 1
    end = min(info.page * info.limit, info.total)
    return f"Showing {start}-{end} of {info.total}"
