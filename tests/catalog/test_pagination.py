"""Tests for pagination helpers."""

import pytest

from lookbook.catalog.pagination import (
    ELLIPSIS,
    PaginationInfo,
    build_pagination,
    calculate_offset,
    calculate_total_pages,
    clamp_page,
    get_page_numbers,
    get_page_range_text,
    paginate,
    validate_page,
)
from lookbook.domain.exceptions import CatalogValidationError, InvalidPageSizeError


class TestBuildPagination:
    """Tests for pagination metadata."""

    def test_total_pages_rounds_up(self) -> None:
        """52 items at 12 per page need 5 pages."""
        info = build_pagination(total=52, page=1, limit=12)
        assert info.total_pages == 5
        assert info.has_next_page is True
        assert info.has_prev_page is False

    def test_page_past_end_clamped_to_last(self) -> None:
        """A page beyond the last page is clamped, not rejected."""
        info = build_pagination(total=52, page=99, limit=12)
        assert info.page == 5
        assert info.has_next_page is False
        assert info.has_prev_page is True

    def test_page_below_one_clamped_to_first(self) -> None:
        """Non-positive pages become page 1."""
        assert build_pagination(total=52, page=0, limit=12).page == 1
        assert build_pagination(total=52, page=-3, limit=12).page == 1

    def test_empty_result(self) -> None:
        """An empty result has zero pages but page stays 1."""
        info = build_pagination(total=0, page=4, limit=12)
        assert info.page == 1
        assert info.total_pages == 0
        assert info.has_next_page is False
        assert info.has_prev_page is False

    def test_offset_property(self) -> None:
        """Offset is derived from the clamped page."""
        info = build_pagination(total=52, page=3, limit=12)
        assert info.offset == 24

    @pytest.mark.parametrize("limit", [0, -1, -12])
    def test_non_positive_limit_rejected(self, limit: int) -> None:
        """Zero or negative page size raises a validation error."""
        with pytest.raises(InvalidPageSizeError) as exc_info:
            build_pagination(total=10, page=1, limit=limit)
        assert exc_info.value.field == "limit"
        assert isinstance(exc_info.value, CatalogValidationError)


class TestPaginate:
    """Tests for slicing data into pages."""

    def test_slices_requested_window(self) -> None:
        """Page 2 of 25 items at 10 per page is items 10-19."""
        data = list(range(25))
        result = paginate(data, page=2, limit=10)
        assert result.page_data == list(range(10, 20))
        assert result.info.page == 2
        assert result.info.total == 25
        assert result.info.total_pages == 3

    def test_last_page_is_partial(self) -> None:
        """The last page holds the remainder."""
        result = paginate(list(range(25)), page=3, limit=10)
        assert result.page_data == [20, 21, 22, 23, 24]

    def test_out_of_range_page_returns_last_page(self) -> None:
        """A too-large page serves the last page's items."""
        result = paginate(list(range(25)), page=50, limit=10)
        assert result.info.page == 3
        assert result.page_data == [20, 21, 22, 23, 24]

    def test_idempotent_on_small_input(self) -> None:
        """Paginating a single page's worth of items returns them unchanged."""
        data = list("abcdefghijkl")
        first = paginate(data, page=1, limit=12)
        again = paginate(first.page_data, page=1, limit=12)
        assert first.page_data == data
        assert again.page_data == data
        assert again.info == first.info

    def test_empty_data(self) -> None:
        """Empty input yields an empty page."""
        result = paginate([], page=1, limit=12)
        assert result.page_data == []
        assert result.info.total_pages == 0

    def test_zero_limit_rejected(self) -> None:
        """Paginate rejects a zero limit."""
        with pytest.raises(InvalidPageSizeError):
            paginate([1, 2, 3], page=1, limit=0)


class TestHelpers:
    """Tests for small pagination helpers."""

    def test_calculate_total_pages(self) -> None:
        assert calculate_total_pages(0, 12) == 0
        assert calculate_total_pages(12, 12) == 1
        assert calculate_total_pages(13, 12) == 2

    def test_clamp_page(self) -> None:
        assert clamp_page(3, 5) == 3
        assert clamp_page(9, 5) == 5
        assert clamp_page(9, 0) == 1

    def test_calculate_offset(self) -> None:
        assert calculate_offset(1, 12) == 0
        assert calculate_offset(3, 12) == 24

    def test_validate_page(self) -> None:
        """Client page numbers are normalized."""
        assert validate_page(None, 5) == 1
        assert validate_page(0, 5) == 1
        assert validate_page(-2, 5) == 1
        assert validate_page(7, 5) == 5
        assert validate_page(7, 0) == 1
        assert validate_page(2.7, 5) == 2


class TestPageNumbers:
    """Tests for the compact page list."""

    def test_short_range_lists_all_pages(self) -> None:
        """Seven or fewer pages have no ellipsis."""
        assert get_page_numbers(1, 7) == [1, 2, 3, 4, 5, 6, 7]
        assert get_page_numbers(3, 3) == [1, 2, 3]
        assert get_page_numbers(1, 0) == []

    def test_middle_page(self) -> None:
        """Ellipses on both sides of the window."""
        assert get_page_numbers(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]

    def test_near_start(self) -> None:
        """No leading ellipsis near the first page."""
        assert get_page_numbers(2, 10) == [1, 2, 3, ELLIPSIS, 10]
        assert get_page_numbers(3, 10) == [1, 2, 3, 4, ELLIPSIS, 10]

    def test_near_end(self) -> None:
        """No trailing ellipsis near the last page."""
        assert get_page_numbers(9, 10) == [1, ELLIPSIS, 8, 9, 10]
        assert get_page_numbers(10, 10) == [1, ELLIPSIS, 9, 10]

    def test_first_page(self) -> None:
        assert get_page_numbers(1, 10) == [1, 2, ELLIPSIS, 10]


class TestPageRangeText:
    """Tests for the human-readable page range."""

    def test_no_items(self) -> None:
        info = build_pagination(total=0, page=1, limit=12)
        assert get_page_range_text(info) == "No items"

    def test_first_page(self) -> None:
        info = build_pagination(total=52, page=1, limit=12)
        assert get_page_range_text(info) == "Showing 1-12 of 52"

    def test_last_page(self) -> None:
        info = PaginationInfo(
            page=5,
            limit=12,
            total=52,
            total_pages=5,
            has_next_page=False,
            has_prev_page=True,
        )
        assert get_page_range_text(info) == "Showing 49-52 of 52"
