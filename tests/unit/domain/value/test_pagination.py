"""Unit tests for paging helpers."""

import pytest

from icebreaker.domain.error import ValidationError
from icebreaker.domain.value import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PagedResult,
    check_page,
    clamp_page,
    paginate,
)


class TestPaginate:
    """Tests for paginate."""

    def test_slices_requested_page(self):
        """Pages are offset by (page_number - 1) * page_size."""
        # Act
        page = paginate(list(range(25)), page_number=2, page_size=10)

        # Assert
        assert page.items == list(range(10, 20))
        assert page.total_count == 25
        assert page.total_pages == 3
        assert page.has_previous_page is True
        assert page.has_next_page is True

    def test_last_partial_page(self):
        """The last page holds the remainder."""
        # Act
        page = paginate(list(range(25)), page_number=3, page_size=10)

        # Assert
        assert page.items == [20, 21, 22, 23, 24]
        assert page.has_next_page is False

    def test_page_past_the_end_is_empty_with_total(self):
        """Pages beyond the last one are empty but keep the total count."""
        # Act
        page = paginate(list(range(5)), page_number=4, page_size=10)

        # Assert
        assert page.items == []
        assert page.total_count == 5
        assert page.total_pages == 1

    def test_empty_collection(self):
        """An empty collection has no pages."""
        # Act
        page = paginate([], page_number=1, page_size=10)

        # Assert
        assert page.total_pages == 0
        assert page.has_previous_page is False
        assert page.has_next_page is False

    def test_serialized_page_includes_derived_fields(self):
        """Derived paging fields are part of the serialized result."""
        # Act
        data = paginate([1, 2, 3], page_number=1, page_size=2).model_dump()

        # Assert
        assert data["total_pages"] == 2
        assert data["has_next_page"] is True

    def test_map_keeps_paging(self):
        """Mapping items keeps the paging metadata."""
        # Arrange
        page = paginate([1, 2, 3], page_number=2, page_size=2)

        # Act
        mapped = page.map(str)

        # Assert
        assert mapped.items == ["3"]
        assert (mapped.total_count, mapped.page_number, mapped.page_size) == (3, 2, 2)


class TestClampPage:
    """Tests for clamp_page."""

    @pytest.mark.parametrize(
        "page_number, page_size, expected",
        [
            (0, 10, (1, 10)),
            (-3, 10, (1, 10)),
            (2, 0, (2, DEFAULT_PAGE_SIZE)),
            (2, None, (2, DEFAULT_PAGE_SIZE)),
            (1, 500, (1, MAX_PAGE_SIZE)),
            (3, 25, (3, 25)),
        ],
    )
    def test_clamps_into_range(self, page_number, page_size, expected):
        """Out-of-range values are coerced into range."""
        assert clamp_page(page_number, page_size) == expected


class TestCheckPage:
    """Tests for check_page."""

    def test_rejects_page_zero(self):
        with pytest.raises(ValidationError, match="Page number"):
            check_page(0, 10)

    @pytest.mark.parametrize("page_size", [0, MAX_PAGE_SIZE + 1])
    def test_rejects_page_size_out_of_range(self, page_size):
        with pytest.raises(ValidationError, match="Page size"):
            check_page(1, page_size)

    def test_accepts_valid_input(self):
        check_page(1, MAX_PAGE_SIZE)


class TestPagedResultValidation:
    """Tests for PagedResult construction."""

    def test_rejects_zero_page_size(self):
        """Page size must be positive."""
        with pytest.raises(ValueError):
            PagedResult(items=[], total_count=0, page_number=1, page_size=0)
