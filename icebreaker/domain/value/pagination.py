"""Paged result sets shared by every list operation."""

import math
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import Field, computed_field

from icebreaker.domain.error import ValidationError
from icebreaker.domain.value.common import ValueObject

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

T = TypeVar("T")
U = TypeVar("U")


class PagedResult(ValueObject, Generic[T]):
    """One page of a filtered, ordered result set.

    `total_count` is the size of the filtered set before slicing, so it does
    not change when `page_number` runs past the last page; `items` is simply
    empty in that case.
    """

    items: list[T] = Field(default_factory=list)
    total_count: int = Field(ge=0)
    page_number: int = Field(ge=1)
    page_size: int = Field(ge=1)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    def map(self, func: Callable[[T], U]) -> "PagedResult[U]":
        """Return the same page with every item passed through `func`."""
        return PagedResult(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            page_number=self.page_number,
            page_size=self.page_size,
        )


def paginate(items: list[T], page_number: int, page_size: int) -> PagedResult[T]:
    """Slice an already filtered and ordered list into one page.

    Args:
        items: Full filtered, ordered collection
        page_number: 1-based page number
        page_size: Maximum number of items per page

    Returns:
        The requested page with the pre-slice count
    """
    offset = (page_number - 1) * page_size
    return PagedResult(
        items=items[offset : offset + page_size],
        total_count=len(items),
        page_number=page_number,
        page_size=page_size,
    )


def clamp_page(page_number: int | None, page_size: int | None) -> tuple[int, int]:
    """Coerce paging input into range.

    Page numbers below 1 become 1. Missing or non-positive page sizes become
    DEFAULT_PAGE_SIZE and sizes above MAX_PAGE_SIZE become MAX_PAGE_SIZE.
    """
    page_number = max(1, page_number or 1)
    if not page_size or page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    return page_number, min(page_size, MAX_PAGE_SIZE)


def check_page(page_number: int, page_size: int) -> None:
    """Reject out-of-range paging input.

    Raises:
        ValidationError: If page_number < 1 or page_size is outside [1, MAX_PAGE_SIZE]
    """
    if page_number < 1:
        raise ValidationError("Page number must be greater than 0")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValidationError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")
