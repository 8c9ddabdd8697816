"""Domain value objects for IceBreaker."""

from icebreaker.domain.value.identifiers import (
    AnswerId,
    LikeId,
    QuestionId,
    TopicId,
    UserId,
)
from icebreaker.domain.value.bulk import BulkError, BulkResult
from icebreaker.domain.value.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PagedResult,
    check_page,
    clamp_page,
    paginate,
)
from icebreaker.domain.value.types import QuestionSortField, SortOrder

__all__ = [
    # Identifiers
    "UserId",
    "TopicId",
    "QuestionId",
    "AnswerId",
    "LikeId",
    # Types
    "QuestionSortField",
    "SortOrder",
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PagedResult",
    "paginate",
    "clamp_page",
    "check_page",
    # Bulk
    "BulkError",
    "BulkResult",
]
