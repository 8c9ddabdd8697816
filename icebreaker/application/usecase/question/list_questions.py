"""List questions use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from icebreaker.domain.repository import QuestionRepository
from icebreaker.domain.value import (
    DEFAULT_PAGE_SIZE,
    PagedResult,
    QuestionSortField,
    SortOrder,
    TopicId,
    clamp_page,
)

from .response import QuestionEnricher, QuestionResponse


class ListQuestionsRequest(BaseModel):
    """List questions request.

    Paging input is clamped rather than rejected. Sort keys are accepted in
    camel, snake or lower case; unknown keys sort by creation time.
    """

    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str | None = None  # title, createdAt, likeCount, viewCount
    sort_order: str | None = None  # asc or desc (default)
    search: str | None = None
    topic_id: str | None = None


ListQuestionsResponse = PagedResult[QuestionResponse]


class ListQuestionsUseCase:
    """Use case for listing questions with filtering, sorting and pagination."""

    def __init__(
        self, question_repository: QuestionRepository, enricher: QuestionEnricher
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_repository: Question repository
            enricher: Joins user and topic names onto each question
        """
        self.question_repository = question_repository
        self.enricher = enricher

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters, sorting and paging

        Returns:
            One page of enriched questions
        """
        page_number, page_size = clamp_page(request.page_number, request.page_size)
        sort_by = QuestionSortField.parse(request.sort_by)
        sort_order = SortOrder.parse(request.sort_order)
        topic_id: Optional[TopicId] = (
            TopicId(UUID(request.topic_id)) if request.topic_id else None
        )

        with logfire.span(
            "list_questions.execute",
            page_number=page_number,
            page_size=page_size,
            sort_by=sort_by.value,
            sort_order=sort_order.value,
            search=request.search,
            topic_id=request.topic_id,
        ):
            page = await self.question_repository.find_page(
                page_number,
                page_size,
                search=request.search,
                topic_id=topic_id,
                sort_by=sort_by,
                sort_order=sort_order,
            )

            items = await self.enricher.enrich_many(page.items)

            logfire.info(
                "Questions listed", count=len(items), total=page.total_count
            )

            return ListQuestionsResponse(
                items=items,
                total_count=page.total_count,
                page_number=page.page_number,
                page_size=page.page_size,
            )
