"""Get question use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from icebreaker.domain.service import QuestionService
from icebreaker.domain.value import QuestionId

from .response import QuestionEnricher, QuestionResponse


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str


class GetQuestionUseCase:
    """Use case for reading one question.

    Every successful read counts as a view.
    """

    def __init__(
        self, question_service: QuestionService, enricher: QuestionEnricher
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            enricher: Joins user and topic names onto the question
        """
        self.question_service = question_service
        self.enricher = enricher

    async def execute(self, request: GetQuestionRequest) -> Optional[QuestionResponse]:
        """Execute get question flow.

        Steps:
        1. Load the active question
        2. Persist an incremented view count (separate write, not atomic
           with the read)
        3. Resolve the user's display name and the topic name

        Args:
            request: Get question request

        Returns:
            Enriched question if found and active, None otherwise
        """
        question_id = QuestionId(UUID(request.question_id))
        with logfire.span("get_question.execute", question_id=str(question_id)):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                return None

            question = await self.question_service.record_view(question)
            return await self.enricher.enrich(question)
