"""Update question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from icebreaker.domain.service import QuestionService, TopicService
from icebreaker.domain.value import QuestionId, TopicId

from .response import QuestionEnricher, QuestionResponse


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    Absent or blank fields are left unchanged.
    """

    question_id: str
    title: str | None = None
    content: str | None = None
    topic_id: str | None = None


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        enricher: QuestionEnricher,
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            topic_service: Topic domain service
            enricher: Joins user and topic names onto the question
        """
        self.question_service = question_service
        self.topic_service = topic_service
        self.enricher = enricher

    async def execute(self, request: UpdateQuestionRequest) -> QuestionResponse:
        """Execute update question flow.

        Args:
            request: Update question request

        Returns:
            The updated, enriched question

        Raises:
            NotFoundError: If the question or the new topic does not exist
        """
        question_id = QuestionId(UUID(request.question_id))
        topic_id = TopicId(UUID(request.topic_id)) if request.topic_id else None

        with logfire.span("update_question.execute", question_id=str(question_id)):
            await self.question_service.get_by_id(question_id)

            if topic_id is not None:
                await self.topic_service.get_by_id(topic_id)

            question = await self.question_service.update_question(
                question_id,
                title=request.title,
                content=request.content,
                topic_id=topic_id,
            )
            return await self.enricher.enrich(question)
