"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from icebreaker.domain.service import QuestionService
from icebreaker.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Soft-delete the question.

        Raises:
            NotFoundError: If the question does not exist or is already deleted
        """
        await self.question_service.delete_question(
            QuestionId(UUID(request.question_id))
        )
