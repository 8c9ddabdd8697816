"""Bulk create questions use case."""

import logfire
from pydantic import BaseModel

from icebreaker.application.usecase.base import BaseUseCase
from icebreaker.domain.error import DomainError
from icebreaker.domain.value import BulkError, BulkResult
from icebreaker.persistence.error import PersistenceError

from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .response import QuestionResponse


class BulkCreateQuestionsRequest(BaseModel):
    """Bulk create questions request."""

    questions: list[CreateQuestionRequest]


BulkCreateQuestionsResponse = BulkResult[QuestionResponse]


class BulkCreateQuestionsUseCase(BaseUseCase):
    """Use case for creating many questions in one call.

    Items are created one after another through the single-question flow.
    A failing item, including one whose write fails, is reported with its
    input index and does not stop the remaining items.
    """

    def __init__(self, create_question_use_case: CreateQuestionUseCase) -> None:
        """Initialize bulk create questions use case.

        Args:
            create_question_use_case: Single question creation flow
        """
        self.create_question_use_case = create_question_use_case

    async def execute(
        self, request: BulkCreateQuestionsRequest
    ) -> BulkCreateQuestionsResponse:
        """Execute bulk create flow.

        Args:
            request: Questions to create

        Returns:
            Created questions in input order and one error per failed item
        """
        with logfire.span(
            "bulk_create_questions.execute", count=len(request.questions)
        ):
            successes: list[QuestionResponse] = []
            errors: list[BulkError] = []

            for index, item in enumerate(request.questions):
                try:
                    successes.append(await self.create_question_use_case.execute(item))
                except (DomainError, PersistenceError, ValueError) as e:
                    logfire.warn(
                        "Bulk question item failed", index=index, error=str(e)
                    )
                    errors.append(BulkError(index=index, message=str(e)))

            logfire.info(
                "Questions bulk created", created=len(successes), failed=len(errors)
            )
            return BulkCreateQuestionsResponse(successes=successes, errors=errors)
