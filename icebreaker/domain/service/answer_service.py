"""Question answer domain service."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

import logfire

from icebreaker.domain.error import DomainError, NotFoundError
from icebreaker.domain.model import QuestionAnswer
from icebreaker.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from icebreaker.domain.value import (
    AnswerId,
    BulkError,
    BulkResult,
    PagedResult,
    QuestionId,
    UserId,
    clamp_page,
)

from .base import Service


@dataclass
class AnswerDraft:
    """Input for one answer of a bulk create."""

    question_id: QuestionId
    user_id: UserId
    content: str


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository (existence checks)
            user_repository: User repository (existence checks)
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.user_repository = user_repository

    async def get_answer(self, answer_id: AnswerId) -> QuestionAnswer:
        """Get an answer and record one view of it.

        The view count update is a separate write after the read.

        Raises:
            NotFoundError: If answer not found or deleted
        """
        with logfire.span("answer_service.get_answer", answer_id=str(answer_id)):
            answer = await self._get_active(answer_id)
            return await self.answer_repository.update(answer.increment_view_count())

    async def list_answers(
        self,
        page_number: int = 1,
        page_size: int = 10,
        question_id: Optional[QuestionId] = None,
        user_id: Optional[UserId] = None,
    ) -> PagedResult[QuestionAnswer]:
        """List active answers, newest first, optionally by question and/or user."""
        page_number, page_size = clamp_page(page_number, page_size)
        with logfire.span(
            "answer_service.list_answers",
            page_number=page_number,
            page_size=page_size,
            question_id=str(question_id) if question_id else None,
            user_id=str(user_id) if user_id else None,
        ):
            return await self.answer_repository.find_page(
                page_number, page_size, question_id=question_id, user_id=user_id
            )

    async def create_answer(
        self, question_id: QuestionId, user_id: UserId, content: str
    ) -> QuestionAnswer:
        """Answer a question.

        Args:
            question_id: Question being answered
            user_id: Answering user
            content: Answer text

        Returns:
            Created answer

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the question or user does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            answer = await self._build(AnswerDraft(question_id, user_id, content))
            created = await self.answer_repository.add(answer)
            logfire.info("Answer created", answer_id=str(created.id))
            return created

    async def bulk_create_answers(
        self, drafts: Sequence[AnswerDraft]
    ) -> BulkResult[QuestionAnswer]:
        """Create many answers, skipping the ones that fail validation.

        Every draft is validated in order; failures are reported with their
        input index. The valid answers are then stored in a single write.

        Args:
            drafts: Answers to create

        Returns:
            Stored answers and per-index errors
        """
        with logfire.span("answer_service.bulk_create_answers", count=len(drafts)):
            valid: list[QuestionAnswer] = []
            errors: list[BulkError] = []

            for index, draft in enumerate(drafts):
                try:
                    valid.append(await self._build(draft))
                except DomainError as e:
                    errors.append(BulkError(index=index, message=str(e)))

            created = await self.answer_repository.add_bulk(valid)
            logfire.info(
                "Answers bulk created", created=len(created), failed=len(errors)
            )
            return BulkResult(successes=created, errors=errors)

    async def update_answer(
        self, answer_id: AnswerId, content: Optional[str]
    ) -> QuestionAnswer:
        """Replace an answer's content. Blank content leaves it unchanged.

        Raises:
            NotFoundError: If answer not found or deleted
        """
        with logfire.span("answer_service.update_answer", answer_id=str(answer_id)):
            answer = await self._get_active(answer_id)
            return await self.answer_repository.update(answer.update_content(content))

    async def delete_answer(self, answer_id: AnswerId) -> None:
        """Soft-delete an answer.

        Raises:
            NotFoundError: If answer not found or already deleted
        """
        with logfire.span("answer_service.delete_answer", answer_id=str(answer_id)):
            if not await self.answer_repository.delete(answer_id):
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            logfire.info("Answer deleted", answer_id=str(answer_id))

    async def accept_answer(self, answer_id: AnswerId) -> QuestionAnswer:
        """Mark an answer as the accepted one for its question.

        Any previously accepted answer to the same question is unaccepted.

        Raises:
            NotFoundError: If answer not found or deleted
        """
        with logfire.span("answer_service.accept_answer", answer_id=str(answer_id)):
            accepted = await self.answer_repository.mark_accepted(answer_id)
            if accepted is None:
                raise NotFoundError("Answer", str(answer_id))
            logfire.info(
                "Answer accepted",
                answer_id=str(answer_id),
                question_id=str(accepted.question_id),
            )
            return accepted

    async def get_accepted_answer(self, question_id: QuestionId) -> QuestionAnswer:
        """Get the accepted answer of a question.

        Raises:
            NotFoundError: If the question has no accepted answer
        """
        with logfire.span(
            "answer_service.get_accepted_answer", question_id=str(question_id)
        ):
            answer = await self.answer_repository.find_accepted(question_id)
            if answer is None:
                raise NotFoundError("Accepted answer for question", str(question_id))
            return answer

    async def _get_active(self, answer_id: AnswerId) -> QuestionAnswer:
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def _build(self, draft: AnswerDraft) -> QuestionAnswer:
        answer = QuestionAnswer.create(
            question_id=draft.question_id, user_id=draft.user_id, content=draft.content
        )
        if not await self.question_repository.find_by_id(answer.question_id):
            raise NotFoundError("Question", str(answer.question_id))
        if not await self.user_repository.find_by_id(answer.user_id):
            raise NotFoundError("User", str(answer.user_id))
        return answer
