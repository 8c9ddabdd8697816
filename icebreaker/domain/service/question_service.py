"""Question domain service."""

from typing import Optional

import logfire

from icebreaker.domain.error import NotFoundError
from icebreaker.domain.model import Question
from icebreaker.domain.repository import QuestionRepository
from icebreaker.domain.value import QuestionId, TopicId, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations.

    Read paths that join users and topics live in the question use cases;
    this service owns single-question lifecycle and counters.
    """

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def get_by_id(self, question_id: QuestionId) -> Question:
        """Get an active question by ID.

        Raises:
            NotFoundError: If question not found or deleted
        """
        with logfire.span("question_service.get_by_id", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def get_question_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Get an active question by ID, or None."""
        return await self.question_repository.find_by_id(question_id)

    async def create_question(
        self, user_id: UserId, topic_id: TopicId, title: str, content: str
    ) -> Question:
        """Build and store a new question.

        Does not check that the user and topic exist; callers do that first.

        Raises:
            ValidationError: If an id is empty or title/content is blank
        """
        with logfire.span(
            "question_service.create_question",
            user_id=str(user_id),
            topic_id=str(topic_id),
        ):
            question = Question.create(
                user_id=user_id, topic_id=topic_id, title=title, content=content
            )
            created = await self.question_repository.add(question)
            logfire.info("Question created", question_id=str(created.id))
            return created

    async def record_view(self, question: Question) -> Question:
        """Persist one more view of a question that was just read.

        The read and this write are separate repository calls; a concurrent
        update in between can be overwritten.
        """
        with logfire.span("question_service.record_view", question_id=str(question.id)):
            viewed = question.increment_view_count()
            return await self.question_repository.update(viewed)

    async def update_question(
        self,
        question_id: QuestionId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        topic_id: Optional[TopicId] = None,
    ) -> Question:
        """Apply a partial update to an active question.

        Raises:
            NotFoundError: If question not found or deleted
        """
        with logfire.span(
            "question_service.update_question", question_id=str(question_id)
        ):
            question = await self.get_by_id(question_id)
            updated = question.update(title=title, content=content, topic_id=topic_id)
            saved = await self.question_repository.update(updated)
            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def delete_question(self, question_id: QuestionId) -> None:
        """Soft-delete a question.

        Raises:
            NotFoundError: If question not found or already deleted
        """
        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            if not await self.question_repository.delete(question_id):
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            logfire.info("Question deleted", question_id=str(question_id))

    async def increment_like_count(self, question_id: QuestionId) -> Question:
        """Atomically increment a question's like counter.

        Raises:
            NotFoundError: If question not found or deleted
        """
        return self._found(
            question_id,
            await self.question_repository.increment_like_count(question_id),
        )

    async def decrement_like_count(self, question_id: QuestionId) -> Question:
        """Atomically decrement a question's like counter (minimum 0)."""
        return self._found(
            question_id,
            await self.question_repository.decrement_like_count(question_id),
        )

    async def increment_answer_count(self, question_id: QuestionId) -> Question:
        """Atomically increment a question's answer counter."""
        return self._found(
            question_id,
            await self.question_repository.increment_answer_count(question_id),
        )

    async def decrement_answer_count(self, question_id: QuestionId) -> Question:
        """Atomically decrement a question's answer counter (minimum 0)."""
        return self._found(
            question_id,
            await self.question_repository.decrement_answer_count(question_id),
        )

    @staticmethod
    def _found(question_id: QuestionId, question: Optional[Question]) -> Question:
        if question is None:
            raise NotFoundError("Question", str(question_id))
        return question
