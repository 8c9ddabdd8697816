"""Question answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from icebreaker.domain.model.answer import QuestionAnswer
from icebreaker.domain.value import AnswerId, PagedResult, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for QuestionAnswer entity.

    Lookups only ever return active answers.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[QuestionAnswer]:
        """Find an active answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found and active, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[QuestionAnswer]:
        """Find active answers to a question, newest first."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[QuestionAnswer]:
        """Find active answers written by a user, newest first."""
        pass

    @abstractmethod
    async def find_accepted(self, question_id: QuestionId) -> Optional[QuestionAnswer]:
        """Find the accepted answer of a question, if any."""
        pass

    @abstractmethod
    async def find_page(
        self,
        page_number: int,
        page_size: int,
        question_id: Optional[QuestionId] = None,
        user_id: Optional[UserId] = None,
    ) -> PagedResult[QuestionAnswer]:
        """Find a page of active answers, newest first.

        Args:
            page_number: 1-based page number
            page_size: Answers per page
            question_id: Only answers to this question
            user_id: Only answers by this user

        Returns:
            Page of answers with the filtered total count
        """
        pass

    @abstractmethod
    async def add(self, answer: QuestionAnswer) -> QuestionAnswer:
        pass

    @abstractmethod
    async def add_bulk(self, answers: Sequence[QuestionAnswer]) -> list[QuestionAnswer]:
        """Add several answers in one write.

        Returns:
            The stored answers, in input order
        """
        pass

    @abstractmethod
    async def update(self, answer: QuestionAnswer) -> QuestionAnswer:
        """Replace the stored answer with the same ID.

        Raises:
            NotFoundError: If no answer with this ID is stored
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Soft-delete an answer.

        Returns:
            True if an active answer was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def mark_accepted(self, answer_id: AnswerId) -> Optional[QuestionAnswer]:
        """Accept one answer and unaccept every other answer to its question.

        Performed as a single locked read-modify-write over the whole answer
        collection, so at most one answer per question is ever accepted.

        Args:
            answer_id: The answer to accept

        Returns:
            The accepted answer, or None if no active answer has this ID
            (nothing is changed in that case)
        """
        pass
