"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from icebreaker.domain.model.question import Question
from icebreaker.domain.value import (
    PagedResult,
    QuestionId,
    QuestionSortField,
    SortOrder,
    TopicId,
)


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find an active question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found and active, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        """Find active questions by IDs (batch query).

        Args:
            question_ids: IDs to look up

        Returns:
            Matching active questions; unknown or inactive IDs are omitted
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        page_number: int,
        page_size: int,
        search: Optional[str] = None,
        topic_id: Optional[TopicId] = None,
        sort_by: QuestionSortField = QuestionSortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> PagedResult[Question]:
        """Find a page of active questions.

        Filters are applied first, then ordering, then the page slice.

        Args:
            page_number: 1-based page number
            page_size: Questions per page
            search: Case-insensitive substring of title or content
            topic_id: Only questions under this topic
            sort_by: Field to order by
            sort_order: Ascending or descending

        Returns:
            Page of questions with the filtered total count
        """
        pass

    @abstractmethod
    async def add(self, question: Question) -> Question:
        """Add a question.

        Args:
            question: The question to store

        Returns:
            The stored question
        """
        pass

    @abstractmethod
    async def add_bulk(self, questions: Sequence[Question]) -> list[Question]:
        """Add several questions in one write.

        Args:
            questions: Questions to store

        Returns:
            The stored questions, in input order
        """
        pass

    @abstractmethod
    async def update(self, question: Question) -> Question:
        """Replace the stored question with the same ID.

        Args:
            question: The updated question

        Returns:
            The stored question

        Raises:
            NotFoundError: If no question with this ID is stored
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Soft-delete a question.

        Args:
            question_id: The question to delete

        Returns:
            True if an active question was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def increment_like_count(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment the like counter by 1.

        Returns:
            The updated question, or None if no active question has this ID
        """
        pass

    @abstractmethod
    async def decrement_like_count(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically decrement the like counter by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def increment_answer_count(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Atomically increment the answer counter by 1."""
        pass

    @abstractmethod
    async def decrement_answer_count(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Atomically decrement the answer counter by 1 (minimum 0)."""
        pass
