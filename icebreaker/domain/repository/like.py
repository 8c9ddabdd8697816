"""Question like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from icebreaker.domain.model.like import QuestionLike
from icebreaker.domain.value import LikeId, QuestionId, UserId


class LikeRepository(ABC):
    """Repository for QuestionLike entity.

    Likes are unique per (question, user) pair and are removed from
    storage on delete.
    """

    @abstractmethod
    async def find_by_id(self, like_id: LikeId) -> Optional[QuestionLike]:
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[QuestionLike]:
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[QuestionLike]:
        pass

    @abstractmethod
    async def find_by_question_and_user(
        self, question_id: QuestionId, user_id: UserId
    ) -> Optional[QuestionLike]:
        """Find a user's like on a question.

        Args:
            question_id: The liked question
            user_id: The liking user

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, question_id: QuestionId, user_id: UserId) -> bool:
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def add(self, like: QuestionLike) -> QuestionLike:
        """Add a like.

        `created_at` and `updated_at` are stamped with the current time
        unless the caller set them explicitly. The duplicate check runs
        under the same lock as the insert.

        Args:
            like: The like to store

        Returns:
            The stored like

        Raises:
            ConflictError: If the user already likes this question
        """
        pass

    @abstractmethod
    async def delete(self, like_id: LikeId) -> bool:
        """Remove a like by ID.

        Returns:
            True if a like was removed, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_question_and_user(
        self, question_id: QuestionId, user_id: UserId
    ) -> bool:
        """Remove a user's like on a question.

        Returns:
            True if a like was removed, False if none existed
        """
        pass
