"""Question like domain service."""

import logfire

from icebreaker.domain.error import ConflictError
from icebreaker.domain.model import QuestionLike
from icebreaker.domain.repository import LikeRepository
from icebreaker.domain.value import QuestionId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for question likes.

    Likes are the source of truth for "has liked". The question's
    like_count counter is not touched here; callers that want it in step
    use QuestionService.increment_like_count/decrement_like_count.
    """

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def add_like(self, question_id: QuestionId, user_id: UserId) -> bool:
        """Like a question.

        Args:
            question_id: Question to like
            user_id: Liking user

        Returns:
            True if the like was added, False if the user already liked it
        """
        with logfire.span(
            "like_service.add_like", question_id=str(question_id), user_id=str(user_id)
        ):
            if await self.like_repository.exists(question_id, user_id):
                logfire.info(
                    "Question already liked",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                return False

            try:
                like = QuestionLike.create(question_id, user_id)
                await self.like_repository.add(like)
            except ConflictError:
                # Another request added the same like after the exists check
                logfire.warn(
                    "Duplicate like attempt",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                return False

            logfire.info(
                "Question liked", question_id=str(question_id), user_id=str(user_id)
            )
            return True

    async def remove_like(self, question_id: QuestionId, user_id: UserId) -> bool:
        """Unlike a question.

        Returns:
            True if a like was removed, False if there was none
        """
        with logfire.span(
            "like_service.remove_like",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            removed = await self.like_repository.delete_by_question_and_user(
                question_id, user_id
            )
            if removed:
                logfire.info(
                    "Like removed", question_id=str(question_id), user_id=str(user_id)
                )
            else:
                logfire.info(
                    "No like to remove",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
            return removed

    async def get_like_count(self, question_id: QuestionId) -> int:
        """Count the likes on a question."""
        return await self.like_repository.count_by_question(question_id)

    async def get_user_like_count(self, user_id: UserId) -> int:
        """Count the likes a user has given."""
        return await self.like_repository.count_by_user(user_id)

    async def has_user_liked(self, question_id: QuestionId, user_id: UserId) -> bool:
        return await self.like_repository.exists(question_id, user_id)

    async def get_liked_question_ids(self, user_id: UserId) -> list[QuestionId]:
        """IDs of the questions a user has liked."""
        likes = await self.like_repository.find_by_user(user_id)
        return [like.question_id for like in likes]
