"""Question like repository over an entity store."""

from typing import Optional

from icebreaker.domain.error import ConflictError
from icebreaker.domain.model.common import utcnow
from icebreaker.domain.model.like import QuestionLike
from icebreaker.domain.repository.like import LikeRepository
from icebreaker.domain.value import LikeId, QuestionId, UserId
from icebreaker.persistence.repository.base import StoreRepository


class StoreLikeRepository(StoreRepository[QuestionLike], LikeRepository):
    """Store-backed implementation of LikeRepository."""

    resource = "Like"

    async def find_by_id(self, like_id: LikeId) -> Optional[QuestionLike]:
        return await self._find_by_id(like_id)

    async def find_by_question(self, question_id: QuestionId) -> list[QuestionLike]:
        likes = await self._active()
        return [like for like in likes if like.question_id == question_id]

    async def find_by_user(self, user_id: UserId) -> list[QuestionLike]:
        likes = await self._active()
        return [like for like in likes if like.user_id == user_id]

    async def find_by_question_and_user(
        self, question_id: QuestionId, user_id: UserId
    ) -> Optional[QuestionLike]:
        for like in await self._active():
            if like.question_id == question_id and like.user_id == user_id:
                return like
        return None

    async def exists(self, question_id: QuestionId, user_id: UserId) -> bool:
        return await self.find_by_question_and_user(question_id, user_id) is not None

    async def count_by_question(self, question_id: QuestionId) -> int:
        return len(await self.find_by_question(question_id))

    async def count_by_user(self, user_id: UserId) -> int:
        return len(await self.find_by_user(user_id))

    async def add(self, like: QuestionLike) -> QuestionLike:
        # Timestamps the caller set explicitly are kept
        now = utcnow()
        stamps = {
            field: now
            for field in ("created_at", "updated_at")
            if field not in like.model_fields_set
        }
        stored = like.model_copy(update=stamps)

        async with self.store.modify() as items:
            if any(
                existing.question_id == like.question_id
                and existing.user_id == like.user_id
                for existing in items
            ):
                raise ConflictError(
                    "Like", "question and user", f"{like.question_id}/{like.user_id}"
                )
            items.append(stored)

        return stored

    async def delete(self, like_id: LikeId) -> bool:
        return await self._hard_delete(lambda like: like.id == like_id)

    async def delete_by_question_and_user(
        self, question_id: QuestionId, user_id: UserId
    ) -> bool:
        return await self._hard_delete(
            lambda like: like.question_id == question_id and like.user_id == user_id
        )
