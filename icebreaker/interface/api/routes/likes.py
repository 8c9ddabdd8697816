"""Question like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from icebreaker.domain.service import LikeService
from icebreaker.domain.value import QuestionId, UserId

router = APIRouter(prefix="/api/likes", tags=["likes"], route_class=DishkaRoute)


class LikeCountResponse(BaseModel):
    """Number of likes."""

    count: int


class LikeStatusResponse(BaseModel):
    """Whether a user likes a question."""

    liked: bool


class LikeChangeResponse(BaseModel):
    """Whether a like/unlike changed anything."""

    changed: bool


class LikedQuestionsResponse(BaseModel):
    """Questions a user has liked."""

    question_ids: list[UUID]


@router.get("/question/{question_id}/count", response_model=LikeCountResponse)
async def get_like_count(
    question_id: UUID, like_service: FromDishka[LikeService]
) -> LikeCountResponse:
    """Count the likes of a question."""
    count = await like_service.get_like_count(QuestionId(question_id))
    return LikeCountResponse(count=count)


@router.get("/user/{user_id}/count", response_model=LikeCountResponse)
async def get_user_like_count(
    user_id: UUID, like_service: FromDishka[LikeService]
) -> LikeCountResponse:
    """Count the likes given by a user."""
    count = await like_service.get_user_like_count(UserId(user_id))
    return LikeCountResponse(count=count)


@router.get("/user/{user_id}/questions", response_model=LikedQuestionsResponse)
async def get_liked_questions(
    user_id: UUID, like_service: FromDishka[LikeService]
) -> LikedQuestionsResponse:
    """List the IDs of questions a user has liked."""
    question_ids = await like_service.get_liked_question_ids(UserId(user_id))
    return LikedQuestionsResponse(question_ids=question_ids)


@router.get("/question/{question_id}/user/{user_id}", response_model=LikeStatusResponse)
async def has_user_liked(
    question_id: UUID, user_id: UUID, like_service: FromDishka[LikeService]
) -> LikeStatusResponse:
    """Check whether a user likes a question."""
    liked = await like_service.has_user_liked(QuestionId(question_id), UserId(user_id))
    return LikeStatusResponse(liked=liked)


@router.post(
    "/question/{question_id}/user/{user_id}", response_model=LikeChangeResponse
)
async def add_like(
    question_id: UUID, user_id: UUID, like_service: FromDishka[LikeService]
) -> LikeChangeResponse:
    """Like a question. Liking twice is a no-op reported as `changed: false`."""
    added = await like_service.add_like(QuestionId(question_id), UserId(user_id))
    return LikeChangeResponse(changed=added)


@router.delete(
    "/question/{question_id}/user/{user_id}", response_model=LikeChangeResponse
)
async def remove_like(
    question_id: UUID, user_id: UUID, like_service: FromDishka[LikeService]
) -> LikeChangeResponse:
    """Remove a like. Reports `changed: false` when there was none."""
    removed = await like_service.remove_like(QuestionId(question_id), UserId(user_id))
    return LikeChangeResponse(changed=removed)
